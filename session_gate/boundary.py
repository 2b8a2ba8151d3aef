"""
Session Boundary - Decides who is authenticated for a request.

Register, login and token verification on top of three ports: the user
store, the token issuer and the password hasher. Failures are raised as
session_gate.errors and leave no partial writes behind.
"""

import logging
import re
import secrets
from typing import Any, Dict, Mapping, Optional

from session_gate.domain.credential import Credential, VerificationResult, VerificationStatus
from session_gate.domain.user import User
from session_gate.errors import Conflict, InvalidInput, Unauthorized
from session_gate.ports.password_port import PasswordHasherPort
from session_gate.ports.token_port import TokenPort
from session_gate.ports.user_store_port import UserStorePort

logger = logging.getLogger(__name__)

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{3,32}$")
NAME_MAX_LENGTH = 64
PASSWORD_MAX_BYTES = 72     # bcrypt ignores anything past this

LOGIN_FAILED_MESSAGE = "Invalid username or password"


class SessionBoundary:
    """
    Server-side session contract.

    Example:
        boundary = SessionBoundary(
            users=MemoryUserStore(),
            tokens=JWTTokenAdapter(secret="secret"),
            passwords=BcryptPasswordHasher(),
        )

        boundary.register({"username": "alice", "firstname": "Alice",
                           "lastname": "Liddell", "password": "pw1"})
        credential = boundary.login("alice", "pw1")
        user = boundary.verify_and_identify(credential.token)
    """

    def __init__(
        self,
        users: UserStorePort,
        tokens: TokenPort,
        passwords: PasswordHasherPort,
    ):
        """
        Initialize the boundary with its collaborators.

        Args:
            users: Credential store
            tokens: Token issuer/verifier
            passwords: Password hasher
        """
        self._users = users
        self._tokens = tokens
        self._passwords = passwords
        self._dummy_hash: Optional[str] = None

    # ── Register ───────────────────────────────────────────────────────

    def register(self, fields: Mapping[str, Any]) -> User:
        """
        Create a new user.

        Does not issue a credential; the client logs in separately.

        Args:
            fields: {username, firstname, lastname, password}

        Returns:
            The created user

        Raises:
            InvalidInput: If a field is missing or malformed
            Conflict: If the username is already registered
        """
        cleaned = self._validate_registration(fields)

        # Skip the hashing cost for names that are already taken.
        if self._users.exists(cleaned["username"]):
            raise Conflict()

        user = User(
            username=cleaned["username"],
            firstname=cleaned["firstname"],
            lastname=cleaned["lastname"],
            password_hash=self._passwords.hash(cleaned["password"]),
        )

        # Uniqueness is decided by the store, atomically.
        self._users.add(user)

        logger.info("Registered user %s", user.username)
        return user

    @staticmethod
    def _validate_registration(fields: Mapping[str, Any]) -> Dict[str, str]:
        if not isinstance(fields, Mapping):
            raise InvalidInput("Request body must be a JSON object")

        cleaned: Dict[str, str] = {}
        for name in ("username", "firstname", "lastname", "password"):
            value = fields.get(name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidInput(f"Missing required field: {name}")
            cleaned[name] = value if name == "password" else value.strip()

        if not USERNAME_PATTERN.match(cleaned["username"]):
            raise InvalidInput(
                "Username must be 3-32 characters of letters, digits, '.', '_' or '-'"
            )

        for name in ("firstname", "lastname"):
            if len(cleaned[name]) > NAME_MAX_LENGTH:
                raise InvalidInput(f"{name} must be at most {NAME_MAX_LENGTH} characters")

        if len(cleaned["password"].encode()) > PASSWORD_MAX_BYTES:
            raise InvalidInput(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")

        return cleaned

    # ── Login ──────────────────────────────────────────────────────────

    def login(self, username: Any, password: Any) -> Credential:
        """
        Check a username/password pair and issue a fresh token.

        Unknown user and wrong password fail identically.

        Args:
            username: Username
            password: Plain-text password

        Returns:
            Issued credential

        Raises:
            Unauthorized: If the pair does not match a registered user
        """
        if not isinstance(username, str) or not isinstance(password, str):
            raise Unauthorized(LOGIN_FAILED_MESSAGE)

        username = username.strip()
        if not username:
            raise Unauthorized(LOGIN_FAILED_MESSAGE)

        user = self._users.get(username)
        if user is None:
            # Spend the same hashing time as a real check.
            self._passwords.verify(password, self._get_dummy_hash())
            logger.warning("Failed login for %s", username)
            raise Unauthorized(LOGIN_FAILED_MESSAGE)

        if not self._passwords.verify(password, user.password_hash):
            logger.warning("Failed login for %s", username)
            raise Unauthorized(LOGIN_FAILED_MESSAGE)

        credential = self._tokens.issue(user.username)
        logger.info("Login: %s", user.username)
        return credential

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._passwords.hash(secrets.token_urlsafe(16))
        return self._dummy_hash

    # ── Verify ─────────────────────────────────────────────────────────

    def verify(self, token: Optional[str]) -> VerificationResult:
        """
        Resolve a bearer token to an identity.

        Args:
            token: Raw bearer token (None or empty counts as invalid)

        Returns:
            VALID with the stored user, EXPIRED, or INVALID
        """
        if not token:
            return VerificationResult.invalid("missing token")

        status, subject = self._tokens.decode(token)
        if status is VerificationStatus.EXPIRED:
            return VerificationResult.expired()
        if status is not VerificationStatus.VALID or subject is None:
            return VerificationResult.invalid()

        user = self._users.get(subject)
        if user is None:
            return VerificationResult.invalid("unknown subject")

        return VerificationResult.valid(user)

    def verify_and_identify(self, token: Optional[str]) -> User:
        """
        Verify a token, returning the bound user.

        Args:
            token: Raw bearer token

        Returns:
            The user the token is bound to

        Raises:
            Unauthorized: If the token is missing, malformed, expired or
                fails its integrity check
        """
        result = self.verify(token)
        if not result.ok:
            logger.debug("Token rejected: %s", result.reason)
            raise Unauthorized()
        return result.identity
