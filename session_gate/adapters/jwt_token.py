"""
JWT Token Adapter - Implements TokenPort with signed JWTs.
"""

import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple
from session_gate.ports.token_port import TokenPort
from session_gate.domain.credential import Credential, VerificationStatus


class JWTTokenAdapter(TokenPort):
    """
    JWT-based token adapter.

    Uses PyJWT for token creation and verification. Tokens carry the
    username as `sub` and nothing else that grants authority.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        issuer: str = "session-gate",
        expires_in: int = 3600,
    ):
        """
        Initialize JWT adapter.

        Args:
            secret: JWT signing secret
            algorithm: JWT algorithm (default HS256)
            issuer: Token issuer claim
            expires_in: Default validity window in seconds
        """
        if not secret:
            raise ValueError("JWT secret must not be empty")

        self._secret = secret
        self._algorithm = algorithm
        self._issuer = issuer
        self._expires_in = expires_in

    def issue(self, subject: str, expires_in: Optional[int] = None) -> Credential:
        """
        Create a signed JWT for a subject.

        Args:
            subject: Username the token is bound to
            expires_in: Token expiration in seconds

        Returns:
            Credential wrapping the encoded token
        """
        if expires_in is None:
            expires_in = self._expires_in

        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(seconds=expires_in)
        payload = {
            "sub": subject,
            "iat": now,
            "exp": expires_at,
            "iss": self._issuer,
        }

        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return Credential(
            token=token,
            subject=subject,
            issued_at=now,
            expires_at=expires_at,
        )

    def decode(self, token: str) -> Tuple[VerificationStatus, Optional[str]]:
        """
        Verify a JWT.

        Args:
            token: JWT token string

        Returns:
            (status, subject); subject is None unless status is VALID
        """
        if not token:
            return VerificationStatus.INVALID, None

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            return VerificationStatus.EXPIRED, None
        except jwt.InvalidTokenError:
            return VerificationStatus.INVALID, None

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            return VerificationStatus.INVALID, None

        return VerificationStatus.VALID, subject
