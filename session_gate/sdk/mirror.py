"""
Session Mirror - Client-side view of who is logged in.

Keeps a local {token, identity} pair consistent with the server without
ever being the source of truth: identity only comes from GET /user/me.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import httpx

from session_gate.adapters.file_token_storage import FileTokenStorage
from session_gate.config import Settings
from session_gate.domain.session import Session
from session_gate.errors import NetworkFailure
from session_gate.ports.token_storage_port import TokenStoragePort

logger = logging.getLogger(__name__)

HOME_ROUTE = "/"
PROFILE_ROUTE = "/profile"
SUCCESS_ROUTE = "/success"

STORAGE_FAILED_MESSAGE = "Could not store login token"


class SessionMirror:
    """
    Client session state with a defined lifecycle.

    Created once at application start, bootstrapped once, mutated only by
    login / register / logout, and closed at exit.

    Example:
        from session_gate import SessionMirror
        from session_gate.adapters import FileTokenStorage

        async with SessionMirror(
            storage=FileTokenStorage("~/.session_gate/token.json"),
            base_url="http://localhost:3000",
            navigate=router.go,
        ) as mirror:
            await mirror.bootstrap()

            error = await mirror.login("alice", "pw1")
            if error:
                show(error)

            mirror.logout()
    """

    def __init__(
        self,
        storage: TokenStoragePort,
        base_url: str = "http://localhost:3000",
        navigate: Optional[Callable[[str], Any]] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the mirror.

        Args:
            storage: Durable storage for the bearer token
            base_url: Backend base address
            navigate: Called with a route path on view transitions
            timeout: Per-request timeout in seconds
            transport: Custom httpx transport (e.g. ASGITransport in tests)
        """
        self._storage = storage
        self._navigate = navigate
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )
        self._session = Session()
        self._bootstrapped = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        navigate: Optional[Callable[[str], Any]] = None,
    ) -> "SessionMirror":
        """Build a mirror that stores its token in a file."""
        return cls(
            storage=FileTokenStorage(settings.token_storage_path),
            base_url=settings.backend_url,
            navigate=navigate,
            timeout=settings.client_timeout_seconds,
        )

    # ── State ──────────────────────────────────────────────────────────

    @property
    def session(self) -> Session:
        return self._session

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        """Current identity, or None when logged out or unverified."""
        return self._session.identity

    # ── Operations ─────────────────────────────────────────────────────

    async def bootstrap(self):
        """
        Restore the session from storage, once per mirror.

        No stored token: stays logged out without touching the network.
        Stored token rejected by the server: token is discarded.
        Server unreachable: identity stays None, token is kept.
        A login or logout that lands while the profile request is in
        flight wins; the late answer is dropped.
        """
        if self._bootstrapped:
            return
        self._bootstrapped = True

        token = self._storage.load()
        if not token:
            self._session.clear()
            return

        self._session.establish(token)
        try:
            user = await self._fetch_profile(token)
        except NetworkFailure as exc:
            logger.error("Error fetching /user/me: %s", exc)
            return

        if self._session.token != token:
            logger.debug("Session changed during bootstrap, dropping stale profile")
            return

        if user is None:
            logger.info("Stored token rejected, discarding it")
            self._discard(token)
            self._session.clear()
            return

        self._session.identify(user)

    async def login(self, username: str, password: str) -> Optional[str]:
        """
        Log in with username and password.

        On success stores the token, then fetches the profile, then
        navigates to the profile view even if the profile fetch failed.
        A logout (or another login) during the profile fetch supersedes
        this one: the session is left as that call set it.

        Args:
            username: Username
            password: Password

        Returns:
            None on success, otherwise a message to display
        """
        try:
            res, data = await self._request(
                "POST", "/login", json={"username": username, "password": password}
            )
            if not res.is_success:
                return data.get("message") or "Login failed"

            token = data.get("token")
            if not isinstance(token, str) or not token:
                raise NetworkFailure("login response carried no token")
        except NetworkFailure as exc:
            logger.error("Login network error: %s", exc)
            return "Network error while logging in"

        # Token must be persisted before the profile request goes out.
        try:
            self._storage.save(token)
        except OSError as exc:
            logger.error("Could not store login token: %s", exc)
            return STORAGE_FAILED_MESSAGE
        self._session.establish(token)

        try:
            user = await self._fetch_profile(token)
        except NetworkFailure as exc:
            logger.error("Error fetching profile after login: %s", exc)
            user = None

        if self._session.token != token:
            logger.info("Session changed during login, not applying profile")
            return None

        if user is not None:
            self._session.identify(user)

        self._go(PROFILE_ROUTE)
        return None

    async def register(self, fields: Mapping[str, Any]) -> Optional[str]:
        """
        Register a new user. Does not log in.

        Args:
            fields: {username, firstname, lastname, password}

        Returns:
            None on success, otherwise a message to display
        """
        try:
            res, data = await self._request("POST", "/register", json=dict(fields))
        except NetworkFailure as exc:
            logger.error("Register network error: %s", exc)
            return "Network error while registering"

        if not res.is_success:
            return data.get("message") or "Registration failed"

        self._go(SUCCESS_ROUTE)
        return None

    def logout(self):
        """Forget the token locally and go home. Never calls the server."""
        self._delete_token()
        self._session.clear()
        self._go(HOME_ROUTE)

    # ── Lifecycle ──────────────────────────────────────────────────────

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self) -> "SessionMirror":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    # ── Internals ──────────────────────────────────────────────────────

    async def _request(self, method: str, path: str, **kwargs) -> Tuple[httpx.Response, Dict[str, Any]]:
        """
        Send a request, converting transport and decoding errors.

        Raises:
            NetworkFailure: If no response arrived or the body is not JSON
        """
        try:
            res = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise NetworkFailure(str(exc) or exc.__class__.__name__) from exc

        try:
            data = res.json()
        except ValueError as exc:
            raise NetworkFailure(f"undecodable response from {path}") from exc

        if not isinstance(data, dict):
            raise NetworkFailure(f"unexpected response from {path}")
        return res, data

    async def _fetch_profile(self, token: str) -> Optional[Dict[str, Any]]:
        """
        GET /user/me with a bearer token.

        Returns:
            The user projection, or None if the server rejected the token

        Raises:
            NetworkFailure: If the server could not be reached
        """
        try:
            res = await self._client.get(
                "/user/me", headers={"Authorization": f"Bearer {token}"}
            )
        except httpx.HTTPError as exc:
            raise NetworkFailure(str(exc) or exc.__class__.__name__) from exc

        if not res.is_success:
            return None

        try:
            data = res.json()
        except ValueError as exc:
            raise NetworkFailure("undecodable response from /user/me") from exc

        user = data.get("user") if isinstance(data, dict) else None
        if not isinstance(user, dict):
            raise NetworkFailure("unexpected response from /user/me")
        return user

    def _discard(self, token: str):
        """Delete the stored token only if it is still the given one."""
        if self._storage.load() == token:
            self._delete_token()

    def _delete_token(self):
        try:
            self._storage.delete()
        except OSError as exc:
            logger.error("Could not delete stored token: %s", exc)

    def _go(self, route: str):
        if self._navigate is not None:
            self._navigate(route)
