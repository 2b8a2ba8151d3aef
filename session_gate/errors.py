"""
Auth Errors - Failure taxonomy shared by the boundary, the API and the client.

Server-side errors carry the HTTP status they map to. NetworkFailure is only
ever observed by the client and has no status.
"""

from typing import Optional


class AuthError(Exception):
    """Base class for all session-gate failures."""

    status_code: Optional[int] = None
    default_message = "Authentication error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(AuthError):
    """Registration or login payload is missing fields or malformed."""

    status_code = 400
    default_message = "Invalid input"


class Conflict(AuthError):
    """Username is already registered."""

    status_code = 409
    default_message = "Username already exists"


class Unauthorized(AuthError):
    """
    Bad credentials or a missing/expired/invalid token.

    Deliberately undifferentiated: callers never learn which check failed.
    """

    status_code = 401
    default_message = "Unauthorized"


class NetworkFailure(AuthError):
    """Transport error seen by the client (no server response)."""

    default_message = "Network error"
