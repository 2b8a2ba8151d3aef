"""
FastAPI dependencies for authentication.

Provides ``get_boundary`` and ``get_current_user``, used by the routes.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from session_gate.boundary import SessionBoundary
from session_gate.domain.user import User
from session_gate.errors import Unauthorized

# auto_error=False so a missing header goes through our own 401 {message} path.
_bearer_scheme = HTTPBearer(auto_error=False)


def get_boundary(request: Request) -> SessionBoundary:
    """The boundary instance wired into the running app."""
    return request.app.state.boundary


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    boundary: SessionBoundary = Depends(get_boundary),
) -> User:
    """
    Extract and verify the Bearer token, returning the authenticated user.

    Raises ``Unauthorized`` when the header is missing, uses another scheme,
    or carries a token that does not verify.
    """
    if credentials is None:
        raise Unauthorized()
    return boundary.verify_and_identify(credentials.credentials)
