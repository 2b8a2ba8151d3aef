"""
SDK - Client-side session mirror.
"""

from session_gate.sdk.mirror import (
    HOME_ROUTE,
    PROFILE_ROUTE,
    SUCCESS_ROUTE,
    SessionMirror,
)

__all__ = [
    "SessionMirror",
    "HOME_ROUTE",
    "PROFILE_ROUTE",
    "SUCCESS_ROUTE",
]
