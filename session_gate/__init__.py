"""
Session Gate - Username/password login with bearer tokens.

Hexagonal architecture: a server-side session boundary that registers users,
issues bearer tokens and resolves them back to identities, plus a client-side
session mirror that keeps a local view of who is logged in.

Usage:
    from session_gate import SessionBoundary
    from session_gate.adapters import (
        BcryptPasswordHasher,
        JWTTokenAdapter,
        MemoryUserStore,
    )

    boundary = SessionBoundary(
        users=MemoryUserStore(),
        tokens=JWTTokenAdapter(secret="your-secret"),
        passwords=BcryptPasswordHasher(),
    )

    boundary.register({"username": "alice", "firstname": "Alice",
                       "lastname": "Liddell", "password": "pw1"})
    credential = boundary.login("alice", "pw1")
    user = boundary.verify_and_identify(credential.token)
"""

__version__ = "0.1.0"

from session_gate.boundary import SessionBoundary
from session_gate.domain.user import User
from session_gate.domain.session import Session, SessionState
from session_gate.domain.credential import (
    Credential,
    VerificationResult,
    VerificationStatus,
)
from session_gate.errors import (
    AuthError,
    Conflict,
    InvalidInput,
    NetworkFailure,
    Unauthorized,
)
from session_gate.sdk.mirror import SessionMirror

__all__ = [
    "SessionBoundary",
    "SessionMirror",
    "User",
    "Session",
    "SessionState",
    "Credential",
    "VerificationResult",
    "VerificationStatus",
    "AuthError",
    "Conflict",
    "InvalidInput",
    "NetworkFailure",
    "Unauthorized",
]
