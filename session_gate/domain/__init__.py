"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from session_gate.domain.user import User
from session_gate.domain.session import Session, SessionState
from session_gate.domain.credential import (
    Credential,
    VerificationResult,
    VerificationStatus,
)

__all__ = [
    "User",
    "Session",
    "SessionState",
    "Credential",
    "VerificationResult",
    "VerificationStatus",
]
