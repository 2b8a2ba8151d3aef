"""
Credential Domain Model - Bearer tokens and their verification outcome.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from datetime import datetime
from enum import Enum

from session_gate.domain.user import User


class VerificationStatus(Enum):
    """Outcome of checking a bearer token."""
    VALID = "valid"        # signature intact, inside validity window
    EXPIRED = "expired"    # validity window elapsed
    INVALID = "invalid"    # missing, malformed, bad signature or unknown subject


@dataclass(frozen=True)
class Credential:
    """
    Credential entity - an issued bearer token.

    Domain rules:
    - token is opaque to everyone except the issuer
    - expires_at is fixed at issuance (no refresh, no server-side revocation)
    """
    token: str
    subject: str
    issued_at: datetime
    expires_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Wire form returned by POST /login."""
        return {"token": self.token}


@dataclass(frozen=True)
class VerificationResult:
    """
    Tagged result of verifying a token.

    identity is set if and only if status is VALID.
    """
    status: VerificationStatus
    identity: Optional[User] = None
    reason: Optional[str] = None

    @classmethod
    def valid(cls, identity: User) -> "VerificationResult":
        return cls(status=VerificationStatus.VALID, identity=identity)

    @classmethod
    def expired(cls) -> "VerificationResult":
        return cls(status=VerificationStatus.EXPIRED, reason="token expired")

    @classmethod
    def invalid(cls, reason: str = "invalid token") -> "VerificationResult":
        return cls(status=VerificationStatus.INVALID, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status is VerificationStatus.VALID
