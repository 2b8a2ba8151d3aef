"""
Token Port - Interface for issuing and verifying bearer tokens.

Implementations:
- JWTTokenAdapter: signed JWTs (PyJWT)
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple
from session_gate.domain.credential import Credential, VerificationStatus


class TokenPort(ABC):
    """Port: Mint and check bearer credentials."""

    @abstractmethod
    def issue(self, subject: str, expires_in: Optional[int] = None) -> Credential:
        """
        Issue a token bound to a subject.

        Args:
            subject: Identity the token asserts (the username)
            expires_in: Validity window in seconds (adapter default if None)

        Returns:
            Issued credential
        """
        pass

    @abstractmethod
    def decode(self, token: str) -> Tuple[VerificationStatus, Optional[str]]:
        """
        Check a token's integrity and validity window.

        Args:
            token: Raw bearer token

        Returns:
            (status, subject). subject is only set when status is VALID.
        """
        pass
