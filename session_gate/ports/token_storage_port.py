"""
Token Storage Port - Client-side durable storage for the bearer token.

Implementations:
- FileTokenStorage: JSON file under the user's home directory
- MemoryTokenStorage: In-process (testing only)
"""

from abc import ABC, abstractmethod
from typing import Optional


class TokenStoragePort(ABC):
    """Port: One named durable key holding the raw token string."""

    @abstractmethod
    def load(self) -> Optional[str]:
        """
        Read the stored token.

        Returns:
            Token if stored, None otherwise (absence means logged out)
        """
        pass

    @abstractmethod
    def save(self, token: str) -> None:
        """
        Store a token, replacing any previous one.

        Args:
            token: Raw bearer token
        """
        pass

    @abstractmethod
    def delete(self) -> bool:
        """
        Forget the stored token.

        Returns:
            True if a token was removed, False if none was stored
        """
        pass
