"""
Password Port - Interface for deriving and checking password secrets.

Implementations:
- BcryptPasswordHasher: bcrypt with per-hash salt
"""

from abc import ABC, abstractmethod


class PasswordHasherPort(ABC):
    """Port: One-way password derivation."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Derive the stored secret for a password.

        Args:
            password: Plain-text password

        Returns:
            Encoded hash, safe to persist
        """
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a password against a stored secret.

        Args:
            password: Plain-text password
            password_hash: Previously stored hash

        Returns:
            True if they match, False otherwise (never raises on bad hashes)
        """
        pass
