"""
Bcrypt Password Adapter - Implements PasswordHasherPort with bcrypt.
"""

import bcrypt
from session_gate.ports.password_port import PasswordHasherPort


class BcryptPasswordHasher(PasswordHasherPort):
    """
    bcrypt password hashing with automatic salting.

    bcrypt only looks at the first 72 bytes of a password; longer inputs
    are rejected upstream by registration validation.
    """

    def __init__(self, rounds: int = 12):
        """
        Initialize hasher.

        Args:
            rounds: bcrypt work factor (4-31)
        """
        if not 4 <= rounds <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password (auto-salted)."""
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except (ValueError, TypeError):
            return False
