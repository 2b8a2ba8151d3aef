"""
User Store Port - Interface for the credential store.

Implementations:
- MemoryUserStore: In-process dict (testing, single process)
- RedisUserStore: Redis hash (shared across workers)
"""

from abc import ABC, abstractmethod
from typing import Optional
from session_gate.domain.user import User


class UserStorePort(ABC):
    """Port: Persist and look up registered users."""

    @abstractmethod
    def add(self, user: User) -> None:
        """
        Insert a new user.

        The uniqueness check and the insert must be a single atomic step:
        of two concurrent adds for the same username exactly one succeeds.

        Args:
            user: User to insert

        Raises:
            Conflict: If the username is already taken
        """
        pass

    @abstractmethod
    def get(self, username: str) -> Optional[User]:
        """
        Look up a user by username.

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    def exists(self, username: str) -> bool:
        """
        Check whether a username is registered.

        Args:
            username: Username

        Returns:
            True if registered
        """
        pass
