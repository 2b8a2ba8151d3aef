"""
Memory User Store - In-memory credential store (testing, single process).
"""

import threading
from typing import Optional, Dict
from session_gate.ports.user_store_port import UserStorePort
from session_gate.domain.user import User
from session_gate.errors import Conflict


class MemoryUserStore(UserStorePort):
    """
    In-memory user storage.

    WARNING: Users are lost on restart and not shared between processes.
    Safe for concurrent request threads within one process.
    """

    def __init__(self):
        """Initialize in-memory storage."""
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    def add(self, user: User) -> None:
        """Insert a user; check and insert happen under one lock."""
        with self._lock:
            if user.username in self._users:
                raise Conflict()
            self._users[user.username] = user

    def get(self, username: str) -> Optional[User]:
        """Get a user from memory."""
        return self._users.get(username)

    def exists(self, username: str) -> bool:
        """Check whether a username is registered."""
        return username in self._users
