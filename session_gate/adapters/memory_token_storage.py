"""
Memory Token Storage - In-process client token storage (testing only).
"""

from typing import Optional
from session_gate.ports.token_storage_port import TokenStoragePort


class MemoryTokenStorage(TokenStoragePort):
    """
    In-memory token storage.

    WARNING: Only for testing. The token is lost when the process exits.
    """

    def __init__(self, token: Optional[str] = None):
        """Initialize, optionally with a pre-stored token."""
        self._token = token

    def load(self) -> Optional[str]:
        return self._token

    def save(self, token: str) -> None:
        self._token = token

    def delete(self) -> bool:
        if self._token is None:
            return False
        self._token = None
        return True
