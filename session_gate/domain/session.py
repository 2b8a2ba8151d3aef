"""
Session Domain Model - Client-observed authentication state.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from enum import Enum


class SessionState(Enum):
    """Derived client session states."""
    ANONYMOUS = "anonymous"            # no stored token
    PENDING = "pending"                # token stored, identity not (yet) verified
    AUTHENTICATED = "authenticated"    # token verified, identity known


@dataclass
class Session:
    """
    Session - the {token, identity} pair held by the client.

    Domain rules:
    - identity is only ever set from a successful /user/me round trip
    - identity is None whenever token is None
    """
    token: Optional[str] = None
    identity: Optional[Dict[str, Any]] = field(default=None)

    @property
    def state(self) -> SessionState:
        if self.token is None:
            return SessionState.ANONYMOUS
        if self.identity is None:
            return SessionState.PENDING
        return SessionState.AUTHENTICATED

    @property
    def is_authenticated(self) -> bool:
        return self.state is SessionState.AUTHENTICATED

    def establish(self, token: str):
        """Adopt a freshly issued token; identity waits for verification."""
        self.token = token
        self.identity = None

    def identify(self, identity: Dict[str, Any]):
        """Record the identity returned by a successful verification."""
        if self.token is None:
            raise ValueError("cannot identify a session without a token")
        self.identity = identity

    def clear(self):
        """Forget token and identity."""
        self.token = None
        self.identity = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict (token is never included)."""
        return {
            "state": self.state.value,
            "user": self.identity,
        }
