"""
User Domain Model - Registered identity.
"""

from dataclasses import dataclass, field
from typing import Dict, Any
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    """
    User entity - a registered identity.

    Domain rules:
    - username is unique (enforced by the user store)
    - a user is immutable once created (no update or delete)
    - password_hash never leaves the server (excluded from to_dict())
    """
    username: str
    firstname: str
    lastname: str
    password_hash: str = field(repr=False)
    created_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        """Safe projection returned to clients."""
        return {
            "username": self.username,
            "firstname": self.firstname,
            "lastname": self.lastname,
            "created_at": self.created_at.isoformat(),
        }

    def to_record(self) -> Dict[str, Any]:
        """Full record, including the password hash, for user stores."""
        record = self.to_dict()
        record["password_hash"] = self.password_hash
        return record

    @classmethod
    def from_record(cls, data: Dict[str, Any]) -> "User":
        """Deserialize a stored record."""
        return cls(
            username=data["username"],
            firstname=data["firstname"],
            lastname=data["lastname"],
            password_hash=data["password_hash"],
            created_at=datetime.fromisoformat(data["created_at"]) if data.get("created_at") else _utcnow(),
        )
