"""
Ports - Interfaces for tokens, users, passwords and client token storage.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from session_gate.ports.token_port import TokenPort
from session_gate.ports.user_store_port import UserStorePort
from session_gate.ports.password_port import PasswordHasherPort
from session_gate.ports.token_storage_port import TokenStoragePort

__all__ = [
    # Server side
    "TokenPort",
    "UserStorePort",
    "PasswordHasherPort",
    # Client side
    "TokenStoragePort",
]
