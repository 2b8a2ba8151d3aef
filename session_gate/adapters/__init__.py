"""
Adapters - Implementations of ports.

Tokens:
- JWTTokenAdapter: Signed JWT bearer tokens

Credential Store:
- MemoryUserStore: In-memory users (testing, single process)
- RedisUserStore: Redis-backed users

Passwords:
- BcryptPasswordHasher: bcrypt hashing

Client Token Storage:
- FileTokenStorage: JSON file on disk
- MemoryTokenStorage: In-memory (testing)
"""

# Tokens
from session_gate.adapters.jwt_token import JWTTokenAdapter

# Credential Store
from session_gate.adapters.memory_user_store import MemoryUserStore
from session_gate.adapters.redis_user_store import RedisUserStore

# Passwords
from session_gate.adapters.bcrypt_password import BcryptPasswordHasher

# Client Token Storage
from session_gate.adapters.file_token_storage import FileTokenStorage
from session_gate.adapters.memory_token_storage import MemoryTokenStorage

__all__ = [
    # Tokens
    "JWTTokenAdapter",
    # Credential Store
    "MemoryUserStore",
    "RedisUserStore",
    # Passwords
    "BcryptPasswordHasher",
    # Client Token Storage
    "FileTokenStorage",
    "MemoryTokenStorage",
]
