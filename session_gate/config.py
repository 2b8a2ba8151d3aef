"""
Application settings loaded from environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Server ───────────────────────────────────────────────────────────
    frontend_url: str = "http://localhost:5173"    # only origin allowed by CORS
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False

    # ── Tokens ───────────────────────────────────────────────────────────
    jwt_secret: str = "change-me-jwt-secret"
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "session-gate"
    token_expiry_seconds: int = 3600

    # ── Credential store ─────────────────────────────────────────────────
    bcrypt_rounds: int = 12
    redis_url: str = ""                             # empty: in-memory users
    redis_prefix: str = "session-gate:"

    # ── Client ───────────────────────────────────────────────────────────
    backend_url: str = "http://localhost:3000"
    token_storage_path: str = str(Path.home() / ".session_gate" / "token.json")
    client_timeout_seconds: float = 10.0

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings()
