"""
Shared fixtures: fast bcrypt, in-memory users, fixed JWT secret.
"""

import pytest
from fastapi.testclient import TestClient

from session_gate.api import build_boundary, create_app
from session_gate.config import Settings


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        jwt_secret="test-secret-key",
        bcrypt_rounds=4,
        redis_url="",
        frontend_url="http://localhost:5173",
        token_expiry_seconds=3600,
    )


@pytest.fixture
def boundary(settings):
    return build_boundary(settings)


@pytest.fixture
def app(settings, boundary):
    return create_app(settings, boundary)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def alice():
    return {
        "username": "alice",
        "firstname": "A",
        "lastname": "L",
        "password": "pw1",
    }
