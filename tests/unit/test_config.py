"""
Unit tests for settings and server wiring.
"""

import logging
import socket

import pytest
from session_gate import server
from session_gate.adapters import MemoryUserStore, RedisUserStore
from session_gate.api import build_boundary
from session_gate.config import Settings


def test_defaults(monkeypatch):
    """Test documented fallbacks apply when the environment is empty."""
    for name in ("FRONTEND_URL", "PORT", "BACKEND_URL", "REDIS_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)
    assert settings.frontend_url == "http://localhost:5173"
    assert settings.port == 3000
    assert settings.backend_url == "http://localhost:3000"
    assert settings.redis_url == ""


def test_environment_overrides(monkeypatch):
    """Test environment variables take precedence."""
    monkeypatch.setenv("FRONTEND_URL", "https://app.example.com")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("TOKEN_EXPIRY_SECONDS", "60")

    settings = Settings(_env_file=None)
    assert settings.frontend_url == "https://app.example.com"
    assert settings.port == 8080
    assert settings.token_expiry_seconds == 60


def test_build_boundary_picks_store(settings):
    """Test REDIS_URL switches the user store."""
    assert isinstance(build_boundary(settings)._users, MemoryUserStore)

    redis_settings = settings.model_copy(update={"redis_url": "redis://localhost:6379/0"})
    assert isinstance(build_boundary(redis_settings)._users, RedisUserStore)


def test_server_exits_when_port_unavailable(settings, caplog):
    """Test a port already in use logs the failure and exits with status 1."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as taken:
        taken.bind(("127.0.0.1", 0))
        taken.listen(1)
        port = taken.getsockname()[1]

        with pytest.raises(SystemExit) as exc_info:
            server.main(settings.model_copy(update={"host": "127.0.0.1", "port": port}))

    assert exc_info.value.code == 1
    assert "cannot start server" in caplog.text
    assert "Server running" not in caplog.text


def test_server_reports_port_once_listening(settings, caplog, monkeypatch):
    """Test the running message names the port actually bound."""
    bound = []
    original_startup = server.GateServer.startup

    async def startup_then_stop(self, sockets=None):
        await original_startup(self, sockets=sockets)
        bound.append(sockets[0].getsockname()[1])
        self.should_exit = True

    monkeypatch.setattr(server.GateServer, "startup", startup_then_stop)
    caplog.set_level(logging.INFO, logger="session_gate.server")

    server.main(settings.model_copy(update={"host": "127.0.0.1", "port": 0}))

    assert bound and bound[0] != 0
    assert f"Server running on port {bound[0]}" in caplog.text
