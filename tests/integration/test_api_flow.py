"""
Integration tests for the HTTP API.

Runs the full stack in-process: FastAPI app -> boundary -> adapters.
"""

import asyncio

import httpx
import pytest
from session_gate.adapters import JWTTokenAdapter


def test_health(client):
    """Test the health endpoint needs no auth."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_register_login_me(client, alice):
    """Test register -> login -> /user/me end to end."""
    response = client.post("/register", json=alice)
    assert response.status_code == 201
    assert response.json()["user"]["username"] == "alice"
    assert "token" not in response.json()

    response = client.post("/login", json={"username": "alice", "password": "pw1"})
    assert response.status_code == 200
    token = response.json()["token"]
    assert token

    response = client.get("/user/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["username"] == "alice"
    assert user["firstname"] == "A"
    assert user["lastname"] == "L"
    assert "password" not in user
    assert "password_hash" not in user


def test_login_wrong_password(client, alice):
    """Test a wrong password yields 401 {message} and no token."""
    client.post("/register", json=alice)

    response = client.post("/login", json={"username": "alice", "password": "wrong"})
    assert response.status_code == 401
    body = response.json()
    assert body["message"]
    assert "token" not in body


def test_login_failures_indistinguishable(client, alice):
    """Test unknown user and wrong password produce identical responses."""
    client.post("/register", json=alice)

    wrong_password = client.post("/login", json={"username": "alice", "password": "wrong"})
    unknown_user = client.post("/login", json={"username": "nobody", "password": "pw1"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()


def test_register_duplicate(client, alice):
    """Test registering a taken username is 409 {message}."""
    assert client.post("/register", json=alice).status_code == 201

    response = client.post("/register", json=dict(alice, password="other"))
    assert response.status_code == 409
    assert response.json()["message"] == "Username already exists"

    # The original password still works: nothing was overwritten.
    response = client.post("/login", json={"username": "alice", "password": "pw1"})
    assert response.status_code == 200


def test_register_missing_field(client, alice):
    """Test missing fields are 400 {message}, not FastAPI's 422."""
    del alice["lastname"]

    response = client.post("/register", json=alice)
    assert response.status_code == 400
    assert "lastname" in response.json()["message"]


def test_register_malformed_field(client, alice):
    """Test boundary validation surfaces as 400 {message}."""
    response = client.post("/register", json=dict(alice, username="a b"))
    assert response.status_code == 400
    assert response.json()["message"].startswith("Username")


def test_invalid_json_body(client):
    """Test an unparsable body is 400 {message}."""
    response = client.post(
        "/login",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["message"]


def test_me_without_token(client):
    """Test /user/me requires a bearer token."""
    response = client.get("/user/me")
    assert response.status_code == 401
    assert response.json()["message"]
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_me_wrong_scheme(client):
    """Test non-Bearer schemes are refused."""
    response = client.get("/user/me", headers={"Authorization": "Basic YWxpY2U6cHcx"})
    assert response.status_code == 401


def test_me_invalid_token(client):
    """Test a malformed token is 401."""
    response = client.get("/user/me", headers={"Authorization": "Bearer invalid_token"})
    assert response.status_code == 401


def test_me_expired_token(client, alice, settings):
    """Test a token past its window is 401, same as any other bad token."""
    client.post("/register", json=alice)
    tokens = JWTTokenAdapter(secret=settings.jwt_secret, issuer=settings.jwt_issuer)
    expired = tokens.issue("alice", expires_in=-10).token

    response = client.get("/user/me", headers={"Authorization": f"Bearer {expired}"})
    assert response.status_code == 401
    assert response.json() == client.get(
        "/user/me", headers={"Authorization": "Bearer invalid_token"}
    ).json()


def test_cors_allows_frontend_only(client):
    """Test CORS preflight for the configured origin and a foreign one."""
    allowed = client.options(
        "/login",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    assert allowed.status_code == 200
    assert allowed.headers["access-control-allow-origin"] == "http://localhost:5173"

    foreign = client.options(
        "/login",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert "access-control-allow-origin" not in foreign.headers


@pytest.mark.asyncio
async def test_concurrent_register_single_winner(app):
    """Test two simultaneous registrations for bob: one 201, one 409."""
    bob = {"username": "bob", "firstname": "B", "lastname": "B", "password": "pw"}

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        responses = await asyncio.gather(
            http.post("/register", json=bob),
            http.post("/register", json=dict(bob, firstname="Other")),
        )

    codes = sorted(r.status_code for r in responses)
    assert codes == [201, 409]
