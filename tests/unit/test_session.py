"""
Unit tests for the client-observed Session.
"""

import pytest
from session_gate.domain.session import Session, SessionState


def test_new_session_is_anonymous():
    """Test a fresh session has neither token nor identity."""
    session = Session()

    assert session.state == SessionState.ANONYMOUS
    assert session.identity is None
    assert not session.is_authenticated


def test_session_establish_then_identify():
    """Test token first, identity only after verification."""
    session = Session()

    session.establish("tok")
    assert session.state == SessionState.PENDING
    assert session.identity is None

    session.identify({"username": "alice"})
    assert session.state == SessionState.AUTHENTICATED
    assert session.is_authenticated


def test_establish_resets_identity():
    """A new token never inherits the previous identity."""
    session = Session(token="old", identity={"username": "alice"})

    session.establish("new")
    assert session.token == "new"
    assert session.identity is None


def test_identify_requires_token():
    """Identity cannot exist without a token."""
    session = Session()

    with pytest.raises(ValueError):
        session.identify({"username": "alice"})


def test_session_clear():
    """Test clearing forgets token and identity."""
    session = Session(token="tok", identity={"username": "alice"})

    session.clear()
    assert session.token is None
    assert session.identity is None
    assert session.state == SessionState.ANONYMOUS


def test_session_serialization_hides_token():
    """Test to_dict exposes state and user, never the token."""
    session = Session(token="tok", identity={"username": "alice"})

    data = session.to_dict()
    assert data["state"] == "authenticated"
    assert data["user"]["username"] == "alice"
    assert "tok" not in data.values()
