"""
Unit tests for Memory User Store.
"""

import threading

import pytest
from session_gate.adapters.memory_user_store import MemoryUserStore
from session_gate.domain.user import User
from session_gate.errors import Conflict


def _user(username="alice", firstname="A"):
    return User(username=username, firstname=firstname, lastname="L", password_hash="h")


def test_add_and_get():
    """Test storing and retrieving a user."""
    store = MemoryUserStore()
    store.add(_user())

    user = store.get("alice")
    assert user is not None
    assert user.username == "alice"
    assert store.exists("alice")
    assert store.get("bob") is None
    assert not store.exists("bob")


def test_duplicate_username_conflicts_without_write():
    """Test a second add for the same username fails and keeps the first."""
    store = MemoryUserStore()
    store.add(_user(firstname="First"))

    with pytest.raises(Conflict):
        store.add(_user(firstname="Second"))

    assert store.get("alice").firstname == "First"


def test_concurrent_adds_single_winner():
    """Test many simultaneous adds for one username: exactly one succeeds."""
    store = MemoryUserStore()
    barrier = threading.Barrier(8)
    results = []
    lock = threading.Lock()

    def worker(i):
        barrier.wait()
        try:
            store.add(_user(username="bob", firstname=f"Bob{i}"))
            outcome = "ok"
        except Conflict:
            outcome = "conflict"
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count("ok") == 1
    assert results.count("conflict") == 7
    assert store.get("bob").firstname.startswith("Bob")
    assert not store.exists("alice")
