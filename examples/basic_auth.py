"""
Basic Authentication Example - register, log in and verify in-process.
"""

from session_gate import SessionBoundary, Conflict, Unauthorized
from session_gate.adapters import BcryptPasswordHasher, JWTTokenAdapter, MemoryUserStore


def main():
    # Initialize the boundary
    boundary = SessionBoundary(
        users=MemoryUserStore(),
        tokens=JWTTokenAdapter(secret="my-secret-key", expires_in=3600),
        passwords=BcryptPasswordHasher(),
    )

    # Register a user
    user = boundary.register({
        "username": "alice",
        "firstname": "Alice",
        "lastname": "Liddell",
        "password": "pw1",
    })
    print(f"Registered user: {user.username}")

    # Registering again fails
    try:
        boundary.register({
            "username": "alice",
            "firstname": "Other",
            "lastname": "Alice",
            "password": "pw2",
        })
    except Conflict as exc:
        print(f"Second registration refused: {exc.message}")

    # Login
    credential = boundary.login("alice", "pw1")
    print(f"\nLogin successful!")
    print(f"Token: {credential.token[:50]}...")
    print(f"Expires at: {credential.expires_at.isoformat()}")

    # Verify token
    result = boundary.verify(credential.token)
    print(f"\nVerification: {result.status.value}")
    if result.ok:
        print(f"Profile: {result.identity.to_dict()}")

    # Wrong password and unknown user look the same
    for username, password in (("alice", "wrong"), ("nobody", "pw1")):
        try:
            boundary.login(username, password)
        except Unauthorized as exc:
            print(f"Login {username!r}: {exc.message}")


if __name__ == "__main__":
    main()
