"""
Client Session Example - drive a running server through the session mirror.

Start the server first:
    session-gate-server
"""

import asyncio

from session_gate import SessionMirror
from session_gate.config import get_settings


async def main():
    settings = get_settings()

    async with SessionMirror.from_settings(
        settings, navigate=lambda route: print(f"-> {route}")
    ) as mirror:
        # Restore any session left from a previous run
        await mirror.bootstrap()
        print(f"Restored user: {mirror.user}")

        error = await mirror.register({
            "username": "alice",
            "firstname": "Alice",
            "lastname": "Liddell",
            "password": "pw1",
        })
        if error:
            print(f"Register: {error}")

        error = await mirror.login("alice", "pw1")
        if error:
            print(f"Login: {error}")
            return

        print(f"Logged in as: {mirror.user}")
        print(f"Session: {mirror.session.to_dict()}")

        mirror.logout()
        print(f"After logout: {mirror.session.to_dict()}")


if __name__ == "__main__":
    asyncio.run(main())
