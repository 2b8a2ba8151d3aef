"""
Session Gate - server entry point.
"""

import logging
import socket
import sys
from typing import List, Optional

import uvicorn

from session_gate.api.app import create_app
from session_gate.config import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings):
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("httpcore", "httpx"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


class GateServer(uvicorn.Server):
    """uvicorn server that reports the bound port once it is listening."""

    async def startup(self, sockets: Optional[List[socket.socket]] = None) -> None:
        await super().startup(sockets=sockets)
        if not self.started:
            return
        port = sockets[0].getsockname()[1] if sockets else self.config.port
        logger.info("Server running on port %d", port)


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Bind and listen on host:port.

    Raises:
        OSError: If the address is in use or not available
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(2048)
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def main(settings: Optional[Settings] = None):
    settings = settings or get_settings()
    configure_logging(settings)

    try:
        sock = bind_socket(settings.host, settings.port)
    except OSError as exc:
        logger.error("cannot start server: %s", exc)
        sys.exit(1)

    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )
    try:
        GateServer(config).run(sockets=[sock])
    finally:
        sock.close()


if __name__ == "__main__":
    main()
