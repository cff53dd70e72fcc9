"""Serve the nutrition relay over HTTP."""

import logging
import socket

import uvicorn

from calorie_deficit.api.app import create_app
from calorie_deficit.app_logging import configure_logging
from calorie_deficit.config import Settings
from calorie_deficit.containers import build_container

_logger = logging.getLogger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind a listening TCP socket; port 0 lets the OS pick a free port."""
    family, socktype, proto, _, address = socket.getaddrinfo(
        host, port, type=socket.SOCK_STREAM, flags=socket.AI_PASSIVE
    )[0]
    sock = socket.socket(family, socktype, proto)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind(address)
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def main(settings: Settings | None = None) -> None:
    """Run the relay on the configured address."""
    configure_logging()
    resolved_settings = settings or Settings()
    app = create_app(build_container(resolved_settings))
    sock = bind_socket(resolved_settings.relay_host, resolved_settings.relay_port)
    host, port = sock.getsockname()[:2]
    _logger.info("Server running on http://%s:%s", host, port)
    config = uvicorn.Config(app, log_config=None)
    uvicorn.Server(config).run(sockets=[sock])


if __name__ == "__main__":
    main()
