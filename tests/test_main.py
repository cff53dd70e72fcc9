"""Tests for the relay entrypoint."""

import socket

import pytest

from calorie_deficit import main as main_module
from calorie_deficit.config import Settings


def test_bind_socket_picks_free_port_for_zero() -> None:
    sock = main_module.bind_socket("127.0.0.1", 0)
    try:
        host, port = sock.getsockname()[:2]
        assert host == "127.0.0.1"
        assert port > 0
    finally:
        sock.close()


def test_bind_socket_raises_when_port_taken() -> None:
    taken = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    taken.bind(("127.0.0.1", 0))
    taken.listen()
    try:
        port = taken.getsockname()[1]
        with pytest.raises(OSError):
            main_module.bind_socket("127.0.0.1", port)
    finally:
        taken.close()


def test_main_serves_on_bound_socket(monkeypatch, settings: Settings) -> None:
    served: list[tuple[object, list[socket.socket]]] = []

    class _FakeServer:
        def __init__(self, config) -> None:  # type: ignore[no-untyped-def]
            self.config = config

        def run(self, sockets=None) -> None:  # type: ignore[no-untyped-def]
            served.append((self.config, sockets))

    monkeypatch.setattr(main_module.uvicorn, "Server", _FakeServer)

    main_module.main(settings)

    assert len(served) == 1
    _, sockets = served[0]
    assert sockets[0].getsockname()[1] > 0
    sockets[0].close()


def test_bind_socket_uses_ipv6_family_for_ipv6_host() -> None:
    if not socket.has_ipv6:
        pytest.skip("IPv6 unavailable")
    try:
        sock = main_module.bind_socket("::1", 0)
    except OSError:
        pytest.skip("IPv6 loopback unavailable")
    try:
        assert sock.family == socket.AF_INET6
        assert sock.getsockname()[1] > 0
    finally:
        sock.close()
