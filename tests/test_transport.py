from __future__ import annotations

import socket

import pytest

from gelfsend.core import transport as transport_module
from gelfsend.core.errors import ConnectError, ResolutionError
from gelfsend.core.transport import Endpoint, UDPTransport


def test_write_sends_one_datagram(udp_receiver: socket.socket) -> None:
    port = udp_receiver.getsockname()[1]
    with UDPTransport.open(Endpoint("127.0.0.1", port)) as transport:
        transport.write(b'{"a":1}\n\x00')
        transport.write(b'{"b":2}\n\x00')

    assert udp_receiver.recv(65535) == b'{"a":1}\n\x00'
    assert udp_receiver.recv(65535) == b'{"b":2}\n\x00'


def test_close_is_idempotent(udp_receiver: socket.socket) -> None:
    transport = UDPTransport.open(Endpoint("127.0.0.1", udp_receiver.getsockname()[1]))

    transport.close()
    transport.close()

    assert transport.closed
    with pytest.raises(OSError):
        transport.write(b"late")


@pytest.mark.parametrize("port", [-1, 65536, 70000])
def test_invalid_port_is_resolution_error(port: int) -> None:
    with pytest.raises(ResolutionError):
        UDPTransport.open(Endpoint("127.0.0.1", port))


def test_unresolvable_host_is_resolution_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*args: object, **kwargs: object) -> list:
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    monkeypatch.setattr(transport_module.socket, "getaddrinfo", fail)

    with pytest.raises(ResolutionError):
        UDPTransport.open(Endpoint("graylog.invalid", 12201))


def test_connect_failure_is_connect_error(monkeypatch: pytest.MonkeyPatch) -> None:
    created: list = []

    class _RefusingSocket:
        def __init__(self, *args: object) -> None:
            self.closed = False
            created.append(self)

        def bind(self, address: object) -> None:
            pass

        def connect(self, address: object) -> None:
            raise OSError("Network is unreachable")

        def close(self) -> None:
            self.closed = True

    monkeypatch.setattr(transport_module.socket, "socket", _RefusingSocket)

    with pytest.raises(ConnectError):
        UDPTransport.open(Endpoint("127.0.0.1", 12201))

    assert created and created[0].closed
