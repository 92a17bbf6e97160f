"""Connected UDP transport for GELF datagrams."""

from __future__ import annotations

import logging
import socket
from dataclasses import dataclass
from typing import Tuple

from .errors import ConnectError, ResolutionError

__all__ = ["Endpoint", "UDPTransport"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Remote aggregator address."""

    address: str
    port: int

    def __str__(self) -> str:
        return f"{self.address}:{self.port}"


def _resolve(endpoint: Endpoint) -> Tuple[int, int, int, Tuple]:
    if not isinstance(endpoint.port, int) or not 0 <= endpoint.port <= 65535:
        raise ResolutionError(f"Invalid port for {endpoint}: must be 0-65535")
    try:
        infos = socket.getaddrinfo(endpoint.address, endpoint.port, type=socket.SOCK_DGRAM)
    except (socket.gaierror, UnicodeError) as exc:
        raise ResolutionError(f"Cannot resolve {endpoint}: {exc}") from exc
    if not infos:
        raise ResolutionError(f"Cannot resolve {endpoint}: no addresses")
    family, socktype, proto, _, sockaddr = infos[0]
    return family, socktype, proto, sockaddr


class UDPTransport:
    """Own one datagram socket connected to a single endpoint."""

    def __init__(self, sock: socket.socket, endpoint: Endpoint) -> None:
        self._sock: socket.socket | None = sock
        self.endpoint = endpoint

    @classmethod
    def open(cls, endpoint: Endpoint) -> "UDPTransport":
        """Resolve ``endpoint`` and return a transport connected to it."""

        family, socktype, proto, remote = _resolve(endpoint)
        local = ("::", 0) if family == socket.AF_INET6 else ("0.0.0.0", 0)
        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as exc:
            raise ConnectError(f"Cannot create socket for {endpoint}: {exc}") from exc
        try:
            sock.bind(local)
            sock.connect(remote)
        except OSError as exc:
            sock.close()
            raise ConnectError(f"Cannot connect to {endpoint}: {exc}") from exc
        LOGGER.debug("Opened UDP transport %s -> %s", sock.getsockname(), endpoint)
        return cls(sock, endpoint)

    @property
    def closed(self) -> bool:
        return self._sock is None

    def write(self, payload: bytes) -> None:
        """Send ``payload`` as a single datagram."""

        sock = self._sock
        if sock is None:
            raise OSError(f"Transport to {self.endpoint} is closed")
        sock.send(payload)

    def close(self) -> None:
        """Release the socket. Calling it again is a no-op."""

        sock, self._sock = self._sock, None
        if sock is not None:
            sock.close()
            LOGGER.debug("Closed UDP transport to %s", self.endpoint)

    def __enter__(self) -> "UDPTransport":
        return self

    def __exit__(self, exc_type, exc: BaseException | None, tb) -> None:  # type: ignore[override]
        self.close()
