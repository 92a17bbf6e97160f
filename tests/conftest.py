from __future__ import annotations

import logging
import os
import socket
from typing import Iterator, List

import pytest

import gelfsend.api as gelfsend_api
from gelfsend.config import loader
from gelfsend.core.transport import Endpoint


class RecordingTransport:
    """In-memory stand-in for :class:`UDPTransport`."""

    def __init__(self, endpoint: Endpoint) -> None:
        self.endpoint = endpoint
        self.payloads: List[bytes] = []
        self.closed = False

    def write(self, payload: bytes) -> None:
        if self.closed:
            raise OSError("closed")
        self.payloads.append(payload)

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def reset_gelfsend() -> Iterator[None]:
    yield
    gelfsend_api.GLOBAL_DISPATCHER.shutdown()
    gelfsend_api._HANDLER_LEVEL = logging.DEBUG


@pytest.fixture
def udp_receiver() -> Iterator[socket.socket]:
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    try:
        yield sock
    finally:
        sock.close()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch):
    user_dir = tmp_path / "user"
    user_dir.mkdir()
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    monkeypatch.setattr(loader, "user_config_dir", lambda _: str(user_dir))
    monkeypatch.chdir(project_dir)
    for key in list(os.environ):
        if key.startswith("GELFSEND__"):
            monkeypatch.delenv(key)
    return user_dir, project_dir


@pytest.fixture
def recording_transport() -> type[RecordingTransport]:
    return RecordingTransport
