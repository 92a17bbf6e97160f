"""Background delivery of queued GELF messages."""

from __future__ import annotations

import enum
import logging
import threading
from queue import Queue
from typing import Callable, Optional

from .encoder import GELFMessage, encode
from .errors import EncodingError
from .transport import UDPTransport

__all__ = ["STOP", "WorkerState", "DeliveryWorker"]

LOGGER = logging.getLogger(__name__)

# Queue sentinel ending the worker loop.
STOP = object()


class WorkerState(enum.Enum):
    IDLE = "idle"
    DELIVERING = "delivering"
    STOPPED = "stopped"


class DeliveryWorker:
    """Single consumer draining ``queue`` into the active transport.

    ``transport`` is called once per message and returns the transport that
    is active at that moment, or ``None`` when there is none. Failures are
    logged and never stop the loop.
    """

    def __init__(
        self,
        queue: "Queue[object]",
        transport: Callable[[], Optional[UDPTransport]],
        *,
        name: str = "gelfsend-worker",
    ) -> None:
        self.queue = queue
        self._transport = transport
        self.state = WorkerState.IDLE
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the thread to exit; return ``True`` when it has."""

        self._thread.join(timeout)
        return not self._thread.is_alive()

    def deliver(self, message: GELFMessage) -> None:
        transport = self._transport()
        if transport is None:
            LOGGER.warning("Skipped GELF message %r: no active transport", message.short_message)
            return
        try:
            payload = encode(message)
            transport.write(payload)
        except EncodingError as exc:
            LOGGER.error("Dropped GELF message: %s", exc)
        except OSError as exc:
            LOGGER.error("Failed to send GELF message to %s: %s", transport.endpoint, exc)

    def _run(self) -> None:
        while True:
            item = self.queue.get()
            try:
                if item is STOP:
                    break
                self.state = WorkerState.DELIVERING
                try:
                    self.deliver(item)  # type: ignore[arg-type]
                except Exception:  # noqa: BLE001
                    LOGGER.exception("Unexpected error while delivering GELF message")
            finally:
                self.state = WorkerState.IDLE
                self.queue.task_done()
        self.state = WorkerState.STOPPED
