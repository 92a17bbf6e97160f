"""Dispatcher owning the transport, the message queue and the delivery worker."""

from __future__ import annotations

import logging
import threading
from queue import Queue
from typing import TYPE_CHECKING, Any, Callable, Mapping

from ..utils.hostname import resolve_hostname
from ..utils.time import unix_timestamp
from .encoder import GELFMessage
from .errors import ConnectError, ResolutionError
from .levels import ensure_severity
from .transport import Endpoint, UDPTransport
from .worker import STOP, DeliveryWorker

if TYPE_CHECKING:
    from ..config.schema import GelfsendConfig

__all__ = ["DEFAULT_CAPACITY", "Dispatcher"]

LOGGER = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100

TransportFactory = Callable[[Endpoint], UDPTransport]


class Dispatcher:
    """Coordinate hostname, queue and transport for one GELF endpoint.

    Nothing is started until :meth:`initialize` succeeds. :meth:`send` never
    raises because of delivery problems; they are reported through the
    ``gelfsend`` loggers instead.
    """

    def __init__(
        self,
        *,
        capacity: int = DEFAULT_CAPACITY,
        hostname: str | None = None,
        transport_factory: TransportFactory = UDPTransport.open,
    ) -> None:
        self._capacity = capacity
        self._hostname_override = hostname
        self._transport_factory = transport_factory
        self._hostname = ""
        self._transport: UDPTransport | None = None
        self._queue: Queue[object] | None = None
        self._worker: DeliveryWorker | None = None
        self._lifecycle = threading.Lock()
        # Guards the queue slot; STOP is always the last item put on a queue.
        self._enqueue = threading.Lock()

    # ------------------------------------------------------------------
    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def transport(self) -> UDPTransport | None:
        return self._transport

    @property
    def initialized(self) -> bool:
        return self._queue is not None

    @property
    def capacity(self) -> int:
        return self._capacity

    # ------------------------------------------------------------------
    def configure(self, config: "GelfsendConfig") -> None:
        """Apply ``config`` and initialize against its endpoint."""

        with self._lifecycle:
            if self._queue is None:
                self._capacity = config.queue_capacity
            elif config.queue_capacity != self._capacity:
                LOGGER.warning(
                    "Queue capacity change to %s ignored: queue already running with %s",
                    config.queue_capacity,
                    self._capacity,
                )
            self._hostname_override = config.hostname
        self.initialize(config.endpoint.address, config.endpoint.port)

    def initialize(self, address: str, port: int) -> None:
        """Open the transport and start the worker on first success.

        A failed open is logged as critical and disables delivery: any current
        transport is closed and queued messages are dropped with a warning
        until a later call succeeds. A repeated successful call replaces the
        transport and closes the previous one.
        """

        endpoint = Endpoint(address=address, port=port)
        with self._lifecycle:
            self._hostname = resolve_hostname(self._hostname_override)
            try:
                transport = self._transport_factory(endpoint)
            except (ResolutionError, ConnectError) as exc:
                LOGGER.critical("GELF initialization failed: %s", exc)
                previous, self._transport = self._transport, None
                if previous is not None:
                    previous.close()
                return

            previous, self._transport = self._transport, transport
            if previous is not None:
                LOGGER.debug("Replacing GELF transport to %s", previous.endpoint)
                previous.close()

            if self._queue is None:
                self._queue = Queue(maxsize=self._capacity)
                self._worker = DeliveryWorker(self._queue, lambda: self._transport)
                self._worker.start()
            LOGGER.debug("GELF dispatcher ready for %s as host %r", endpoint, self._hostname)

    def send(
        self,
        short_message: str,
        full_message: str = "",
        level: int | str = 0,
        extra: Mapping[str, Any] | None = None,
    ) -> None:
        """Queue a message for delivery, blocking only while the queue is full."""

        message = GELFMessage(
            host=self._hostname,
            short_message=short_message,
            full_message=full_message,
            timestamp=unix_timestamp(),
            level=ensure_severity(level),
            extra=dict(extra or {}),
        )
        with self._enqueue:
            queue = self._queue
            if queue is None:
                LOGGER.warning("Skipped GELF message %r: dispatcher not initialized", short_message)
                return
            queue.put(message, block=True)

    def flush(self) -> None:
        """Block until every queued message has been handled by the worker."""

        queue = self._queue
        if queue is not None:
            queue.join()

    def shutdown(self, timeout: float | None = 5.0) -> None:
        """Stop the worker after it drains pending messages and close the transport."""

        with self._lifecycle:
            with self._enqueue:
                queue, worker = self._queue, self._worker
                self._queue = None
                self._worker = None
                if queue is not None:
                    queue.put(STOP)
            if queue is not None and worker is not None:
                if not worker.join(timeout):
                    LOGGER.error("GELF worker did not stop within %s seconds", timeout)
            transport, self._transport = self._transport, None
            if transport is not None:
                transport.close()
