"""Public API surface for gelfsend."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from .config.loader import load_configuration
from .core.dispatcher import Dispatcher
from .handlers.gelf import GELFHandler

GLOBAL_DISPATCHER = Dispatcher()

_HANDLER_LEVEL: int | str = logging.DEBUG


def get_dispatcher() -> Dispatcher:
    """Return the process-default dispatcher."""

    return GLOBAL_DISPATCHER


def configure(overrides: Dict[str, Any] | None = None) -> None:
    """Load configuration and initialize the default dispatcher with it."""

    global _HANDLER_LEVEL
    config = load_configuration(overrides or {})
    _HANDLER_LEVEL = config.handler_level
    GLOBAL_DISPATCHER.configure(config)


def initialize(address: str, port: int) -> None:
    """Initialize the default dispatcher against ``address:port``."""

    GLOBAL_DISPATCHER.initialize(address, port)


def send(
    short_message: str,
    full_message: str = "",
    level: int | str = 0,
    extra: Mapping[str, Any] | None = None,
) -> None:
    """Queue a GELF message on the default dispatcher."""

    GLOBAL_DISPATCHER.send(short_message, full_message, level, extra)


def get_handler(level: int | str | None = None) -> logging.Handler:
    """Return a logging handler bound to the default dispatcher."""

    handler = GELFHandler(GLOBAL_DISPATCHER)
    handler.setLevel(level if level is not None else _HANDLER_LEVEL)
    return handler


def shutdown() -> None:
    """Drain and stop the default dispatcher."""

    GLOBAL_DISPATCHER.shutdown()
