"""Logging handler forwarding records to a GELF dispatcher."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..core.dispatcher import Dispatcher
from ..core.levels import from_logging_level

__all__ = ["GELFHandler"]

_STANDARD_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "asctime",
    "message",
}

# Records from these loggers would re-enter the queue they describe.
_INTERNAL_PREFIX = "gelfsend"

# Graylog rejects "_id"; a record attribute named "id" is not forwarded.
_RESERVED_EXTRA = {"id"}

_SCALARS = (str, int, float, bool, type(None))


def _field_value(value: Any) -> Any:
    if isinstance(value, _SCALARS):
        return value
    return str(value)


class GELFHandler(logging.Handler):
    """Translate ``LogRecord`` objects into :meth:`Dispatcher.send` calls."""

    def __init__(self, dispatcher: Dispatcher, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.dispatcher = dispatcher

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        name = record.name
        if name == _INTERNAL_PREFIX or name.startswith(_INTERNAL_PREFIX + "."):
            return False
        return bool(super().filter(record))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            short_message = record.getMessage()
            full_message = ""
            if record.exc_info:
                formatter = self.formatter or logging.Formatter()
                full_message = formatter.formatException(record.exc_info)
            elif record.stack_info:
                full_message = record.stack_info
            extra: Dict[str, Any] = {
                "logger": record.name,
                "file": record.pathname,
                "line": record.lineno,
            }
            for key, value in record.__dict__.items():
                if key not in _STANDARD_ATTRS and key not in _RESERVED_EXTRA:
                    extra[key] = _field_value(value)
            self.dispatcher.send(
                short_message,
                full_message,
                from_logging_level(record.levelno),
                extra,
            )
        except Exception:
            self.handleError(record)
