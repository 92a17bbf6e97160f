"""Syslog severity helpers for the GELF ``level`` field."""

from __future__ import annotations

import logging
from enum import IntEnum

__all__ = ["Severity", "get_severity_by_name", "ensure_severity", "from_logging_level"]


class Severity(IntEnum):
    """Syslog severities as used by GELF 1.1."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7


_ALIASES = {
    "EMERG": Severity.EMERGENCY,
    "CRIT": Severity.CRITICAL,
    "ERR": Severity.ERROR,
    "WARN": Severity.WARNING,
    "INFO": Severity.INFORMATIONAL,
}


def get_severity_by_name(name: str) -> int:
    """Resolve a severity from a friendly name.

    Unknown names fall back to ``INFORMATIONAL``.
    """

    normalized = name.strip().upper()
    if normalized.isdigit():
        return int(normalized)
    if normalized in _ALIASES:
        return int(_ALIASES[normalized])
    member = Severity.__members__.get(normalized)
    if member is not None:
        return int(member)
    return int(Severity.INFORMATIONAL)


def ensure_severity(value: object) -> int:
    """Normalize user supplied severity values.

    Negative numbers clamp to ``EMERGENCY``. Anything that is neither an
    integer nor a string falls back to ``INFORMATIONAL``.
    """

    if isinstance(value, int):
        return max(int(value), 0)
    if isinstance(value, str):
        return get_severity_by_name(value)
    return int(Severity.INFORMATIONAL)


def from_logging_level(levelno: int) -> int:
    """Map a stdlib ``logging`` level number onto a syslog severity."""

    if levelno >= logging.CRITICAL:
        return int(Severity.CRITICAL)
    if levelno >= logging.ERROR:
        return int(Severity.ERROR)
    if levelno >= logging.WARNING:
        return int(Severity.WARNING)
    if levelno >= logging.INFO:
        return int(Severity.INFORMATIONAL)
    return int(Severity.DEBUG)
