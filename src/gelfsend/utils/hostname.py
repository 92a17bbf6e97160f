"""Local hostname lookup."""

from __future__ import annotations

import logging
import socket

__all__ = ["resolve_hostname"]

LOGGER = logging.getLogger(__name__)


def resolve_hostname(override: str | None = None) -> str:
    """Return ``override`` when set, else the local hostname.

    Lookup failures are not fatal: an empty string is returned.
    """

    if override:
        return override
    try:
        return socket.gethostname()
    except OSError as exc:
        LOGGER.warning("Could not determine local hostname: %s", exc)
        return ""
