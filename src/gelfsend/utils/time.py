"""Time utilities for gelfsend."""

from __future__ import annotations

from datetime import datetime, timezone

__all__ = ["utcnow", "unix_timestamp"]


def utcnow() -> datetime:
    """Return a timezone-aware UTC ``datetime`` instance."""

    return datetime.now(timezone.utc)


def unix_timestamp() -> int:
    """Return whole seconds since the epoch."""

    return int(utcnow().timestamp())
