"""GELF message model and wire encoding."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from .errors import EncodingError

__all__ = ["GELF_VERSION", "FRAME_TERMINATOR", "GELFMessage", "encode"]

GELF_VERSION = "1.1"

# Graylog splits stream input on this sequence; UDP input tolerates it.
FRAME_TERMINATOR = b"\n\x00"


@dataclass(frozen=True, slots=True)
class GELFMessage:
    """A single structured log event."""

    host: str
    short_message: str
    full_message: str = ""
    timestamp: int = 0
    level: int = 0
    extra: Mapping[str, Any] = field(default_factory=dict)
    version: str = GELF_VERSION

    def fields(self) -> Dict[str, Any]:
        """Return the GELF field mapping, additional fields prefixed with ``_``."""

        payload: Dict[str, Any] = {
            "version": self.version,
            "host": self.host,
            "short_message": self.short_message,
            "full_message": self.full_message,
            "timestamp": self.timestamp,
            "level": self.level,
        }
        for key, value in self.extra.items():
            payload[f"_{key}"] = value
        return payload


def encode(message: GELFMessage) -> bytes:
    """Serialize ``message`` to JSON and append the frame terminator."""

    try:
        data = json.dumps(message.fields(), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodingError(f"Cannot encode GELF message {message.short_message!r}: {exc}") from exc
    return data.encode("utf-8") + FRAME_TERMINATOR
