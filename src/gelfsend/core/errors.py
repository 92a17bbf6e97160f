"""Exception hierarchy for gelfsend."""

from __future__ import annotations

__all__ = [
    "GelfsendError",
    "ResolutionError",
    "ConnectError",
    "EncodingError",
    "ConfigurationError",
]


class GelfsendError(Exception):
    """Base class for errors raised by gelfsend."""


class ResolutionError(GelfsendError):
    """Raised when an endpoint cannot be resolved to a socket address."""


class ConnectError(GelfsendError):
    """Raised when the datagram socket cannot be created, bound or connected."""


class EncodingError(GelfsendError, ValueError):
    """Raised when a message cannot be serialized to GELF JSON."""


class ConfigurationError(GelfsendError, ValueError):
    """Raised when configuration validation fails."""
