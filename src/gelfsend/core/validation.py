"""Configuration validation helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import ConfigurationError

if TYPE_CHECKING:
    from ..config.schema import GelfsendConfig

__all__ = ["ConfigurationError", "validate_configuration"]


def validate_configuration(config: "GelfsendConfig") -> None:
    """Ensure configuration values are usable."""

    if not config.endpoint.address:
        raise ConfigurationError("Endpoint address must not be empty")

    if not 0 < config.endpoint.port <= 65535:
        raise ConfigurationError(f"Endpoint port {config.endpoint.port} is outside 1-65535")

    if config.queue_capacity <= 0:
        raise ConfigurationError(f"Queue capacity must be positive, got {config.queue_capacity}")
