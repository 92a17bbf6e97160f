"""Configuration schema definition for gelfsend."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..core.transport import Endpoint

DEFAULT_CONFIG: Dict[str, Any] = {
    "endpoint": {
        "address": "127.0.0.1",
        "port": 12201,
    },
    "queue": {
        "capacity": 100,
    },
    "source": {
        "hostname": "",
    },
    "handler": {
        "level": "DEBUG",
    },
}


def default_config() -> Dict[str, Any]:
    """Return a deep copy of the default configuration mapping."""

    return deepcopy(DEFAULT_CONFIG)


@dataclass(slots=True)
class EndpointConfig:
    address: str
    port: int

    def endpoint(self) -> Endpoint:
        return Endpoint(address=self.address, port=self.port)


@dataclass(slots=True)
class GelfsendConfig:
    endpoint: EndpointConfig
    queue_capacity: int
    hostname: str | None
    handler_level: str | int


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = data.get(name, {})
    return value if isinstance(value, Mapping) else {}


def _to_endpoint(data: Mapping[str, Any]) -> EndpointConfig:
    address = str(data.get("address", "127.0.0.1")).strip()
    port = int(data.get("port", 12201))
    return EndpointConfig(address=address, port=port)


def build_config(data: Mapping[str, Any]) -> GelfsendConfig:
    endpoint = _to_endpoint(_section(data, "endpoint"))
    capacity = int(_section(data, "queue").get("capacity", 100))
    hostname_raw = _section(data, "source").get("hostname")
    hostname = str(hostname_raw).strip() if hostname_raw else None
    handler_level = _section(data, "handler").get("level", "DEBUG")

    return GelfsendConfig(
        endpoint=endpoint,
        queue_capacity=capacity,
        hostname=hostname or None,
        handler_level=handler_level,
    )
