"""Configuration loading pipeline.

Sources, lowest precedence first: built-in defaults, ``gelfsend.toml`` in the
user config directory, ``gelfsend.toml`` in the working directory, the
``[tool.gelfsend]`` table of ``pyproject.toml``, ``GELFSEND__SECTION__KEY``
environment variables and finally explicit overrides. Only the keys listed in
``_KNOWN_KEYS`` are read; anything else is ignored.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping

from platformdirs import user_config_dir

from ..core.errors import ConfigurationError
from ..core.validation import validate_configuration
from .schema import GelfsendConfig, build_config, default_config

try:  # pragma: no cover
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

_ENV_PREFIX = "GELFSEND__"
_FILENAME = "gelfsend.toml"

_KNOWN_KEYS: Dict[str, Dict[str, type]] = {
    "endpoint": {"address": str, "port": int},
    "queue": {"capacity": int},
    "source": {"hostname": str},
    "handler": {"level": str},
}


def _read_toml(path: Path) -> Mapping[str, Any]:
    if not path.is_file():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _env_value(name: str, raw: str, kind: type) -> Any:
    value = raw.strip()
    if kind is int:
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    return value


def _known_entries(source: Mapping[str, Any]) -> Iterator[tuple[str, str, Any]]:
    for section, keys in _KNOWN_KEYS.items():
        table = source.get(section)
        if not isinstance(table, Mapping):
            continue
        for key in keys:
            if key in table:
                yield section, key, table[key]


def _file_sources() -> Iterator[Mapping[str, Any]]:
    yield _read_toml(Path(user_config_dir("gelfsend")) / _FILENAME)
    yield _read_toml(Path.cwd() / _FILENAME)
    tool = _read_toml(Path.cwd() / "pyproject.toml").get("tool", {})
    section = tool.get("gelfsend", {}) if isinstance(tool, Mapping) else {}
    yield section if isinstance(section, Mapping) else {}


def _env_source() -> Dict[str, Dict[str, Any]]:
    data: Dict[str, Dict[str, Any]] = {}
    for section, keys in _KNOWN_KEYS.items():
        for key, kind in keys.items():
            name = f"{_ENV_PREFIX}{section.upper()}__{key.upper()}"
            raw = os.environ.get(name)
            if raw is not None:
                data.setdefault(section, {})[key] = _env_value(name, raw, kind)
    return data


def load_configuration(overrides: Mapping[str, Any] | None = None) -> GelfsendConfig:
    """Load and validate configuration from all sources in precedence order."""

    merged: Dict[str, Any] = default_config()
    for source in (*_file_sources(), _env_source(), overrides or {}):
        for section, key, value in _known_entries(source):
            merged[section][key] = value
    config = build_config(merged)
    validate_configuration(config)
    return config
