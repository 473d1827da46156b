"""Process-wide default ConfigAccessor.

For call sites that cannot receive an injected ConfigAccessor. Register the
source once at startup, before other threads read configuration::

    from duic import defaults
    defaults.set_default_config(MapConfigSource({"http": {"port": "8080"}}))
    port = defaults.get_int("http.port", 80)
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from duic.accessor import MISSING, ConfigAccessor
from duic.source import ConfigSource

__all__ = [
    "get_default_accessor",
    "set_default_config",
    "contains_key",
    "get",
    "get_or_none",
    "get_bool",
    "get_int",
    "get_long",
    "get_float",
    "get_double",
    "get_str",
    "get_model",
]

_default_accessor = ConfigAccessor()


def get_default_accessor() -> ConfigAccessor:
    """Return the shared accessor used by the module-level functions."""
    return _default_accessor


def set_default_config(source: ConfigSource | None) -> None:
    """Register or replace the process-wide ConfigSource."""
    _default_accessor.set_source(source)


def contains_key(key: str) -> bool:
    return _default_accessor.contains_key(key)


def get(key: str, default: Any = MISSING) -> Any:
    return _default_accessor.get(key, default)


def get_or_none(key: str) -> Any:
    return _default_accessor.get_or_none(key)


def get_bool(key: str, default: Any = MISSING) -> bool:
    return _default_accessor.get_bool(key, default)


def get_int(key: str, default: Any = MISSING) -> int:
    return _default_accessor.get_int(key, default)


def get_long(key: str, default: Any = MISSING) -> int:
    return _default_accessor.get_long(key, default)


def get_float(key: str, default: Any = MISSING) -> float:
    return _default_accessor.get_float(key, default)


def get_double(key: str, default: Any = MISSING) -> float:
    return _default_accessor.get_double(key, default)


def get_str(key: str, default: Any = MISSING) -> str:
    return _default_accessor.get_str(key, default)


def get_model(key: str, model: type[BaseModel], default: Any = MISSING) -> Any:
    return _default_accessor.get_model(key, model, default)
