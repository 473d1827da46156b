"""Configuration sources consumed by ConfigAccessor."""

from __future__ import annotations

import copy
import threading
from typing import Any, Protocol, runtime_checkable

__all__ = ["ConfigSource", "MapConfigSource"]


@runtime_checkable
class ConfigSource(Protocol):
    """Anything that can look up a raw configuration value by key.

    ``get`` returns ``None`` when the key is absent.
    """

    def get(self, key: str) -> Any: ...


class MapConfigSource:
    """In-memory ConfigSource over a nested dict with dot-path key support.

    A key stored verbatim at the top level (dots included) takes precedence
    over walking nested mappings. The initial mapping is deep-copied, so
    ``set``/``remove`` never touch the caller's dict.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(data) if data is not None else {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-path key, or None if absent."""
        if key in self._data:
            return self._data[key]
        current: Any = self._data
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return None
        return current

    def set(self, key: str, value: Any) -> None:
        """Set a value, creating intermediate mappings along the dot-path."""
        parts = key.split(".")
        with self._lock:
            current = self._data
            for part in parts[:-1]:
                child = current.get(part)
                if not isinstance(child, dict):
                    child = {}
                    current[part] = child
                current = child
            current[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """Remove a value by dot-path key. Returns True if something was removed."""
        with self._lock:
            if key in self._data:
                del self._data[key]
                return True
            parts = key.split(".")
            current: Any = self._data
            for part in parts[:-1]:
                if not isinstance(current, dict) or part not in current:
                    return False
                current = current[part]
            if isinstance(current, dict) and parts[-1] in current:
                del current[parts[-1]]
                return True
            return False

    def __repr__(self) -> str:
        return f"MapConfigSource(keys={sorted(self._data)!r})"
