"""ConfigAccessor: typed, defaulted and strict lookups over a ConfigSource."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from duic.coercion import to_bool, to_double, to_float, to_int, to_long, to_str
from duic.errors import ConfigNotFoundError, ConfigSourceNotSetError, WrongConfigValueError
from duic.result import ConfigResult
from duic.source import ConfigSource

__all__ = ["ConfigAccessor", "MISSING"]

_logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class _Missing:
    """Sentinel type marking an omitted ``default`` argument."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class ConfigAccessor:
    """Typed accessors over a single ConfigSource.

    Every ``get_*`` method has two forms. Without ``default`` it is strict and
    raises ConfigNotFoundError when the key is absent and WrongConfigValueError
    when the value cannot be converted. With ``default`` it never raises for
    those conditions and returns ``default`` instead.

    The ``resolve_*`` methods return a ConfigResult carrying either the
    converted value or the error, for callers that prefer not to use
    exceptions.

    Thread safety:
        ``set_source`` is serialized by a lock. Lookups read the source
        reference once per call and take no lock, so concurrent reads are
        as safe as the source itself.
    """

    def __init__(self, source: ConfigSource | None = None) -> None:
        self._source: ConfigSource | None = source
        self._lock = threading.Lock()

    @property
    def source(self) -> ConfigSource | None:
        """The currently registered source, or None."""
        return self._source

    def set_source(self, source: ConfigSource | None) -> None:
        """Register or replace the source used by all lookups."""
        with self._lock:
            previous = self._source
            self._source = source
        _logger.debug("ConfigSource replaced: %r -> %r", previous, source)

    # -- Raw lookups --

    def get_or_none(self, key: str) -> Any:
        """Return the raw value for key, or None if absent.

        Never raises. Logs a warning on every call made before a source is set.
        """
        return self._lookup(self._source, key)

    def contains_key(self, key: str) -> bool:
        """Return True if key has a non-None value."""
        return self.get_or_none(key) is not None

    def get(self, key: str, default: Any = MISSING) -> Any:
        """Return the raw value for key.

        Raises:
            ConfigNotFoundError: If the key is absent and no default was given.
        """
        return self._pick(self.resolve(key), default)

    # -- Typed lookups --

    def get_bool(self, key: str, default: Any = MISSING) -> bool:
        """Return the value as a bool. Text other than "true" (any case) is False."""
        return self._pick(self.resolve_bool(key), default)

    def get_int(self, key: str, default: Any = MISSING) -> int:
        """Return the value as a signed 32-bit integer, truncating fractions."""
        return self._pick(self.resolve_int(key), default)

    def get_long(self, key: str, default: Any = MISSING) -> int:
        """Return the value as a signed 64-bit integer, truncating fractions."""
        return self._pick(self.resolve_long(key), default)

    def get_float(self, key: str, default: Any = MISSING) -> float:
        """Return the value rounded to single precision."""
        return self._pick(self.resolve_float(key), default)

    def get_double(self, key: str, default: Any = MISSING) -> float:
        """Return the value as a double-precision float."""
        return self._pick(self.resolve_double(key), default)

    def get_str(self, key: str, default: Any = MISSING) -> str:
        """Return ``str()`` of the value.

        With a default, an absent value is replaced by ``default`` before
        stringification, so a non-str default comes back stringified.
        """
        if default is MISSING:
            return self.resolve_str(key).unwrap()
        value = self.get(key, default)
        if value is None:
            return default
        try:
            return str(value)
        except Exception as e:
            _logger.debug("Cannot stringify config %s, using default: %s", key, e)
            return default

    def get_model(self, key: str, model: type[M], default: Any = MISSING) -> M:
        """Validate the value (usually a nested mapping) into a pydantic model."""
        return self._pick(self.resolve_model(key, model), default)

    # -- Result-typed lookups --

    def resolve(self, key: str) -> ConfigResult[Any]:
        """Look up the raw value for key."""
        source = self._source
        value = self._lookup(source, key)
        if value is None:
            cause = ConfigSourceNotSetError() if source is None else None
            return ConfigResult.failure(key, ConfigNotFoundError(key, cause=cause))
        return ConfigResult.success(key, value)

    def resolve_bool(self, key: str) -> ConfigResult[bool]:
        return self._convert(key, to_bool, "bool")

    def resolve_int(self, key: str) -> ConfigResult[int]:
        return self._convert(key, to_int, "int")

    def resolve_long(self, key: str) -> ConfigResult[int]:
        return self._convert(key, to_long, "long")

    def resolve_float(self, key: str) -> ConfigResult[float]:
        return self._convert(key, to_float, "float")

    def resolve_double(self, key: str) -> ConfigResult[float]:
        return self._convert(key, to_double, "double")

    def resolve_str(self, key: str) -> ConfigResult[str]:
        return self._convert(key, to_str, "str")

    def resolve_model(self, key: str, model: type[M]) -> ConfigResult[M]:
        found = self.resolve(key)
        if not found.ok:
            return found  # type: ignore[return-value]
        try:
            return ConfigResult.success(key, model.model_validate(found.value))
        except PydanticValidationError as e:
            return ConfigResult.failure(
                key, WrongConfigValueError(key, found.value, model.__name__, cause=e)
            )

    # -- Internals --

    @staticmethod
    def _lookup(source: ConfigSource | None, key: str) -> Any:
        if source is None:
            _logger.warning(
                "No ConfigSource registered, returning None for '%s'. "
                "Call set_default_config() or ConfigAccessor.set_source() first.",
                key,
            )
            return None
        return source.get(key)

    def _convert(
        self, key: str, convert: Callable[[Any], T], target: str
    ) -> ConfigResult[T]:
        found = self.resolve(key)
        if not found.ok:
            return found  # type: ignore[return-value]
        try:
            return ConfigResult.success(key, convert(found.value))
        except Exception as e:
            return ConfigResult.failure(
                key, WrongConfigValueError(key, found.value, target, cause=e)
            )

    @staticmethod
    def _pick(result: ConfigResult[Any], default: Any) -> Any:
        if default is MISSING:
            return result.unwrap()
        if result.wrong_value:
            _logger.debug("Using default for config %s: %s", result.key, result.error)
        return result.value_or(default)

    def __repr__(self) -> str:
        return f"ConfigAccessor(source={self._source!r})"
