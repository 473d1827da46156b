"""Result type returned by ConfigAccessor.resolve_* lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from duic.errors import ConfigNotFoundError, WrongConfigValueError

__all__ = ["ConfigResult"]

T = TypeVar("T")


@dataclass(frozen=True)
class ConfigResult(Generic[T]):
    """Either a converted value or the error that prevented it.

    Exactly one of ``value`` and ``error`` is meaningful: ``error`` is None
    on success.
    """

    key: str
    value: T | None = None
    error: ConfigNotFoundError | WrongConfigValueError | None = None

    @classmethod
    def success(cls, key: str, value: T) -> ConfigResult[T]:
        return cls(key=key, value=value)

    @classmethod
    def failure(
        cls, key: str, error: ConfigNotFoundError | WrongConfigValueError
    ) -> ConfigResult[T]:
        return cls(key=key, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def not_found(self) -> bool:
        return isinstance(self.error, ConfigNotFoundError)

    @property
    def wrong_value(self) -> bool:
        return isinstance(self.error, WrongConfigValueError)

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            if self.error.cause is not None:
                raise self.error from self.error.cause
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: Any) -> Any:
        """Return the value, or ``default`` on any error."""
        if self.error is not None:
            return default
        return self.value
