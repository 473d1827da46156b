"""Error hierarchy for duic configuration accessors."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "DuicError",
    "ConfigNotFoundError",
    "ConfigSourceNotSetError",
    "WrongConfigValueError",
    "ErrorCodes",
]


class DuicError(Exception):
    """Base error for all duic errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigSourceNotSetError(DuicError):
    """Raised when a lookup runs before any ConfigSource was registered."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_SOURCE_NOT_SET",
            message="No ConfigSource registered; call set_default_config() or pass a source to ConfigAccessor",
            **kwargs,
        )


class ConfigNotFoundError(DuicError):
    """Raised when a configuration key has no value."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration not found: {key}",
            details={"key": key},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The key that was looked up."""
        return self.details["key"]


class WrongConfigValueError(DuicError):
    """Raised when a configuration value cannot be converted to the requested type."""

    def __init__(
        self,
        key: str,
        value: Any,
        target: str,
        cause: Exception | None = None,
        **kwargs: Any,
    ) -> None:
        reason = f": {cause}" if cause is not None else ""
        super().__init__(
            code="CONFIG_WRONG_VALUE",
            message=f"Configuration {key}={value!r} is not a valid {target}{reason}",
            details={"key": key, "value": value, "target": target},
            cause=cause,
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The key whose value was rejected."""
        return self.details["key"]

    @property
    def value(self) -> Any:
        """The raw value that failed conversion."""
        return self.details["value"]

    @property
    def target(self) -> str:
        """Name of the type the value was converted to."""
        return self.details["target"]


class ErrorCodes:
    """All duic error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_NOT_FOUND:
            use_fallback()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_WRONG_VALUE = "CONFIG_WRONG_VALUE"
    CONFIG_SOURCE_NOT_SET = "CONFIG_SOURCE_NOT_SET"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
