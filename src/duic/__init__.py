"""duic - Typed accessors over key-value configuration sources."""

from __future__ import annotations

# Core
from duic.accessor import MISSING, ConfigAccessor
from duic.result import ConfigResult

# Sources
from duic.source import ConfigSource, MapConfigSource

# Values
from duic.value import ValueKind, classify

# Process-wide default
from duic.defaults import get_default_accessor, set_default_config

# Errors
from duic.errors import (
    ConfigNotFoundError,
    ConfigSourceNotSetError,
    DuicError,
    ErrorCodes,
    WrongConfigValueError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigAccessor",
    "ConfigResult",
    "MISSING",
    # Sources
    "ConfigSource",
    "MapConfigSource",
    # Values
    "ValueKind",
    "classify",
    # Process-wide default
    "get_default_accessor",
    "set_default_config",
    # Errors
    "ErrorCodes",
    "DuicError",
    "ConfigNotFoundError",
    "ConfigSourceNotSetError",
    "WrongConfigValueError",
]
