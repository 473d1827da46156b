"""Classification of raw configuration values."""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = ["ValueKind", "classify"]


class ValueKind(str, Enum):
    """The closed set of shapes a raw configuration value can take."""

    ABSENT = "absent"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    OTHER = "other"


def classify(value: Any) -> ValueKind:
    """Return the ValueKind of a raw value.

    ``bool`` is checked before ``int`` since it subclasses it.
    """
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.TEXT
    return ValueKind.OTHER
