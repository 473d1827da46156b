"""Conversion of raw configuration values to typed values.

Each ``to_*`` function raises ``TypeError`` when the value's kind cannot be
converted to the target and ``ValueError`` when text does not parse. Callers
wrap these into WrongConfigValueError.

Numeric rules:

* Text is parsed as a decimal number first, then narrowed, so ``"3.9"`` is a
  valid int (3). Truncation is toward zero.
* Floating values narrowed to int/long saturate at the type bounds and NaN
  becomes 0.
* Integer values narrowed to int/long wrap around (two's complement).
* Booleans are never numbers.
"""

from __future__ import annotations

import math
import re
import struct
from typing import Any

from duic.value import ValueKind, classify

__all__ = [
    "INT32_BITS",
    "INT64_BITS",
    "parse_decimal",
    "to_bool",
    "to_int",
    "to_long",
    "to_float",
    "to_double",
    "to_str",
]

INT32_BITS = 32
INT64_BITS = 64
_SINGLE_MANTISSA_BITS = 24

# All ASCII control characters and space, as stripped by Java's String.trim().
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))

_DECIMAL_RE = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[fFdD]?)"
)


def parse_decimal(text: str) -> float:
    """Parse decimal text into a float.

    Accepts an optional sign, ``NaN``, ``Infinity``, or digits with an
    optional fraction, exponent and ``f``/``d`` type suffix. Surrounding
    whitespace is ignored.

    Raises:
        ValueError: If the text is not a decimal number.
    """
    stripped = text.strip(_TRIM_CHARS)
    if not _DECIMAL_RE.fullmatch(stripped):
        raise ValueError(f"not a decimal number: {text!r}")
    if stripped[-1] in "fFdD":
        stripped = stripped[:-1]
    return float(stripped)


def _wrap(value: int, bits: int) -> int:
    """Narrow an integer to a signed two's complement integer of ``bits`` width."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _saturate(value: float, bits: int) -> int:
    """Truncate a float toward zero, clamped to the signed range of ``bits`` width."""
    if math.isnan(value):
        return 0
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1
    if value <= low:
        return low
    if value >= high:
        return high
    return int(value)


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def _round_to_single(value: float) -> float:
    """Round a double to the nearest IEEE 754 single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _int_to_single(value: int) -> float:
    """Round an integer to the nearest single-precision value in one step.

    Going through a double first would round twice for integers wider
    than 53 bits.
    """
    magnitude = abs(value)
    excess = magnitude.bit_length() - _SINGLE_MANTISSA_BITS
    if excess > 0:
        kept = magnitude >> excess
        dropped = magnitude & ((1 << excess) - 1)
        half = 1 << (excess - 1)
        if dropped > half or (dropped == half and kept & 1):
            kept += 1
        magnitude = kept << excess
    rounded = _round_to_single(_int_to_float(magnitude))
    return -rounded if value < 0 else rounded


def _not_convertible(value: Any, target: str) -> TypeError:
    return TypeError(f"{type(value).__name__} cannot be converted to {target}")


def _to_integral(value: Any, bits: int, target: str) -> int:
    kind = classify(value)
    if kind is ValueKind.TEXT:
        return _saturate(parse_decimal(value), bits)
    if kind is ValueKind.INTEGER:
        return _wrap(value, bits)
    if kind is ValueKind.FLOAT:
        return _saturate(value, bits)
    raise _not_convertible(value, target)


def to_bool(value: Any) -> bool:
    """Convert to bool. Text is True only when it equals "true", ignoring case."""
    kind = classify(value)
    if kind is ValueKind.TEXT:
        return value.lower() == "true"
    if kind is ValueKind.BOOLEAN:
        return value
    raise _not_convertible(value, "bool")


def to_int(value: Any) -> int:
    """Convert to a signed 32-bit integer."""
    return _to_integral(value, INT32_BITS, "int")


def to_long(value: Any) -> int:
    """Convert to a signed 64-bit integer."""
    return _to_integral(value, INT64_BITS, "long")


def to_float(value: Any) -> float:
    """Convert to a single-precision float (returned as a Python float)."""
    kind = classify(value)
    if kind is ValueKind.TEXT:
        return _round_to_single(parse_decimal(value))
    if kind is ValueKind.INTEGER:
        return _int_to_single(value)
    if kind is ValueKind.FLOAT:
        return _round_to_single(value)
    raise _not_convertible(value, "float")


def to_double(value: Any) -> float:
    """Convert to a double-precision float."""
    kind = classify(value)
    if kind is ValueKind.TEXT:
        return parse_decimal(value)
    if kind is ValueKind.INTEGER:
        return _int_to_float(value)
    if kind is ValueKind.FLOAT:
        return value
    raise _not_convertible(value, "double")


def to_str(value: Any) -> str:
    """Convert to text using the value's own ``str()``."""
    if classify(value) is ValueKind.ABSENT:
        raise _not_convertible(value, "str")
    return str(value)
