"""Attribute values: type classification, string conversion and type errors.

Attribute maps are plain mappings from string keys to Python values. The
supported value kinds are strings, booleans, integers, floats, lists (slices),
mappings (maps), bytes and ``None`` (empty).
"""

from __future__ import annotations

import base64
import enum
import json
import math
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

__all__ = ["ValueType", "MismatchedTypeError", "value_type", "as_string", "str_value"]


class ValueType(enum.Enum):
    """Kind of an attribute value."""

    EMPTY = "Empty"
    STR = "Str"
    INT = "Int"
    DOUBLE = "Double"
    BOOL = "Bool"
    MAP = "Map"
    SLICE = "Slice"
    BYTES = "Bytes"

    def __str__(self) -> str:
        return self.value


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class MismatchedTypeError(TypeError):
    """An attribute holds a value of a type other than the one expected."""

    def __init__(self, name: str, actual_type: ValueType, expected_type: ValueType) -> None:
        self.name = name
        self.actual_type = actual_type
        self.expected_type = expected_type
        super().__init__(
            f"{_quote(name)} has type {_quote(str(actual_type))}, "
            f"expected type {_quote(str(expected_type))} instead"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MismatchedTypeError):
            return NotImplemented
        return (self.name, self.actual_type, self.expected_type) == (
            other.name,
            other.actual_type,
            other.expected_type,
        )

    def __hash__(self) -> int:
        return hash((self.name, self.actual_type, self.expected_type))


def value_type(value: Any) -> ValueType:
    """Classify a value; raise TypeError for values an attribute cannot hold."""
    if value is None:
        return ValueType.EMPTY
    if isinstance(value, bool):
        return ValueType.BOOL
    if isinstance(value, int):
        return ValueType.INT
    if isinstance(value, float):
        return ValueType.DOUBLE
    if isinstance(value, str):
        return ValueType.STR
    if isinstance(value, (bytes, bytearray)):
        return ValueType.BYTES
    if isinstance(value, Mapping):
        return ValueType.MAP
    if isinstance(value, Sequence):
        return ValueType.SLICE
    raise TypeError(f"unsupported attribute value type {type(value).__name__!r}")


def _float_as_string(number: float) -> str:
    if math.isinf(number) or math.isnan(number):
        text = "NaN" if math.isnan(number) else ("+Inf" if number > 0 else "-Inf")
        return f"json: unsupported value: {text}"
    magnitude = abs(number)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        mantissa, _, exponent = repr(number).partition("e")
        sign = exponent[0] if exponent[:1] in "+-" else "+"
        digits = exponent.lstrip("+-").lstrip("0") or "0"
        return f"{mantissa}e{sign}{digits}"
    return format(Decimal(repr(number)).normalize(), "f")


def _to_raw(value: Any) -> Any:
    kind = value_type(value)
    if kind is ValueType.MAP:
        return {str(k): _to_raw(v) for k, v in value.items()}
    if kind is ValueType.SLICE:
        return [_to_raw(item) for item in value]
    if kind is ValueType.BYTES:
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


def as_string(value: Any) -> str:
    """Render any attribute value as a string."""
    kind = value_type(value)
    if kind is ValueType.STR:
        return value
    if kind is ValueType.BOOL:
        return "true" if value else "false"
    if kind is ValueType.INT:
        return str(value)
    if kind is ValueType.DOUBLE:
        return _float_as_string(value)
    if kind is ValueType.BYTES:
        return base64.b64encode(bytes(value)).decode("ascii")
    if kind in (ValueType.MAP, ValueType.SLICE):
        return json.dumps(_to_raw(value), separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    return ""


def str_value(value: Any) -> str:
    """Return the value if it is a string, else the empty string."""
    return value if isinstance(value, str) else ""