"""Scalar coercion shared by every backend connector.

Drivers hand back whatever native type the column holds (``int``, ``Decimal``,
``str``, ``bytes`` ...). ``coerce`` converts that raw value into one of the
fixed output types callers may ask for, or ``None`` when there is no value.
"""
from __future__ import annotations

import enum
import math
import re
import struct
from decimal import Decimal
from typing import Any, Optional, Union

from essential_core.errors import ScalarTypeError

_INT_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)
_FLOAT_PATTERN = re.compile(
    r"^[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|nan|infinity|inf)$",
    re.IGNORECASE | re.ASCII,
)

_TRUE_TEXT = ("1", "true")
_FALSE_TEXT = ("0", "false")


class ScalarType(enum.Enum):
    """Output types supported by ``get_value``."""

    STRING = "string"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT64 = "float64"
    FLOAT32 = "float32"
    BOOLEAN = "boolean"

    @property
    def bits(self) -> Optional[int]:
        return _INT_WIDTHS.get(self)

    @classmethod
    def resolve(cls, target: Union["ScalarType", type, str]) -> "ScalarType":
        """Map a requested target onto a ``ScalarType``.

        Accepts a ``ScalarType``, one of the builtins ``str``/``int``/``float``/``bool``,
        or the lower-case member value (``"int32"``).

        :raises ScalarTypeError: if the target is not supported
        """
        if isinstance(target, cls):
            return target
        if isinstance(target, type):
            mapped = _BUILTIN_TYPES.get(target)
            if mapped is not None:
                return mapped
        elif isinstance(target, str):
            try:
                return cls(target.strip().lower())
            except ValueError:
                pass
        raise ScalarTypeError(f"Unsupported scalar type: {target!r}")


_INT_WIDTHS = {ScalarType.INT32: 32, ScalarType.INT64: 64}

_BUILTIN_TYPES = {
    str: ScalarType.STRING,
    int: ScalarType.INT64,
    float: ScalarType.FLOAT64,
    bool: ScalarType.BOOLEAN,
}


def _as_text(raw: Any) -> str:
    if isinstance(raw, (bytes, bytearray, memoryview)):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ScalarTypeError("Binary value is not valid UTF-8 text") from exc
    return str(raw)


def _is_numeric(raw: Any) -> bool:
    return isinstance(raw, (int, float, Decimal))


def _wrap(value: int, bits: int) -> int:
    """Narrow ``value`` to a signed two's complement integer of ``bits`` width."""
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _to_int(raw: Any, target: ScalarType) -> int:
    bits = target.bits
    if _is_numeric(raw):
        try:
            truncated = int(raw)
        except (OverflowError, ValueError) as exc:
            raise ScalarTypeError(f"Cannot convert {raw!r} to {target.value}") from exc
        return _wrap(truncated, bits)

    text = _as_text(raw).strip()
    if not _INT_PATTERN.match(text):
        raise ScalarTypeError(f"Cannot parse {text!r} as {target.value}")
    value = int(text)
    half = 1 << (bits - 1)
    if not -half <= value < half:
        raise ScalarTypeError(f"Value {text!r} is out of range for {target.value}")
    return value


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_float(raw: Any, target: ScalarType) -> float:
    if _is_numeric(raw):
        value = float(raw)
    else:
        text = _as_text(raw).strip()
        if not _FLOAT_PATTERN.match(text):
            raise ScalarTypeError(f"Cannot parse {text!r} as {target.value}")
        value = float(text)
    if target is ScalarType.FLOAT32:
        return _to_float32(value)
    return value


def _to_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    text = _as_text(raw).strip().lower()
    if text in _TRUE_TEXT:
        return True
    if text in _FALSE_TEXT:
        return False
    raise ScalarTypeError(f"Cannot interpret {text!r} as boolean")


def coerce(raw: Any, target: Union[ScalarType, type, str]) -> Any:
    """Coerce a raw driver value into the requested scalar type.

    Args:
        raw: Value read from the first column of the first row, or None.
        target: Requested output type (see ``ScalarType.resolve``).

    Returns:
        The coerced value, or None when ``raw`` is None.

    Raises:
        ScalarTypeError: if the target is unsupported or ``raw`` cannot be converted.
    """
    scalar_type = ScalarType.resolve(target)
    if raw is None:
        return None
    if scalar_type is ScalarType.STRING:
        return _as_text(raw)
    if scalar_type in (ScalarType.INT32, ScalarType.INT64):
        return _to_int(raw, scalar_type)
    if scalar_type in (ScalarType.FLOAT64, ScalarType.FLOAT32):
        return _to_float(raw, scalar_type)
    return _to_bool(raw)
