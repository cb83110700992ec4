"""Small numeric and string helpers shared across the package."""

from __future__ import annotations

import re
from enum import Enum
from typing import TypeVar

INT16_MAX = 32767
UINT16_MAX = 65535

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_FLOAT32_MAX = 3.4028234663852886e38

_INT_PREFIX = re.compile(r"-?[0-9]+")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

E = TypeVar("E", bound=Enum)


def plural(n: int) -> str:
    """Return the plural suffix for a count."""
    if n == 1:
        return ""
    return "s"


def to_int(text: str) -> int:
    """Parse the leading base-10 integer of ``text`` as a 32-bit int."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"String is not an integer: {text}")
    value = int(match.group(0))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"String is not an integer: {text}")
    return value


def to_float(text: str) -> float:
    """Parse the leading floating point number of ``text``."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"String is not a number: {text}")
    value = float(match.group(1))
    if value == value and abs(value) != float("inf") and abs(value) > _FLOAT32_MAX:
        raise ValueError(f"Number is out of range: {text}")
    return value


def transform(value: float, low: float, high: float) -> float:
    """Map ``value`` from [0, 1] onto [low, high]."""
    return value * (high - low) + low


def remap(value: float, old_min: float, old_max: float, new_min: float, new_max: float) -> float:
    """Map ``value`` from [old_min, old_max] onto [new_min, new_max]."""
    return transform((value - old_min) / (old_max - old_min), new_min, new_max)


def sign(value: float) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    return int(value > 0) - int(value < 0)


def normalize(value: int, maximum: int = INT16_MAX) -> float:
    """Scale an integer reading by the largest value of its type."""
    return float(value) / maximum


def enum_from_string(enum_cls: type[E], text: str) -> E:
    """Look up an enum member by its name, ignoring case."""
    key = text.upper()
    try:
        return enum_cls[key]
    except KeyError:
        raise ValueError(f"Unrecognized control mode: {key}") from None