"""Typed access to values in parsed JSON documents."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from rappy.duration import Duration

T = TypeVar("T")


def _describe(value: Any) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _convert(value: Any, kind: type[T]) -> T:
    if kind is bool:
        if isinstance(value, bool):
            return value  # type: ignore[return-value]
    elif kind is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value  # type: ignore[return-value]
        if isinstance(value, float) and value.is_integer():
            return int(value)  # type: ignore[return-value]
    elif kind is float:
        if _is_number(value):
            return float(value)  # type: ignore[return-value]
    elif isinstance(value, kind):
        return value
    raise ValueError(f"Expected {kind.__name__}, received: {_describe(value)}")


def parse(text: str) -> Any:
    """Parse a JSON document."""
    return json.loads(text)


def get_or(obj: dict[str, Any], key: str, default: T, kind: type[T] | None = None) -> T:
    """The value at ``key`` converted to ``kind``, or ``default`` if absent."""
    if key not in obj:
        return default
    return _convert(obj[key], kind if kind is not None else type(default))


def get_or_raise(obj: dict[str, Any], key: str, prefix: str, kind: type[T]) -> T:
    """The value at ``key`` converted to ``kind``; raise if it is absent."""
    if key not in obj:
        raise ValueError(f'{prefix}: Missing "{key}" key')
    return _convert(obj[key], kind)


def value_or_raise(value: Any, prefix: str, kind: type[T]) -> T:
    """Convert a bare value to ``kind`` or raise with ``prefix``."""
    try:
        return _convert(value, kind)
    except ValueError:
        raise ValueError(f"{prefix}: expected a {kind.__name__}") from None


def get_list_or(obj: dict[str, Any], key: str, default: list[T], kind: type[T]) -> list[T]:
    """The array at ``key`` with each item converted, or ``default``."""
    value = obj.get(key)
    if isinstance(value, list):
        return [_convert(item, kind) for item in value]
    return default


def get_list_or_raise(obj: dict[str, Any], key: str, prefix: str, kind: type[T]) -> list[T]:
    """The array at ``key`` with each item converted; raise if absent or not an array."""
    if key not in obj:
        raise ValueError(f'{prefix}: Missing "{key}" key')
    value = obj[key]
    if not isinstance(value, list):
        raise ValueError(f'{prefix}: "{key}" is not an array')
    return [_convert(item, kind) for item in value]


def _duration(value: Any) -> Duration | None:
    if _is_number(value):
        return Duration.from_seconds(float(value))
    if isinstance(value, str):
        return Duration.from_string(value)
    return None


def get_duration_or(obj: dict[str, Any], key: str, default: Duration | float) -> Duration:
    """A duration given as seconds or as text, or ``default``."""
    if key in obj:
        found = _duration(obj[key])
        if found is not None:
            return found
    return default if isinstance(default, Duration) else Duration.from_seconds(default)


def get_duration_or_raise(obj: dict[str, Any], key: str, prefix: str) -> Duration:
    """A duration given as seconds or as text; raise if absent or of another type."""
    if key not in obj:
        raise ValueError(f'{prefix}: Missing "{key}" key')
    found = _duration(obj[key])
    if found is None:
        raise ValueError(f'{prefix}: "{key}" is not a duration')
    return found


def get_object_or_raise(value: Any, prefix: str) -> dict[str, Any]:
    """Return ``value`` if it is a JSON object."""
    if isinstance(value, dict):
        return value
    raise ValueError(f"{prefix}: Expected object, received: {_describe(value)}")


def get_array_or_raise(value: Any, prefix: str) -> list[Any]:
    """Return ``value`` if it is a JSON array."""
    if isinstance(value, list):
        return value
    raise ValueError(f"{prefix}: Expected array, received: {_describe(value)}")