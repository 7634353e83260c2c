"""Stateless helpers for building message trees."""

from collections.abc import Mapping
from decimal import Decimal
from numbers import Number
from types import MappingProxyType
from typing import Any, Dict


def deep_merge(to: Mapping, source: Mapping) -> Dict[str, Any]:
    """Merge ``source`` into a copy of ``to`` all the way down.

    Nested mappings present on both sides are merged recursively; for any
    other conflict the value from ``source`` wins. Neither argument is
    modified.
    """
    merged = dict(to)
    for key, right in source.items():
        left = merged.get(key)
        if isinstance(left, Mapping) and isinstance(right, Mapping):
            merged[key] = deep_merge(left, right)
        else:
            merged[key] = right
    return merged


def deep_stringify_keys(mapping: Mapping) -> Dict[str, Any]:
    """Convert every key of nested mappings to a string."""
    return {
        str(key): deep_stringify_keys(value) if isinstance(value, Mapping) else value
        for key, value in mapping.items()
    }


def deep_freeze(value: Any) -> Any:
    """Return a read-only copy of a message tree.

    Mappings become ``MappingProxyType`` views over fresh dicts and lists
    become tuples. Strings, callables and other scalars are returned as-is.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: deep_freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(deep_freeze(item) for item in value)
    return value


def string_from_numeric(number: Number) -> str:
    """Render a number as a plain decimal string, never in exponent form.

    Decimals always carry a fractional part (``Decimal("1")`` -> ``"1.0"``).
    """
    if isinstance(number, Decimal):
        text = format(number, "f")
        if number.is_finite() and "." not in text:
            text += ".0"
        return text

    text = repr(number)
    if isinstance(number, float) and ("e" in text or "E" in text):
        text = format(Decimal(text), "f")
        if "." not in text:
            text += ".0"
    return text
