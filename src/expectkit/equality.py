"""Structural equality of values.

Two values are equal when their canonical encodings are identical. The
canonical form of a sequence encodes each element's canonical form in
order; mappings and map-like containers are turned into sequences of
``[key, value]`` entries sorted by their JavaScript string form first, so
key order never matters while element order always does.

Comparison is encoding-based rather than a numeric walk, so quirks of the
literal encoder carry over: NaN equals NaN (both encode as ``null``),
``1 == 1.0``, and any two callables are equal (neither has an encoding).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from expectkit.encoding import encode, to_js_string, visiting
from expectkit.values import (
    STRUCTURED_KINDS,
    UndefinedType,
    ValueKind,
    kind_of,
    to_plain,
)


def _sorted_entries(mapping: Mapping) -> list[tuple[Any, Any]]:
    return sorted(
        mapping.items(),
        key=lambda entry: (to_js_string(list(entry)), str(encode(entry[0]))),
    )


def canonical(value: Any) -> str | UndefinedType:
    """Return the order-normalized encoding of *value*."""
    return _canonical(value, set())


def _canonical(value: Any, active: set[int]) -> str | UndefinedType:
    value = to_plain(value)
    kind = kind_of(value)

    if kind is ValueKind.SEQUENCE:
        with visiting(value, active):
            parts = [_canonical(item, active) for item in value]
        return encode(parts)

    if kind is ValueKind.MAPPING:
        with visiting(value, active):
            parts = [
                [key, _canonical(item, active)]
                for key, item in _sorted_entries(value)
            ]
        return encode(parts)

    if kind is ValueKind.ASSOCIATIVE_MAP:
        with visiting(value, active):
            parts = [
                _canonical([key, item], active)
                for key, item in _sorted_entries(value)
            ]
        return encode(parts)

    return encode(value)


def equal(x: Any, y: Any) -> bool:
    """Return True if *x* and *y* are structurally equal.

    Null only equals null and undefined only equals undefined. Sequences,
    mappings and map-like containers of the same kind compare by canonical
    form; anything else (primitives, or two different kinds) compares by
    literal encoding.
    """
    x, y = to_plain(x), to_plain(y)
    x_kind, y_kind = kind_of(x), kind_of(y)

    if ValueKind.NULL in (x_kind, y_kind):
        return x_kind is y_kind
    if ValueKind.UNDEFINED in (x_kind, y_kind):
        return x_kind is y_kind
    if x_kind is y_kind and x_kind in STRUCTURED_KINDS:
        return canonical(x) == canonical(y)
    return encode(x) == encode(y)
