"""Literal encoding of values in ``JSON.stringify`` form.

The encoding is what the equality engine compares and what failure
messages show, so it has to be deterministic down to the byte:

* numbers use the ECMAScript shortest form (``4.0`` -> ``4``,
  ``1e-07`` -> ``1e-7``); NaN and the infinities encode as ``null``
* strings are JSON strings without ASCII escaping
* ``undefined`` and callables have no encoding; inside a sequence they
  become ``null``, inside a mapping the member is dropped
* mapping keys are written as their JavaScript string form
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from decimal import Decimal
from typing import Any

from expectkit.values import UndefinedType, ValueKind, kind_of, to_plain, undefined


@contextmanager
def visiting(container: Any, active: set[int]) -> Iterator[None]:
    marker = id(container)
    if marker in active:
        raise ValueError("Circular reference detected")
    active.add(marker)
    try:
        yield
    finally:
        active.discard(marker)


def _finite_number_to_string(value: float) -> str:
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr() already yields the shortest round-tripping digits
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    raw = "".join(str(d) for d in digit_tuple)
    digits = raw.rstrip("0")
    exponent += len(raw) - len(digits)

    k = len(digits)
    n = exponent + k
    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def format_number(value: int | float) -> str:
    """Encode a number the way ``JSON.stringify`` does."""
    if isinstance(value, int):
        return str(int(value))
    if math.isnan(value) or math.isinf(value):
        return "null"
    return _finite_number_to_string(value)


def to_js_string(value: Any) -> str:
    """Return the JavaScript ``String(value)`` form, used to order entries."""
    return _to_js_string(value, set())


def _to_js_string(value: Any, active: set[int]) -> str:
    value = to_plain(value)
    if value is None:
        return "null"
    if value is undefined:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _finite_number_to_string(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        # Array.prototype.join renders a revisited array as empty
        if id(value) in active:
            return ""
        with visiting(value, active):
            return ",".join(
                "" if item is None or item is undefined else _to_js_string(item, active)
                for item in value
            )
    if kind_of(value) is ValueKind.ASSOCIATIVE_MAP:
        return "[object Map]"
    if isinstance(value, Mapping):
        return "[object Object]"
    return repr(value)


def encode(value: Any) -> str | UndefinedType:
    """Return the literal JSON encoding of *value*, or ``undefined``.

    Raises ValueError for cyclic structures and TypeError for objects that
    cannot be converted to plain data.
    """
    return _encode(value, set())


def _encode(value: Any, active: set[int]) -> str | UndefinedType:
    value = to_plain(value)
    if value is undefined:
        return undefined
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (list, tuple)):
        with visiting(value, active):
            items = [_encode(item, active) for item in value]
        return "[" + ",".join("null" if i is undefined else i for i in items) + "]"
    if isinstance(value, Mapping):
        members = []
        with visiting(value, active):
            for key, item in value.items():
                encoded = _encode(item, active)
                if encoded is undefined:
                    continue
                name = json.dumps(to_js_string(key), ensure_ascii=False)
                members.append(f"{name}:{encoded}")
        return "{" + ",".join(members) + "}"
    if callable(value):
        return undefined
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def render(value: Any) -> str:
    """Encode *value* for display; values without an encoding show as ``undefined``."""
    encoded = encode(value)
    return "undefined" if encoded is undefined else encoded
