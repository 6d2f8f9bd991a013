"""Value model shared by the encoder and the equality engine."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic_core import to_jsonable_python


class _Undefined:
    """Sentinel for an absent value (distinct from None/null)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "undefined"


# Singleton instance (never create another one)
undefined = _Undefined()
UndefinedType = _Undefined


class ValueKind(str, Enum):
    NULL = "null"
    UNDEFINED = "undefined"
    PRIMITIVE = "primitive"
    SEQUENCE = "sequence"
    ASSOCIATIVE_MAP = "associative_map"
    MAPPING = "mapping"


STRUCTURED_KINDS = frozenset(
    {ValueKind.SEQUENCE, ValueKind.ASSOCIATIVE_MAP, ValueKind.MAPPING}
)

_PRIMITIVE_TYPES = (bool, int, float, str)


def kind_of(value: Any) -> ValueKind:
    """Classify a plain value. Call :func:`to_plain` first for arbitrary objects."""
    if value is None:
        return ValueKind.NULL
    if value is undefined:
        return ValueKind.UNDEFINED
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, dict) and all(isinstance(k, str) for k in value):
        return ValueKind.MAPPING
    if isinstance(value, Mapping):
        return ValueKind.ASSOCIATIVE_MAP
    return ValueKind.PRIMITIVE


def _public_attributes(obj: Any) -> dict[str, Any]:
    try:
        attributes = vars(obj)
    except TypeError:
        raise TypeError(
            f"Object of type {type(obj).__name__} is not JSON serializable"
        ) from None
    return {k: v for k, v in attributes.items() if not k.startswith("_")}


def to_plain(value: Any) -> Any:
    """Return *value* unchanged if it is already plain data, else a plain copy.

    Plain data is None, ``undefined``, bool/int/float/str, list/tuple and
    mappings. Sets become lists ordered by their elements' encoding so that
    iteration order never leaks into comparisons. Callables are left alone:
    the encoder treats them as undefined. Everything else goes through
    pydantic's JSON conversion, with plain objects contributing their
    public attributes.
    """
    if value is None or value is undefined or isinstance(value, _PRIMITIVE_TYPES):
        return value
    if isinstance(value, (list, tuple, Mapping)):
        return value
    if isinstance(value, (set, frozenset)):
        from expectkit.encoding import encode

        return sorted(value, key=lambda item: str(encode(item)))
    if callable(value):
        return value
    return to_jsonable_python(value, fallback=_public_attributes)
