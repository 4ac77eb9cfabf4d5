"""
Runtime view of a candidate value.

Every value handed to the validator is classified into one closed set of
kinds so that type inspection and field access are total functions.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class _Undefined:
    """Marker for a value that is absent, as opposed to an explicit ``None``."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


class ValueKind(str, Enum):
    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> ValueKind:
    """Classify a candidate value. ``bool`` is checked before ``int``."""
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    return ValueKind.OBJECT


def is_absent(value: Any) -> bool:
    return value is UNDEFINED


def is_array(value: Any) -> bool:
    return kind_of(value) == ValueKind.ARRAY


def is_object(value: Any) -> bool:
    """True only for mappings; ``None`` and arrays are not objects here."""
    return isinstance(value, Mapping)


def read_field(candidate: Mapping[str, Any], key: str) -> Any:
    """Return ``candidate[key]`` or ``UNDEFINED`` when the key is missing."""
    return candidate.get(key, UNDEFINED)
