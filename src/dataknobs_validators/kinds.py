"""Value classification used by every validator.

``classify`` maps any Python value onto a closed set of semantic kinds. It is
the only place that inspects runtime types; validators compare kinds rather
than calling ``isinstance`` themselves.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from typing import Any


class _UndefinedType:
    """Type of the absent-value sentinel."""

    _instance: _UndefinedType | None = None

    def __new__(cls) -> _UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __str__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _UndefinedType:
        return self

    def __deepcopy__(self, memo: dict) -> _UndefinedType:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _UndefinedType()
"""Marks a value that was never supplied (e.g. a missing object key)."""


class Symbol:
    """An opaque token compared by identity.

    Two symbols with the same description are still distinct values.

    Example:
        ```python
        ready = Symbol("ready")
        classify(ready)
        # <Kind.SYMBOL: 'symbol'>
        ```
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None):
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description or ''})"


class Kind(Enum):
    """Semantic kinds a value can be classified as."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"
    OBJECT = "object"
    ARRAY = "array"
    FUNCTION = "function"
    BYTES = "bytes"
    SET = "set"
    OTHER = "other"
    UNDEFINED = "undefined"
    NULL = "null"
    NAN = "NaN"

    def __str__(self) -> str:
        return self.value


def is_sentinel(value: Any) -> bool:
    """Return True for the absent (``UNDEFINED``) and null (``None``) sentinels."""
    return value is UNDEFINED or value is None


_NUMBER_TYPES = (numbers.Real, Decimal)


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isnan(value)
    except (OverflowError, ValueError):
        return False


def classify(value: Any) -> Kind:
    """Classify a value into a :class:`Kind`.

    Rules are applied in priority order: not-a-number, absent, null, array,
    then the value's primitive kind. Mappings and instances carrying
    attributes (``__dict__`` or ``__slots__``) are ``OBJECT``; binary data and
    sets get their own kinds, and anything else (generators, iterators) is
    ``OTHER``.

    Args:
        value: Any value

    Returns:
        The value's Kind
    """
    if _is_nan(value):
        return Kind.NAN
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray, memoryview)):
        return Kind.ARRAY
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, _NUMBER_TYPES):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (Symbol, Enum)):
        return Kind.SYMBOL
    if callable(value):
        return Kind.FUNCTION
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Kind.BYTES
    if isinstance(value, Set):
        return Kind.SET
    if isinstance(value, Mapping) or _has_attributes(value):
        return Kind.OBJECT
    return Kind.OTHER


def _has_attributes(value: Any) -> bool:
    return hasattr(value, "__dict__") or hasattr(type(value), "__slots__")
