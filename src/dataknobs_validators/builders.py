"""Builder functions for constructing validator trees.

``any_``, ``object_`` and ``list_`` carry a trailing underscore so they do
not shadow the builtins of the same name.

Example:
    ```python
    from dataknobs_validators import list_, number, object_, string

    order = object_({
        "id": string().min_length(1),
        "quantity": number().min(1).to_integer(),
        "tags": list_(string()).max_length(5).optional(),
    })
    result = order.validate(payload)
    if not result:
        print(result.flatten_errors())
    ```
"""

from __future__ import annotations

from collections.abc import Mapping

from .base import SupportsValidate
from .composites import ListValidator, ObjectValidator
from .primitives import AnyValidator, BooleanValidator, NumberValidator, StringValidator, SymbolValidator


def string() -> StringValidator:
    return StringValidator()


def number() -> NumberValidator:
    return NumberValidator()


def boolean() -> BooleanValidator:
    return BooleanValidator()


def symbol() -> SymbolValidator:
    return SymbolValidator()


def any_() -> AnyValidator:
    return AnyValidator()


def object_(schema: Mapping[str, SupportsValidate]) -> ObjectValidator:
    """Build an object validator from a field-name to validator mapping."""
    return ObjectValidator(schema)


def list_(element: SupportsValidate) -> ListValidator:
    """Build a list validator applying ``element`` to every item."""
    return ListValidator(element)
