"""Composite validators that delegate to child validators.

Composites aggregate child results into an error mapping that mirrors the
input's shape: field names for objects, indices for lists. A composite
never flattens nested errors into a single message.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .base import SupportsValidate, Validator, is_validator
from .exceptions import InvalidSchemaError
from .kinds import UNDEFINED, Kind, classify
from .modifiers import LengthBoundedMixin
from .result import ErrorKey, ErrorTree, Result, failure, success, type_error

logger = logging.getLogger(__name__)

UNEXPECTED_FIELD = "Unexpected field"


def _require_validator(candidate: Any, field_name: str | None, message: str) -> None:
    if not is_validator(candidate):
        error = InvalidSchemaError(f"{message}, got {type(candidate).__name__}", field_name)
        logger.debug(f"Rejected schema: {error}")
        raise error


class ObjectValidator(LengthBoundedMixin, Validator):
    """Validates an object against a schema of field validators.

    Mappings are read by key; any other object is read by attribute, so
    dataclass and plain class instances can be validated too. Schema keys
    drive validation: a key missing from the payload is validated as
    ``UNDEFINED``, and payload keys not in the schema are ignored unless
    ``strict()`` is set.

    On success the value is a new dict of the validated field values, with
    fields whose validated value is ``UNDEFINED`` left out.

    Example:
        ```python
        user = object_({
            "name": string().min_length(1),
            "age": number().to_integer().optional(),
        })
        user.validate({"name": "Ada", "age": "36"})
        # Result(error=None, value={'name': 'Ada', 'age': 36})
        ```
    """

    kind_label = Kind.OBJECT.value
    length_label = "object"

    def __init__(self, schema: Mapping[str, SupportsValidate]):
        """Initialize with a schema.

        Args:
            schema: Mapping of field name to validator. The mapping is copied.

        Raises:
            InvalidSchemaError: If the schema is not a mapping, a key is not a
                string, or an entry is not a validator
        """
        super().__init__()
        if not isinstance(schema, Mapping):
            error = InvalidSchemaError(f"Schema must be a mapping, got {type(schema).__name__}")
            logger.debug(f"Rejected schema: {error}")
            raise error

        fields: dict[str, SupportsValidate] = {}
        for name, validator in schema.items():
            if not isinstance(name, str):
                error = InvalidSchemaError(f"Field names must be strings, got {type(name).__name__}", repr(name))
                logger.debug(f"Rejected schema: {error}")
                raise error
            _require_validator(validator, name, "Schema entries must be validators")
            fields[name] = validator

        self._schema = fields
        self._strict = False

    @property
    def schema(self) -> dict[str, SupportsValidate]:
        """A copy of the field-name to validator mapping."""
        return dict(self._schema)

    def strict(self) -> ObjectValidator:
        """Report payload fields that are not in the schema (fluent API)."""
        self._strict = True
        return self

    def _validate(self, value: Any) -> Result:
        kind = classify(value)
        if kind is not Kind.OBJECT:
            return type_error(Kind.OBJECT, kind)

        is_mapping = isinstance(value, Mapping)
        length_failure = self._check_length(len(value) if is_mapping else len(_attributes(value)))
        if length_failure is not None:
            return length_failure

        errors: dict[ErrorKey, ErrorTree] = {}
        values: dict[str, Any] = {}
        for name, validator in self._schema.items():
            if is_mapping:
                field_value = value.get(name, UNDEFINED)
            else:
                field_value = getattr(value, name, UNDEFINED)

            result = validator.validate(field_value)
            if result.error is not None:
                logger.debug(f"Field '{name}' failed validation: {result.error}")
                errors[name] = result.error
            elif result.value is not UNDEFINED:
                values[name] = result.value

        if self._strict:
            payload_keys = value.keys() if is_mapping else _attributes(value).keys()
            for key in payload_keys:
                if key not in self._schema:
                    errors[key] = UNEXPECTED_FIELD

        if errors:
            return failure(errors)
        return success(values)


def _attributes(value: Any) -> dict[str, Any]:
    try:
        attributes = vars(value)
    except TypeError:
        return {}
    return {name: attr for name, attr in attributes.items() if not name.startswith("_")}


class ListValidator(LengthBoundedMixin, Validator):
    """Validates every element of a list or tuple with one validator.

    Failures are keyed by element index. On success the value is a new list
    of the validated element values, so element coercions apply.

    Example:
        ```python
        list_(number()).validate([1, "x", 3])
        # Result(error={1: 'Expected number but got string'}, value=None)
        ```
    """

    kind_label = Kind.ARRAY.value
    length_label = "array"

    def __init__(self, element: SupportsValidate):
        """Initialize with the element validator.

        Raises:
            InvalidSchemaError: If ``element`` is not a validator
        """
        super().__init__()
        _require_validator(element, None, "List element must be a validator")
        self._element = element

    @property
    def element(self) -> SupportsValidate:
        return self._element

    def _validate(self, value: Any) -> Result:
        kind = classify(value)
        if kind is not Kind.ARRAY:
            return type_error(Kind.ARRAY, kind)

        length_failure = self._check_length(value)
        if length_failure is not None:
            return length_failure

        errors: dict[ErrorKey, ErrorTree] = {}
        values = []
        for index, item in enumerate(value):
            result = self._element.validate(item)
            if result.error is not None:
                logger.debug(f"Element {index} failed validation: {result.error}")
                errors[index] = result.error
            else:
                values.append(result.value)

        if errors:
            return failure(errors)
        return success(values)
