"""Custom exceptions for the dataknobs_validators package.

Validation failures are never raised; they are returned in a Result. The
exceptions here signal a malformed validator tree (a programmer error) or
are raised on request by ``Result.unwrap``. All of them are built on the
common exception framework from dataknobs_common.
"""

from __future__ import annotations

from typing import Any

from dataknobs_common import ConfigurationError, ValidationError


class ValidatorConfigurationError(ConfigurationError):
    """Raised when a validator is configured inconsistently."""

    pass


class InvalidBoundsError(ValidatorConfigurationError):
    """Raised when a length or range bound is invalid or misordered."""

    def __init__(self, option: str, value: Any, message: str, other: Any = None):
        self.option = option
        self.value = value
        super().__init__(
            f"Invalid {option}({value!r}): {message}",
            context={"option": option, "value": value, "other_bound": other},
        )


class ConflictingCoercionError(ValidatorConfigurationError):
    """Raised when mutually exclusive output coercions are both requested."""

    def __init__(self, requested: str, configured: str):
        self.requested = requested
        self.configured = configured
        super().__init__(
            f"Cannot apply {requested}() to a validator already configured with {configured}()",
            context={"requested": requested, "configured": configured},
        )


class InvalidSchemaError(ValidatorConfigurationError):
    """Raised when a schema entry or element validator is not a validator."""

    def __init__(self, message: str, field_name: str | None = None):
        self.field_name = field_name
        if field_name is not None:
            message = f"Field '{field_name}': {message}"
        super().__init__(message, context={"field_name": field_name} if field_name is not None else None)


class ResultValidationError(ValidationError):
    """Raised by ``Result.unwrap`` when the result holds an error."""

    def __init__(self, error: str | dict):
        self.error = error
        if isinstance(error, str):
            message = error
        else:
            message = f"Validation failed for: {', '.join(str(key) for key in error)}"
        super().__init__(message, context={"error": error})


__all__ = [
    "ValidatorConfigurationError",
    "InvalidBoundsError",
    "ConflictingCoercionError",
    "InvalidSchemaError",
    "ResultValidationError",
]
