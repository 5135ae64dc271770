"""Validation result type shared by every validator.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from .exceptions import ResultValidationError
from .kinds import Kind

ErrorKey = Union[str, int]
ErrorTree = Union[str, Dict[ErrorKey, "ErrorTree"]]
"""A leaf message, or a mapping of field name / list index to nested errors."""


@dataclass
class Result:
    """Outcome of a single ``validate`` call.

    ``error`` is None on success. Leaf validators report a message string;
    composite validators report a dict mirroring the schema shape. ``value``
    holds the validated (possibly coerced) value on success and is None on
    failure.
    """

    error: ErrorTree | None
    value: Any = None

    @property
    def valid(self) -> bool:
        """True when the result carries no error."""
        return self.error is None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    def iter_errors(self) -> Iterator[Tuple[Tuple[ErrorKey, ...], str]]:
        """Walk the error tree depth first.

        Yields:
            ``(path, message)`` for every leaf message, where ``path`` is the
            tuple of field names and list indices leading to it. A leaf
            validator's own error has the empty path.
        """
        if self.error is not None:
            yield from _walk(self.error, ())

    def flatten_errors(self) -> dict[str, str]:
        """Return the error tree as ``{"dotted.path": message}``.

        Example:
            ```python
            result = object_({"tags": list_(string())}).validate({"tags": ["a", 1]})
            result.flatten_errors()
            # {'tags.1': 'Expected string but got number'}
            ```
        """
        return {".".join(str(part) for part in path): message for path, message in self.iter_errors()}

    def unwrap(self) -> Any:
        """Return the validated value, raising if validation failed.

        Raises:
            ResultValidationError: If the result holds an error
        """
        if self.error is not None:
            raise ResultValidationError(self.error)
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to a plain dictionary."""
        return {"error": self.error, "value": self.value}


def _walk(error: ErrorTree, path: Tuple[ErrorKey, ...]) -> Iterator[Tuple[Tuple[ErrorKey, ...], str]]:
    if isinstance(error, dict):
        for key, nested in error.items():
            yield from _walk(nested, path + (key,))
    else:
        yield path, error


def success(value: Any) -> Result:
    """Create a successful result holding ``value``."""
    return Result(error=None, value=value)


def failure(error: ErrorTree) -> Result:
    """Create a failed result holding ``error``."""
    return Result(error=error, value=None)


def type_error(expected: Kind | str, actual: Kind | str) -> Result:
    """Create the standard type-mismatch failure.

    Args:
        expected: Kind (or label) the validator accepts
        actual: Kind (or label) the value was classified as

    Returns:
        Failed Result with message ``"Expected {expected} but got {actual}"``
    """
    return failure(f"Expected {expected} but got {actual}")
