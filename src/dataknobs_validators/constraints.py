"""Length and range checks plus composable value constraints.

``length_check`` and ``range_check`` are pure functions used by the
validators' built-in bounds. The ``Constraint`` classes wrap them (and a few
other rules) behind a uniform ``check(value) -> Result`` interface so they
can be attached to any validator.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from abc import ABC, abstractmethod
from collections.abc import Sized
from dataclasses import dataclass, replace
from re import Pattern as RegexPattern
from typing import Any as AnyType, TYPE_CHECKING

from .exceptions import InvalidBoundsError, ValidatorConfigurationError
from .result import Result, failure, success

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    """An inclusive lower/upper bound pair; None means the bound is unset.

    Bounds are immutable. ``with_lower`` and ``with_upper`` return updated
    copies after checking that ``lower < upper`` still holds.
    """

    lower: AnyType = None
    upper: AnyType = None

    @property
    def is_set(self) -> bool:
        return self.lower is not None or self.upper is not None

    def with_lower(self, option: str, value: AnyType) -> Bounds:
        if self.upper is not None and not value < self.upper:
            _raise_bounds(option, value, f"must be less than the configured maximum {self.upper}", self.upper)
        return replace(self, lower=value)

    def with_upper(self, option: str, value: AnyType) -> Bounds:
        if self.lower is not None and not value > self.lower:
            _raise_bounds(option, value, f"must be greater than the configured minimum {self.lower}", self.lower)
        return replace(self, upper=value)


def _raise_bounds(option: str, value: AnyType, message: str, other: AnyType = None) -> None:
    _reject(InvalidBoundsError(option, value, message, other))


def _reject(error: ValidatorConfigurationError) -> None:
    logger.debug(f"Rejected configuration: {error}")
    raise error


def require_length(option: str, value: AnyType) -> int:
    """Check that a length bound is a non-negative integer.

    Raises:
        InvalidBoundsError: If the bound is not a non-negative int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        _raise_bounds(option, value, "length bounds must be integers")
    if value < 0:
        _raise_bounds(option, value, "length bounds cannot be negative")
    return value


def require_number(option: str, value: AnyType) -> AnyType:
    """Check that a range bound is a finite real number.

    Raises:
        InvalidBoundsError: If the bound is not a finite real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        _raise_bounds(option, value, "range bounds must be numbers")
    if not math.isfinite(value):
        _raise_bounds(option, value, "range bounds must be finite")
    return value


def _display(number: AnyType) -> AnyType:
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def length_check(subject: Sized | int, bounds: Bounds, kind_label: str) -> Result:
    """Check a length against bounds, minimum first.

    Args:
        subject: A sized value, or its length
        bounds: Length bounds; unset bounds are skipped
        kind_label: Name of the kind being measured, used in messages

    Returns:
        Success holding ``subject`` unchanged, or a failure naming the
        violated bound
    """
    length = subject if isinstance(subject, int) else len(subject)
    if bounds.lower is not None and length < bounds.lower:
        return failure(f"Expected {kind_label} to have a minimum length of {bounds.lower} but got {length}")
    if bounds.upper is not None and length > bounds.upper:
        return failure(f"Expected {kind_label} to have a maximum length of {bounds.upper} but got {length}")
    return success(subject)


def range_check(number: AnyType, bounds: Bounds, kind_label: str) -> Result:
    """Check a number against inclusive bounds, minimum first.

    Args:
        number: Number to check
        bounds: Range bounds; unset bounds are skipped
        kind_label: Name of the kind being checked, used in messages

    Returns:
        Success holding ``number`` unchanged, or a failure naming the
        violated bound
    """
    if bounds.lower is not None and number < bounds.lower:
        return failure(f"Expected {kind_label} to be at least {bounds.lower} but got {_display(number)}")
    if bounds.upper is not None and number > bounds.upper:
        return failure(f"Expected {kind_label} to be at most {bounds.upper} but got {_display(number)}")
    return success(number)


class Constraint(ABC):
    """Base class for rules applied to an already type-checked value."""

    @abstractmethod
    def check(self, value: AnyType) -> Result:
        """Validate a value against this constraint.

        Args:
            value: Value to validate

        Returns:
            Result with validation outcome
        """
        pass


class Length(Constraint):
    """Length of a sized value must fall within bounds."""

    def __init__(self, min: int | None = None, max: int | None = None, kind_label: str = "value"):
        bounds = Bounds()
        if min is not None:
            bounds = bounds.with_lower("min_length", require_length("min_length", min))
        if max is not None:
            bounds = bounds.with_upper("max_length", require_length("max_length", max))
        self.bounds = bounds
        self.kind_label = kind_label

    def check(self, value: AnyType) -> Result:
        return length_check(value, self.bounds, self.kind_label)


class Range(Constraint):
    """Number must fall within inclusive bounds."""

    def __init__(self, min: AnyType = None, max: AnyType = None, kind_label: str = "number"):
        bounds = Bounds()
        if min is not None:
            bounds = bounds.with_lower("min", require_number("min", min))
        if max is not None:
            bounds = bounds.with_upper("max", require_number("max", max))
        self.bounds = bounds
        self.kind_label = kind_label

    def check(self, value: AnyType) -> Result:
        return range_check(value, self.bounds, self.kind_label)


class Pattern(Constraint):
    """String must fully match a regular expression."""

    def __init__(self, pattern: str | RegexPattern):
        """Initialize pattern constraint.

        Args:
            pattern: Regex pattern (string or compiled pattern)
        """
        if isinstance(pattern, str):
            self.regex = re.compile(pattern)
        else:
            self.regex = pattern
        self.pattern_str = self.regex.pattern

    def check(self, value: AnyType) -> Result:
        if not self.regex.fullmatch(value):
            return failure(f"Expected string matching pattern '{self.pattern_str}' but got '{value}'")
        return success(value)


class OneOf(Constraint):
    """Value must equal one of the allowed values."""

    def __init__(self, values: list[AnyType]):
        if not values:
            _reject(ValidatorConfigurationError(
                "one_of() requires at least one allowed value", context={"option": "one_of"}
            ))
        self.values = list(values)

    def check(self, value: AnyType) -> Result:
        if value not in self.values:
            allowed = ", ".join(repr(v) for v in self.values)
            return failure(f"Expected one of {allowed} but got {value!r}")
        return success(value)


class Custom(Constraint):
    """Constraint backed by a callable.

    The callable may return a bool or a full Result. A returned Result is
    used as-is, so a successful one may replace the value. An exception
    raised by the callable is reported as a failure carrying its message.
    """

    def __init__(
        self,
        predicate: Callable[[AnyType], bool | Result],
        error_message: str = "Custom validation failed",
    ):
        self.predicate = predicate
        self.error_message = error_message

    def check(self, value: AnyType) -> Result:
        try:
            outcome = self.predicate(value)
        except Exception as e:
            return failure(f"{self.error_message}: {e!s}")

        if isinstance(outcome, Result):
            return outcome
        if outcome:
            return success(value)
        return failure(self.error_message)
