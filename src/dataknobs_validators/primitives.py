"""Validators for atomic kinds: string, number, boolean, symbol and any.
"""

from __future__ import annotations

import logging
import math
import string as string_module
from re import Pattern as RegexPattern
from typing import Any

from .base import Validator
from .constraints import Bounds, Pattern, range_check, require_number
from .exceptions import ConflictingCoercionError, ValidatorConfigurationError
from .kinds import Kind, classify, is_sentinel
from .modifiers import LengthBoundedMixin
from .result import Result, failure, success, type_error

logger = logging.getLogger(__name__)

DEFAULT_FLOAT_PRECISION = 3

_NUMERIC_CHARS = frozenset(string_module.digits + ".")


class KindValidator(Validator):
    """Accepts exactly the values classified as ``kind``."""

    kind: Kind

    def __init__(self, kind: Kind | None = None):
        super().__init__()
        if kind is not None:
            self.kind = kind
        self.kind_label = self.kind.value

    def _validate(self, value: Any) -> Result:
        actual = classify(value)
        if actual is not self.kind:
            return type_error(self.kind, actual)
        return success(value)


class StringValidator(LengthBoundedMixin, KindValidator):
    """Validates strings, with optional length bounds and pattern."""

    kind = Kind.STRING
    length_label = "string"

    def pattern(self, regex: str | RegexPattern) -> StringValidator:
        """Require the whole string to match ``regex`` (fluent API)."""
        return self.add_constraint(Pattern(regex))

    def _validate(self, value: Any) -> Result:
        result = super()._validate(value)
        if result.error is not None:
            return result
        length_failure = self._check_length(value)
        if length_failure is not None:
            return length_failure
        return result


class BooleanValidator(KindValidator):
    kind = Kind.BOOLEAN


class SymbolValidator(KindValidator):
    """Validates opaque tokens: ``Symbol`` instances and enum members."""

    kind = Kind.SYMBOL


class AnyValidator(Validator):
    """Accepts any value except the absent and null sentinels.

    ``allow_undefined_null()`` lifts the sentinel restriction. ``optional()``
    is still checked first, so an optional validator always passes
    sentinels through.
    """

    kind_label = "any"

    def __init__(self) -> None:
        super().__init__()
        self._allow_undefined_null = False

    def allow_undefined_null(self) -> AnyValidator:
        """Also accept ``UNDEFINED`` and ``None`` (fluent API)."""
        self._allow_undefined_null = True
        return self

    def _validate(self, value: Any) -> Result:
        if is_sentinel(value) and not self._allow_undefined_null:
            return type_error(self.kind_label, classify(value))
        return success(value)


class NumberValidator(Validator):
    """Validates numbers and numeric strings.

    Accepted inputs are real numbers (not booleans) and strings made only of
    ASCII digits with at most one ``.`` separator. NaN and infinities are
    rejected. The parsed value is range-checked; on success the original
    input is returned unless ``to_integer()`` or ``to_float()`` requested a
    conversion.

    Example:
        ```python
        number().min(0).max(10).validate("3.5")
        # Result(error=None, value='3.5')
        number().to_integer().validate("3.5")
        # Result(error=None, value=4)
        ```
    """

    kind_label = Kind.NUMBER.value

    def __init__(self) -> None:
        super().__init__()
        self._range = Bounds()
        self._to_integer = False
        self._float_precision: int | None = None

    def min(self, value: float) -> NumberValidator:
        """Require the parsed number to be at least ``value`` (fluent API).

        Raises:
            InvalidBoundsError: If ``value`` is not a finite number, or is not
                strictly below a configured maximum
        """
        self._range = self._range.with_lower("min", require_number("min", value))
        return self

    def max(self, value: float) -> NumberValidator:
        """Require the parsed number to be at most ``value`` (fluent API).

        Raises:
            InvalidBoundsError: If ``value`` is not a finite number, or is not
                strictly above a configured minimum
        """
        self._range = self._range.with_upper("max", require_number("max", value))
        return self

    def to_integer(self) -> NumberValidator:
        """Return the parsed number rounded half up to an int (fluent API).

        Raises:
            ConflictingCoercionError: If ``to_float()`` was already configured
        """
        if self._float_precision is not None:
            self._reject(ConflictingCoercionError("to_integer", "to_float"))
        self._to_integer = True
        return self

    def to_float(self, precision: int = DEFAULT_FLOAT_PRECISION) -> NumberValidator:
        """Return the parsed number rounded to ``precision`` decimals (fluent API).

        Raises:
            ConflictingCoercionError: If ``to_integer()`` was already configured
            ValidatorConfigurationError: If ``precision`` is not a non-negative int
        """
        if self._to_integer:
            self._reject(ConflictingCoercionError("to_float", "to_integer"))
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            self._reject(ValidatorConfigurationError(
                f"Invalid to_float({precision!r}): precision must be a non-negative integer",
                context={"option": "to_float", "value": precision},
            ))
        self._float_precision = precision
        return self

    @property
    def range_bounds(self) -> Bounds:
        return self._range

    def _reject(self, error: ValidatorConfigurationError) -> None:
        logger.debug(f"Rejected configuration: {error}")
        raise error

    def _validate(self, value: Any) -> Result:
        kind = classify(value)
        if kind is Kind.STRING and not _is_numeric_string(value):
            return type_error(Kind.NUMBER, kind)
        if kind not in (Kind.NUMBER, Kind.STRING):
            return type_error(Kind.NUMBER, kind)

        try:
            parsed = float(value)
        except OverflowError:
            parsed = math.inf
        except ValueError:
            return type_error(Kind.NUMBER, kind)

        if math.isinf(parsed):
            return failure(f"Expected a finite number but got {'-' if parsed < 0 else ''}Infinity")
        if math.isnan(parsed):
            return type_error(Kind.NUMBER, Kind.NAN)

        if self._range.is_set:
            checked = range_check(parsed, self._range, self.kind_label)
            if checked.error is not None:
                return checked

        if self._to_integer:
            return success(_round_half_up(value if _is_exact_int(value) else parsed))
        if self._float_precision is not None:
            return success(round(parsed, self._float_precision))
        return success(value)


def _is_exact_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _round_half_up(number: float | int) -> int:
    floor = math.floor(number)
    return floor + 1 if number - floor >= 0.5 else floor


def _is_numeric_string(value: str) -> bool:
    return all(char in _NUMERIC_CHARS for char in value) and value.count(".") <= 1
