"""Composable runtime validators for untrusted values.

Build a validator tree from primitive and composite builders, then call
``validate`` on the root. Validation failures come back as a Result with a
structured error; only a malformed validator tree raises.

- Builders: ``string``, ``number``, ``boolean``, ``symbol``, ``any_``,
  ``object_``, ``list_``
- Results: ``Result`` with ``error`` / ``value``
- Classification: ``classify`` and the ``Kind`` enum
- Constraints: ``Length``, ``Range``, ``Pattern``, ``OneOf``, ``Custom``
"""

from .base import SupportsValidate, Validator, is_validator
from .builders import any_, boolean, list_, number, object_, string, symbol
from .composites import ListValidator, ObjectValidator
from .constraints import (
    Bounds,
    Constraint,
    Custom,
    Length,
    OneOf,
    Pattern,
    Range,
    length_check,
    range_check,
)
from .exceptions import (
    ConflictingCoercionError,
    InvalidBoundsError,
    InvalidSchemaError,
    ResultValidationError,
    ValidatorConfigurationError,
)
from .kinds import UNDEFINED, Kind, Symbol, classify, is_sentinel
from .primitives import (
    DEFAULT_FLOAT_PRECISION,
    AnyValidator,
    BooleanValidator,
    KindValidator,
    NumberValidator,
    StringValidator,
    SymbolValidator,
)
from .result import ErrorTree, Result, failure, success, type_error

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Builders
    "string",
    "number",
    "boolean",
    "symbol",
    "any_",
    "object_",
    "list_",
    # Validators
    "Validator",
    "SupportsValidate",
    "is_validator",
    "KindValidator",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "SymbolValidator",
    "AnyValidator",
    "ObjectValidator",
    "ListValidator",
    "DEFAULT_FLOAT_PRECISION",
    # Results
    "Result",
    "ErrorTree",
    "success",
    "failure",
    "type_error",
    # Classification
    "Kind",
    "Symbol",
    "UNDEFINED",
    "classify",
    "is_sentinel",
    # Constraints
    "Bounds",
    "Constraint",
    "Length",
    "Range",
    "Pattern",
    "OneOf",
    "Custom",
    "length_check",
    "range_check",
    # Exceptions
    "ValidatorConfigurationError",
    "InvalidBoundsError",
    "ConflictingCoercionError",
    "InvalidSchemaError",
    "ResultValidationError",
]
