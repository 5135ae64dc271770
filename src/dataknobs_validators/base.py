"""Validator base class and the protocol composite validators accept.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Protocol, TypeVar, TYPE_CHECKING, runtime_checkable

from .constraints import Constraint, Custom, OneOf
from .modifiers import OptionalMixin
from .result import Result, success

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

V = TypeVar("V", bound="Validator")


@runtime_checkable
class SupportsValidate(Protocol):
    """Anything with a ``validate(value) -> Result`` method.

    Composite validators accept any object satisfying this protocol as a
    child, not only subclasses of :class:`Validator`.
    """

    def validate(self, value: Any) -> Result:
        ...


class Validator(OptionalMixin, ABC):
    """Base class for all validators.

    Configuration is builder state: modifiers mutate the instance and return
    it for chaining. A configured validator holds no per-call state and may
    be reused for any number of ``validate`` calls, but must not be
    reconfigured while another thread is validating with it. Use ``copy()``
    to derive an independently configurable instance.

    Subclasses implement ``_validate``; ``validate`` wraps it with the
    optional short-circuit and any extra constraints.
    """

    kind_label: str = "value"

    def __init__(self) -> None:
        self._constraints: list[Constraint] = []

    def validate(self, value: Any) -> Result:
        """Validate a value.

        Ordinary validation failures are returned in the Result, never
        raised.

        Args:
            value: Value to validate

        Returns:
            Result with the validated value or an error
        """
        if self._passes_as_optional(value):
            return success(value)

        result = self._validate(value)
        if result.error is not None:
            return result

        for constraint in self._constraints:
            result = constraint.check(result.value)
            if result.error is not None:
                return result
        return result

    @abstractmethod
    def _validate(self, value: Any) -> Result:
        """Type-check, bound-check and coerce a non-short-circuited value."""
        pass

    def validate_many(self, values: Iterable[Any], stop_on_error: bool = False) -> list[Result]:
        """Validate several values independently.

        Args:
            values: Values to validate
            stop_on_error: If True, stop after the first failed value

        Returns:
            List of Results, in input order
        """
        results = []
        for value in values:
            result = self.validate(value)
            results.append(result)
            if stop_on_error and not result.valid:
                break
        return results

    def add_constraint(self: V, constraint: Constraint) -> V:
        """Apply an extra constraint to values that pass validation (fluent API).

        Constraints run in the order added. Each sees the value produced by
        the previous step (possibly coerced or replaced by a constraint's
        own Result), and the first failure is returned.
        """
        self._constraints.append(constraint)
        return self

    def one_of(self: V, *values: Any) -> V:
        """Require the validated value to equal one of ``values`` (fluent API)."""
        return self.add_constraint(OneOf(list(values)))

    def refine(
        self: V,
        predicate: Callable[[Any], bool | Result],
        message: str = "Custom validation failed",
    ) -> V:
        """Require ``predicate`` to accept the validated value (fluent API).

        Args:
            predicate: Callable returning a bool, or a Result to use as-is
                (a successful Result replaces the validated value)
            message: Error message when the predicate returns False
        """
        return self.add_constraint(Custom(predicate, message))

    def copy(self: V) -> V:
        """Return an independent deep copy of this validator and its children."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        suffix = ", optional" if self._optional else ""
        return f"{type(self).__name__}({self.kind_label}{suffix})"


def is_validator(candidate: Any) -> bool:
    """Return True if ``candidate`` is an instance exposing a callable ``validate``."""
    if isinstance(candidate, type):
        return False
    return callable(getattr(candidate, "validate", None))
