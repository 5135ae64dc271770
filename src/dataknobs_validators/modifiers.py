"""Reusable configuration fragments mixed into validators.
"""

from __future__ import annotations

from typing import Any, TypeVar

from .constraints import Bounds, length_check, require_length
from .kinds import is_sentinel
from .result import Result

V = TypeVar("V")


class OptionalMixin:
    """Adds the ``optional()`` modifier.

    An optional validator accepts the absent and null sentinels as-is,
    before any type classification takes place.
    """

    _optional: bool = False

    def optional(self: V) -> V:
        """Accept ``UNDEFINED`` and ``None`` without further checks (fluent API)."""
        self._optional = True  # type: ignore[attr-defined]
        return self

    @property
    def is_optional(self) -> bool:
        return self._optional

    def _passes_as_optional(self, value: Any) -> bool:
        return self._optional and is_sentinel(value)


class LengthBoundedMixin:
    """Adds ``min_length()`` / ``max_length()`` modifiers.

    Subclasses decide what is measured by passing the subject to
    ``_check_length``: characters for strings, keys for objects, elements
    for lists.
    """

    _length_bounds: Bounds = Bounds()
    length_label: str = "value"

    def min_length(self: V, length: int) -> V:
        """Require at least ``length`` items (fluent API).

        Raises:
            InvalidBoundsError: If ``length`` is not a non-negative int, or is
                not strictly below a configured maximum
        """
        bounds = self._length_bounds  # type: ignore[attr-defined]
        self._length_bounds = bounds.with_lower("min_length", require_length("min_length", length))  # type: ignore[attr-defined]
        return self

    def max_length(self: V, length: int) -> V:
        """Allow at most ``length`` items (fluent API).

        Raises:
            InvalidBoundsError: If ``length`` is not a non-negative int, or is
                not strictly above a configured minimum
        """
        bounds = self._length_bounds  # type: ignore[attr-defined]
        self._length_bounds = bounds.with_upper("max_length", require_length("max_length", length))  # type: ignore[attr-defined]
        return self

    @property
    def length_bounds(self) -> Bounds:
        return self._length_bounds

    def _check_length(self, subject: Any) -> Result | None:
        """Return a failure if the subject's length is out of bounds, else None."""
        if not self._length_bounds.is_set:
            return None
        result = length_check(subject, self._length_bounds, self.length_label)
        return result if not result.valid else None
