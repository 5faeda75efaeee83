"""Finite closed intervals over a real field."""

from __future__ import annotations

from pyminimax._errors import ConfigurationError
from pyminimax.field import RealField, RealFieldElement


class ClosedInterval:
    """Immutable closed interval ``[lower, upper]`` of field elements.

    Construct with :meth:`from_boundaries`; the two boundaries may be given
    in either order. Intervals too narrow to be numerically meaningful are
    rejected: the width must be at least
    ``max(1e-200, 1e-10 * |x1|, 1e-10 * |x2|)``.

    Examples
    --------
    >>> from pyminimax import DoubleLike
    >>> interval = ClosedInterval.from_floats(3.0, 1.0, DoubleLike.field())
    >>> interval
    ClosedInterval[1.0, 3.0]
    >>> interval.accepts(DoubleLike(2.0))
    True
    """

    LOWER_LIMIT_OF_ABSOLUTE_WIDTH = 1e-200
    LOWER_LIMIT_OF_RELATIVE_WIDTH = 1e-10

    __slots__ = ("_lower", "_upper", "_width")

    def __init__(self, lower: RealFieldElement, upper: RealFieldElement):
        # Use from_boundaries(); this constructor trusts its arguments.
        self._lower = lower
        self._upper = upper
        self._width = upper.minus(lower)

    @property
    def lower(self) -> RealFieldElement:
        return self._lower

    @property
    def upper(self) -> RealFieldElement:
        return self._upper

    @property
    def width(self) -> RealFieldElement:
        return self._width

    def field(self) -> RealField:
        return self._lower.field()

    def accepts(self, x: RealFieldElement) -> bool:
        """Return True iff ``lower <= x <= upper``."""
        return x.compare_to(self._lower) >= 0 and x.compare_to(self._upper) <= 0

    @staticmethod
    def accepts_boundary_values(x1: RealFieldElement, x2: RealFieldElement) -> bool:
        """Return True if ``(x1, x2)`` would form a valid interval.

        Never raises for two elements of the same field.
        """
        try:
            width = x1.minus(x2).abs()
            if not width.as_float() >= ClosedInterval.LOWER_LIMIT_OF_ABSOLUTE_WIDTH:
                return False
            relative = ClosedInterval.LOWER_LIMIT_OF_RELATIVE_WIDTH
            return (
                width.compare_to(x1.abs().times(relative)) >= 0
                and width.compare_to(x2.abs().times(relative)) >= 0
            )
        except ArithmeticError:
            # e.g. x1 - x2 overflows: the boundaries cannot be handled
            return False

    @classmethod
    def from_boundaries(cls, x1: RealFieldElement, x2: RealFieldElement) -> "ClosedInterval":
        """Build the interval spanned by *x1* and *x2*.

        Raises
        ------
        ConfigurationError
            If the boundaries violate the minimum-width rule.
        """
        if not cls.accepts_boundary_values(x1, x2):
            raise ConfigurationError(
                f"Interval boundaries are too close or cannot be handled: "
                f"x1 = {x1}, x2 = {x2}"
            )
        if x1.compare_to(x2) > 0:
            x1, x2 = x2, x1
        return cls(x1, x2)

    @classmethod
    def from_floats(cls, x1: float, x2: float, field: RealField) -> "ClosedInterval":
        """Build an interval from float boundaries lifted into *field*."""
        try:
            lower = field.from_float(x1)
            upper = field.from_float(x2)
        except ArithmeticError as exc:
            raise ConfigurationError(
                f"Interval boundaries must be finite, got [{x1}, {x2}]"
            ) from exc
        return cls.from_boundaries(lower, upper)

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, ClosedInterval):
            return NotImplemented
        return self._lower == other._lower and self._upper == other._upper

    def __hash__(self) -> int:
        return hash((self._lower, self._upper))

    def __repr__(self) -> str:
        return f"ClosedInterval[{self._lower}, {self._upper}]"
