"""Real-number field abstraction shared by every approximation routine.

A field supplies immutable, finite, totally ordered elements with the four
arithmetic operations. An operation whose mathematical result cannot be
represented as a finite element raises :class:`ArithmeticError` rather than
producing an infinity or NaN, so the Remez engine can be written once and
run on any field implementation with identical semantics.
"""

from __future__ import annotations

import abc
from typing import List

import numpy as np


def _is_scalar(value) -> bool:
    """Return True if *value* is a plain real scalar (int, float, or numpy scalar)."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


class RealField(abc.ABC):
    """Factory for the elements of one field.

    Implementations must return the *same* object from every call to
    :meth:`zero` and :meth:`one`, and :meth:`from_float` must map ``0.0`` and
    ``-0.0`` to the same element and preserve the order of distinct finite
    floats.
    """

    @abc.abstractmethod
    def zero(self) -> "RealFieldElement":
        """Additive identity."""

    @abc.abstractmethod
    def one(self) -> "RealFieldElement":
        """Multiplicative identity."""

    @abc.abstractmethod
    def from_float(self, value: float) -> "RealFieldElement":
        """Convert a finite float to an element.

        Raises
        ------
        ArithmeticError
            If *value* is infinite or NaN.
        """

    def create_array(self, length: int) -> List["RealFieldElement"]:
        """Return a fresh list of *length* zeros.

        Raises
        ------
        ValueError
            If *length* is negative.
        """
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        return [self.zero()] * length

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RealFieldElement(abc.ABC):
    """Immutable finite real number belonging to a :class:`RealField`.

    The binary operations accept either an element of the same field or a
    plain real scalar, which is lifted with :meth:`RealField.from_float`.
    Equality is consistent with :meth:`compare_to`, and ``+0`` and ``-0``
    are the same value.
    """

    __slots__ = ()

    @classmethod
    @abc.abstractmethod
    def field(cls) -> RealField:
        """Return the factory of this element's field."""

    @abc.abstractmethod
    def plus(self, augend) -> "RealFieldElement":
        """Return ``self + augend``."""

    @abc.abstractmethod
    def minus(self, subtrahend) -> "RealFieldElement":
        """Return ``self - subtrahend``."""

    @abc.abstractmethod
    def times(self, multiplicand) -> "RealFieldElement":
        """Return ``self * multiplicand``."""

    @abc.abstractmethod
    def divided_by(self, divisor) -> "RealFieldElement":
        """Return ``self / divisor``; dividing by zero raises ArithmeticError."""

    @abc.abstractmethod
    def negated(self) -> "RealFieldElement":
        """Return ``-self``."""

    @abc.abstractmethod
    def abs(self) -> "RealFieldElement":
        """Return ``|self|``."""

    @abc.abstractmethod
    def as_float(self) -> float:
        """Lossy conversion to float. May overflow to infinity, never NaN."""

    @abc.abstractmethod
    def compare_to(self, other: "RealFieldElement") -> int:
        """Return -1, 0 or 1 as ``self`` is less than, equal to or greater than *other*."""

    @abc.abstractmethod
    def __eq__(self, other) -> bool: ...

    @abc.abstractmethod
    def __hash__(self) -> int: ...

    def _coerce(self, other) -> "RealFieldElement":
        """Lift a scalar into this field, or check *other* belongs to it."""
        if _is_scalar(other):
            return self.field().from_float(float(other))
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}; "
                f"operands must belong to the same field."
            )
        return other

    # Operator sugar, all routed through the named methods

    def __add__(self, other):
        return self.plus(other)

    def __radd__(self, other):
        return self._coerce(other).plus(self)

    def __sub__(self, other):
        return self.minus(other)

    def __rsub__(self, other):
        return self._coerce(other).minus(self)

    def __mul__(self, other):
        return self.times(other)

    def __rmul__(self, other):
        return self._coerce(other).times(self)

    def __truediv__(self, other):
        return self.divided_by(other)

    def __rtruediv__(self, other):
        return self._coerce(other).divided_by(self)

    def __neg__(self):
        return self.negated()

    def __abs__(self):
        return self.abs()

    def __float__(self) -> float:
        return self.as_float()

    def _compare_scalar(self, value) -> int:
        """Compare with a plain real scalar. Raises ArithmeticError for NaN or infinity."""
        return self.compare_to(self.field().from_float(float(value)))

    def _equals_scalar(self, value) -> bool:
        try:
            return self._compare_scalar(value) == 0
        except ArithmeticError:
            # NaN and infinities equal no field element
            return False

    def _order(self, other) -> int:
        if _is_scalar(other):
            return self._compare_scalar(other)
        return self.compare_to(self._coerce(other))

    def __lt__(self, other) -> bool:
        return self._order(other) < 0

    def __le__(self, other) -> bool:
        return self._order(other) <= 0

    def __gt__(self, other) -> bool:
        return self._order(other) > 0

    def __ge__(self, other) -> bool:
        return self._order(other) >= 0
