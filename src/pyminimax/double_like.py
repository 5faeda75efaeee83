"""Field backed by native double-precision floats."""

from __future__ import annotations

import math

from pyminimax.field import RealField, RealFieldElement, _is_scalar


def _finite_or_raise(value: float, operation: str) -> "DoubleLike":
    if not math.isfinite(value):
        raise ArithmeticError(f"{operation} produced a non-finite value: {value}")
    return DoubleLike._create(value)


class DoubleLike(RealFieldElement):
    """A finite float wrapped as a field element.

    Infinities and NaN are never held; ``-0.0`` is stored as ``0.0`` so that
    equality, hashing and ordering agree.

    Examples
    --------
    >>> field = DoubleLike.field()
    >>> x = field.from_float(1.5)
    >>> (x * 2 - 1).as_float()
    2.0
    >>> field.from_float(-0.0) == field.zero()
    True
    """

    __slots__ = ("_value",)

    def __init__(self, value: float):
        value = float(value)
        if not math.isfinite(value):
            raise ArithmeticError(f"Cannot represent {value} as DoubleLike")
        self._value = _create_raw(value)

    @classmethod
    def _create(cls, value: float) -> "DoubleLike":
        # value is already known to be finite
        obj = object.__new__(cls)
        obj._value = _create_raw(value)
        return obj

    @classmethod
    def field(cls) -> RealField:
        return _DOUBLE_FIELD

    def _operand(self, other) -> float:
        if _is_scalar(other):
            value = float(other)
            if not math.isfinite(value):
                raise ArithmeticError(f"Cannot represent {value} as DoubleLike")
            return value
        if type(other) is not DoubleLike:
            raise TypeError(
                f"Cannot combine DoubleLike with {type(other).__name__}; "
                f"operands must belong to the same field."
            )
        return other._value

    def plus(self, augend) -> "DoubleLike":
        return _finite_or_raise(self._value + self._operand(augend), "plus")

    def minus(self, subtrahend) -> "DoubleLike":
        return _finite_or_raise(self._value - self._operand(subtrahend), "minus")

    def times(self, multiplicand) -> "DoubleLike":
        return _finite_or_raise(self._value * self._operand(multiplicand), "times")

    def divided_by(self, divisor) -> "DoubleLike":
        d = self._operand(divisor)
        if d == 0.0:
            raise ZeroDivisionError(f"DoubleLike division by zero: {self._value} / 0")
        return _finite_or_raise(self._value / d, "divided_by")

    def negated(self) -> "DoubleLike":
        return DoubleLike._create(-self._value)

    def abs(self) -> "DoubleLike":
        return DoubleLike._create(abs(self._value))

    def as_float(self) -> float:
        return self._value

    def compare_to(self, other: "DoubleLike") -> int:
        o = self._operand(other)
        return (self._value > o) - (self._value < o)

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if _is_scalar(other):
            return self._equals_scalar(other)
        if not isinstance(other, DoubleLike):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"DoubleLike({self._value!r})"

    def __str__(self) -> str:
        return repr(self._value)


def _create_raw(value: float) -> float:
    # -0.0 == 0.0, so this maps both zeros to +0.0
    return 0.0 if value == 0.0 else value


class _DoubleField(RealField):

    def __init__(self):
        self._zero = DoubleLike._create(0.0)
        self._one = DoubleLike._create(1.0)

    def zero(self) -> DoubleLike:
        return self._zero

    def one(self) -> DoubleLike:
        return self._one

    def from_float(self, value: float) -> DoubleLike:
        return DoubleLike(value)

    def __repr__(self) -> str:
        return "DoubleLike.field()"


_DOUBLE_FIELD = _DoubleField()
