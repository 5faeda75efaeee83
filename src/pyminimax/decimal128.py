"""Field backed by IEEE 754 decimal128 arithmetic (34 significant digits).

Uses :mod:`decimal` with a dedicated context; every decimal signal that
would otherwise yield an infinity or NaN is trapped and re-raised as
:class:`ArithmeticError`.
"""

from __future__ import annotations

import decimal
import math

from pyminimax.field import RealField, RealFieldElement, _is_scalar

DECIMAL128_CONTEXT = decimal.Context(
    prec=34,
    rounding=decimal.ROUND_HALF_EVEN,
    Emin=-6143,
    Emax=6144,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)

_DECIMAL_ZERO = decimal.Decimal(0)


class Decimal128(RealFieldElement):
    """A finite decimal128 number wrapped as a field element.

    Examples
    --------
    >>> field = Decimal128.field()
    >>> third = field.one() / 3
    >>> str(third)
    '0.3333333333333333333333333333333333'
    """

    __slots__ = ("_value",)

    def __init__(self, value):
        if isinstance(value, float) and not math.isfinite(value):
            raise ArithmeticError(f"Cannot represent {value} as Decimal128")
        try:
            dec = DECIMAL128_CONTEXT.plus(decimal.Decimal(value))
        except decimal.DecimalException as exc:
            raise ArithmeticError(f"Cannot represent {value!r} as Decimal128") from exc
        if not dec.is_finite():
            raise ArithmeticError(f"Cannot represent {value!r} as Decimal128")
        self._value = _DECIMAL_ZERO if dec.is_zero() else dec

    @classmethod
    def _create(cls, dec: decimal.Decimal) -> "Decimal128":
        obj = object.__new__(cls)
        obj._value = _DECIMAL_ZERO if dec.is_zero() else dec
        return obj

    @classmethod
    def field(cls) -> RealField:
        return _DECIMAL128_FIELD

    def _operand(self, other) -> decimal.Decimal:
        if _is_scalar(other):
            return Decimal128(float(other))._value
        if type(other) is not Decimal128:
            raise TypeError(
                f"Cannot combine Decimal128 with {type(other).__name__}; "
                f"operands must belong to the same field."
            )
        return other._value

    def _apply(self, operation: str, other) -> "Decimal128":
        o = self._operand(other)
        try:
            result = getattr(DECIMAL128_CONTEXT, operation)(self._value, o)
        except decimal.DivisionByZero as exc:
            raise ZeroDivisionError(
                f"Decimal128 division by zero: {self._value} / {o}"
            ) from exc
        except decimal.DecimalException as exc:
            raise ArithmeticError(
                f"Decimal128 {operation} failed for {self._value} and {o}"
            ) from exc
        return Decimal128._create(result)

    def plus(self, augend) -> "Decimal128":
        return self._apply("add", augend)

    def minus(self, subtrahend) -> "Decimal128":
        return self._apply("subtract", subtrahend)

    def times(self, multiplicand) -> "Decimal128":
        return self._apply("multiply", multiplicand)

    def divided_by(self, divisor) -> "Decimal128":
        return self._apply("divide", divisor)

    def negated(self) -> "Decimal128":
        return Decimal128._create(self._value.copy_negate())

    def abs(self) -> "Decimal128":
        return Decimal128._create(self._value.copy_abs())

    def as_float(self) -> float:
        return float(self._value)

    def as_decimal(self) -> decimal.Decimal:
        """Return the underlying :class:`decimal.Decimal`."""
        return self._value

    def compare_to(self, other: "Decimal128") -> int:
        o = self._operand(other)
        return (self._value > o) - (self._value < o)

    def _compare_scalar(self, value) -> int:
        # exact, without rounding to 34 digits, so == agrees with hash()
        value = value if isinstance(value, int) else float(value)
        if isinstance(value, float) and not math.isfinite(value):
            raise ArithmeticError(f"Cannot compare Decimal128 with {value}")
        o = decimal.Decimal(value)
        return (self._value > o) - (self._value < o)

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if _is_scalar(other):
            return self._equals_scalar(other)
        if not isinstance(other, Decimal128):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        # Decimal hashes numerically, so 1.0 and 1.00 agree
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Decimal128('{self._value}')"

    def __str__(self) -> str:
        return str(self._value)


class _Decimal128Field(RealField):

    def __init__(self):
        self._zero = Decimal128._create(_DECIMAL_ZERO)
        self._one = Decimal128._create(decimal.Decimal(1))

    def zero(self) -> Decimal128:
        return self._zero

    def one(self) -> Decimal128:
        return self._one

    def from_float(self, value: float) -> Decimal128:
        return Decimal128(float(value))

    def from_string(self, text: str) -> Decimal128:
        """Parse a decimal literal, rounding it to 34 significant digits."""
        return Decimal128(str(text))

    def __repr__(self) -> str:
        return "Decimal128.field()"


_DECIMAL128_FIELD = _Decimal128Field()
