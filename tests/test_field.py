"""Tests for the real-field abstraction: DoubleLike and Decimal128."""

import decimal
import math

import pytest

from pyminimax import Decimal128, DoubleLike

DOUBLE = DoubleLike.field()
DECIMAL = Decimal128.field()

FIELDS = [pytest.param(DOUBLE, id="double"), pytest.param(DECIMAL, id="decimal128")]


# ---------------------------------------------------------------------------
# Factory contract
# ---------------------------------------------------------------------------

class TestFactory:
    @pytest.mark.parametrize("field", FIELDS)
    def test_identities_are_singletons(self, field):
        assert field.one() is field.one()
        assert field.zero() is field.zero()

    @pytest.mark.parametrize("field", FIELDS)
    def test_identities_values(self, field):
        assert field.zero().as_float() == 0.0
        assert field.one().as_float() == 1.0

    @pytest.mark.parametrize("field", FIELDS)
    def test_signed_zeros_collapse(self, field):
        pos = field.from_float(0.0)
        neg = field.from_float(-0.0)
        assert pos == neg
        assert hash(pos) == hash(neg)
        assert pos.compare_to(neg) == 0
        assert neg == field.zero()

    @pytest.mark.parametrize("field", FIELDS)
    @pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
    def test_non_finite_rejected(self, field, bad):
        with pytest.raises(ArithmeticError):
            field.from_float(bad)

    @pytest.mark.parametrize("field", FIELDS)
    def test_order_preserving(self, field):
        xs = [-1e300, -2.5, -1e-300, 0.0, 5e-324, 1e-300, 1.0, 1.0000000000000002, 1e300]
        elements = [field.from_float(x) for x in xs]
        for a, b in zip(elements, elements[1:]):
            assert a.compare_to(b) < 0
            assert a < b
            assert a != b

    @pytest.mark.parametrize("field", FIELDS)
    def test_create_array(self, field):
        arr = field.create_array(3)
        assert len(arr) == 3
        assert all(e == field.zero() for e in arr)
        assert field.create_array(0) == []

    def test_create_array_negative_raises(self):
        with pytest.raises(ValueError, match="length"):
            DOUBLE.create_array(-1)


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

class TestArithmetic:
    @pytest.mark.parametrize("field", FIELDS)
    def test_basic_operations(self, field):
        a = field.from_float(1.5)
        b = field.from_float(0.5)
        assert a.plus(b).as_float() == 2.0
        assert a.minus(b).as_float() == 1.0
        assert a.times(b).as_float() == 0.75
        assert a.divided_by(b).as_float() == 3.0
        assert a.negated().as_float() == -1.5
        assert a.negated().abs() == a

    @pytest.mark.parametrize("field", FIELDS)
    def test_operators_match_named_methods(self, field):
        a = field.from_float(1.25)
        b = field.from_float(-0.75)
        assert a + b == a.plus(b)
        assert a - b == a.minus(b)
        assert a * b == a.times(b)
        assert a / b == a.divided_by(b)
        assert -a == a.negated()
        assert abs(b) == b.abs()
        assert float(a) == 1.25

    @pytest.mark.parametrize("field", FIELDS)
    def test_scalar_operands(self, field):
        a = field.from_float(3.0)
        assert a.times(0.5).as_float() == 1.5
        assert (a + 1).as_float() == 4.0
        assert (1 - a).as_float() == -2.0
        assert (6 / a).as_float() == 2.0
        assert a > 2
        assert a <= 3.0

    @pytest.mark.parametrize("field", FIELDS)
    @pytest.mark.parametrize("scalar", [1.0, 1, -2.5, 0.1, 1e-300])
    def test_scalar_equality_agrees_with_ordering(self, field, scalar):
        x = field.from_float(1.0)
        assert (x <= scalar and x >= scalar) == (x == scalar)
        y = field.from_float(float(scalar))
        assert (y <= scalar and y >= scalar) == (y == scalar)
        if y == scalar:
            assert hash(y) == hash(scalar)

    @pytest.mark.parametrize("field", FIELDS)
    def test_scalar_equality(self, field):
        x = field.from_float(1.0)
        assert x == 1.0
        assert x == 1
        assert 1.0 == x
        assert x != 1.5
        assert x != math.nan
        assert x != math.inf

    def test_decimal_scalar_comparison_is_exact(self):
        # 0.1 rounded to 34 digits sits just below the binary double 0.1
        x = DECIMAL.from_float(0.1)
        assert x != 0.1
        assert x < 0.1

    @pytest.mark.parametrize("field", FIELDS)
    def test_division_by_zero_raises(self, field):
        with pytest.raises(ArithmeticError):
            field.one().divided_by(field.zero())
        with pytest.raises(ArithmeticError):
            field.zero().divided_by(field.zero())

    def test_double_overflow_raises(self):
        big = DOUBLE.from_float(1e308)
        with pytest.raises(ArithmeticError, match="non-finite"):
            big.times(10.0)
        with pytest.raises(ArithmeticError):
            big.plus(big)

    def test_decimal_overflow_raises(self):
        big = DECIMAL.from_string("1e6000")
        with pytest.raises(ArithmeticError):
            big.times(big)

    def test_decimal_exceeds_double_range(self):
        huge = DECIMAL.from_string("1e400")
        assert huge.as_float() == math.inf
        assert not math.isnan(huge.as_float())

    def test_operations_are_pure(self):
        a1, a2 = DOUBLE.from_float(0.1), DOUBLE.from_float(0.1)
        b1, b2 = DOUBLE.from_float(0.3), DOUBLE.from_float(0.3)
        assert a1.plus(b1) == a2.plus(b2)
        assert a1.divided_by(b1) == a2.divided_by(b2)
        assert hash(a1.times(b1)) == hash(a2.times(b2))


# ---------------------------------------------------------------------------
# Field-specific behaviour
# ---------------------------------------------------------------------------

class TestDoubleLike:
    def test_constructor_rejects_nan(self):
        with pytest.raises(ArithmeticError):
            DoubleLike(math.nan)

    def test_repr_and_str(self):
        x = DoubleLike(2.5)
        assert repr(x) == "DoubleLike(2.5)"
        assert str(x) == "2.5"

    def test_field(self):
        assert DoubleLike(1.0).field() is DOUBLE


class TestDecimal128:
    def test_precision_beyond_double(self):
        third = DECIMAL.one().divided_by(3)
        assert str(third) == "0." + "3" * 34
        # 34 digits survive a round trip that doubles would lose
        back = third.times(3)
        assert back.as_decimal() == decimal.Decimal("0." + "9" * 34)

    def test_from_float_is_exact_up_to_34_digits(self):
        x = DECIMAL.from_float(0.1)
        assert x.as_decimal() == decimal.Decimal("0.1000000000000000055511151231257827")

    def test_equality_ignores_exponent(self):
        assert DECIMAL.from_string("1.0") == DECIMAL.from_string("1.00")
        assert hash(DECIMAL.from_string("1.0")) == hash(DECIMAL.from_string("1.00"))

    def test_invalid_string_raises(self):
        with pytest.raises(ArithmeticError):
            DECIMAL.from_string("not a number")
        with pytest.raises(ArithmeticError):
            DECIMAL.from_string("Infinity")


# ---------------------------------------------------------------------------
# Mixing fields
# ---------------------------------------------------------------------------

class TestMixedFields:
    def test_mixed_arithmetic_raises(self):
        with pytest.raises(TypeError, match="same field"):
            DOUBLE.one().plus(DECIMAL.one())
        with pytest.raises(TypeError, match="same field"):
            DECIMAL.one() * DOUBLE.one()

    def test_mixed_equality_is_false(self):
        assert DOUBLE.one() != DECIMAL.one()

    def test_bool_is_not_a_scalar(self):
        with pytest.raises(TypeError):
            DOUBLE.one().plus(True)
