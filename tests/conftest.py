"""Shared test fixtures for PyMinimax tests."""

import math

import pytest

from pyminimax import (
    ApproxTarget,
    ClosedInterval,
    Decimal128,
    DoubleLike,
    FunctionTarget,
    MinimaxApproxExecutor,
)

DOUBLE = DoubleLike.field()
DECIMAL = Decimal128.field()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def d(x):
    """Shorthand for a DoubleLike element."""
    return DOUBLE.from_float(x)


def floats(elements):
    """Convert a sequence of field elements to a list of floats."""
    return [e.as_float() for e in elements]


def assert_relative(expected, actual, rel=1e-12):
    """Relative comparison that falls back to absolute near zero."""
    tol = rel * max(1.0, abs(expected))
    assert abs(actual - expected) <= tol, f"expected {expected}, got {actual}"


# ---------------------------------------------------------------------------
# Targets
# ---------------------------------------------------------------------------

class ConstantTarget(ApproxTarget):
    """f(x) = 2, s_f(x) = 2 on [1, 3]."""

    def __init__(self, field=DOUBLE):
        self._value = field.from_float(2.0)
        self._interval = ClosedInterval.from_floats(1.0, 3.0, field)

    def compute_value(self, x):
        return self._value

    def compute_scale(self, x):
        return self._value

    def interval(self):
        return self._interval


class LinearTarget(ApproxTarget):
    """f(x) = x, s_f(x) = x (relative error) on [1, 3]."""

    def __init__(self, field=DOUBLE):
        self._interval = ClosedInterval.from_floats(1.0, 3.0, field)

    def compute_value(self, x):
        return x

    def compute_scale(self, x):
        return x

    def interval(self):
        return self._interval


def sin_target():
    """sin(x) on [-1, 1], absolute error."""
    return FunctionTarget.from_floats(math.sin, None, -1.0, 1.0)


def exp_target(field=None):
    """exp(x) on [0, 1], relative error."""
    return FunctionTarget.from_floats(math.exp, math.exp, 0.0, 1.0, field=field)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def constant_target():
    return ConstantTarget()


@pytest.fixture
def linear_target():
    return LinearTarget()


@pytest.fixture(scope="module")
def sin_order11_result():
    """sin on [-1, 1] approximated with the default schedule at order 11."""
    return MinimaxApproxExecutor.of(11).apply(sin_target())


@pytest.fixture(scope="module")
def exp_order4_result():
    """exp on [0, 1], relative error, order 4, shortened schedule."""
    return MinimaxApproxExecutor(4, iterations_per_step=100).apply(exp_target())
