"""PyMinimax: minimax polynomial approximation by the Remez exchange algorithm.

Provides the :class:`MinimaxApproxExecutor` class for computing polynomials
that minimize the worst-case scaled error ``(f(x) - p(x)) / s_f(x)`` of a
target function on a closed interval. The algorithm is written once against
the :class:`RealField` abstraction and runs on native doubles
(:class:`DoubleLike`) or on 34-digit decimal arithmetic
(:class:`Decimal128`) for coefficients beyond double precision.

Example
-------
>>> import math
>>> from pyminimax import FunctionTarget, MinimaxApproxExecutor
>>> target = FunctionTarget.from_floats(math.sin, None, -1.0, 1.0)
>>> result = MinimaxApproxExecutor.of(11).apply(target)  # doctest: +SKIP
>>> result.is_present()  # doctest: +SKIP
True
>>> poly = result.get()  # doctest: +SKIP
>>> abs(poly.vectorized_eval(0.5) - math.sin(0.5)) < 1e-12  # doctest: +SKIP
True
"""

from pyminimax._diagnostics import error_estimate
from pyminimax._errors import ConfigurationError, DomainError, EmptyResultError
from pyminimax._nodes import chebyshev_nodes
from pyminimax._version import __version__
from pyminimax.decimal128 import Decimal128
from pyminimax.double_like import DoubleLike
from pyminimax.field import RealField, RealFieldElement
from pyminimax.interval import ClosedInterval
from pyminimax.polynomial import NewtonPolynomial, Polynomial
from pyminimax.remez import MinimaxApproxExecutor, RemezPolynomialFactory, ScaledError
from pyminimax.result import ApproxResult
from pyminimax.target import ApproxTarget, FunctionTarget

__all__ = [
    "ApproxResult",
    "ApproxTarget",
    "ClosedInterval",
    "ConfigurationError",
    "Decimal128",
    "DomainError",
    "DoubleLike",
    "EmptyResultError",
    "FunctionTarget",
    "MinimaxApproxExecutor",
    "NewtonPolynomial",
    "Polynomial",
    "RealField",
    "RealFieldElement",
    "RemezPolynomialFactory",
    "ScaledError",
    "chebyshev_nodes",
    "error_estimate",
    "__version__",
]
