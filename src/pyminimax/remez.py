"""Minimax polynomial approximation by the Remez exchange algorithm.

Each iteration fits a *leveled* polynomial whose scaled error alternates in
sign with equal magnitude at the current reference nodes, then nudges every
node towards the nearby extremum of that error. Step sizes decrease on a
fixed schedule, so the run time is bounded in advance.

References
----------
- Remez (1934), "Sur la détermination des polynômes d'approximation de
  degré donnée", Comm. Soc. Math. Kharkov 10:41-63.
- Trefethen (2013), "Approximation Theory and Approximation Practice",
  SIAM, Chapter 10.
"""

from __future__ import annotations

import time
import warnings
from typing import List, Sequence, Tuple

import numpy as np

from pyminimax._errors import ConfigurationError, DomainError
from pyminimax._nodes import chebyshev_nodes
from pyminimax.field import RealFieldElement
from pyminimax.polynomial import NewtonPolynomial, Polynomial
from pyminimax.result import ApproxResult
from pyminimax.target import ApproxTarget

#: Relative step sizes of the exchange schedule, coarse to fine.
RELATIVE_DELTAS = (0.1, 0.03, 0.01, 0.003, 0.001, 3e-4, 1e-4)

#: Exchange iterations run for each entry of :data:`RELATIVE_DELTAS`.
DEFAULT_ITERATIONS_PER_STEP = 500

_MIN_RELATIVE_DELTA = 1e-4
_MAX_RELATIVE_DELTA = 0.1


class ScaledError:
    """Signed scaled error ``(f(x) - p(x)) / s_f(x)`` of a candidate polynomial."""

    def __init__(self, target: ApproxTarget, polynomial: Polynomial):
        self.target = target
        self.polynomial = polynomial

    def value(self, x: RealFieldElement) -> RealFieldElement:
        """Scaled error at *x*.

        Raises
        ------
        DomainError
            If *x* is outside the target interval.
        ArithmeticError
            If the error cannot be represented.
        """
        delta = self.target.value(x).minus(self.polynomial.value(x))
        return delta.divided_by(self.target.scale(x))


class RemezPolynomialFactory:
    """Builds leveled polynomials for a fixed target.

    Given ``m = order + 2`` nodes, the result has degree ``order`` and scaled
    error ``(-1)**i * e`` at the ``i``-th node in ascending order, for every
    ``i`` in ``0 .. m-1``. The first ``m - 1`` nodes fix the interpolation
    and the last one determines the leveling constant ``e``.
    """

    def __init__(self, target: ApproxTarget):
        self.target = target

    def create(self, nodes: Sequence[RealFieldElement]) -> NewtonPolynomial:
        """Return the leveled polynomial for *nodes*.

        Raises
        ------
        ValueError
            If fewer than 2 nodes are given.
        DomainError
            If a node lies outside the target interval.
        ArithmeticError
            If the construction breaks down (coincident nodes, non-finite
            values).
        """
        return self.create_with_level(nodes)[0]

    def create_with_level(
        self, nodes: Sequence[RealFieldElement]
    ) -> Tuple[NewtonPolynomial, RealFieldElement]:
        """Return the leveled polynomial together with the leveling constant ``e``."""
        if len(nodes) < 2:
            raise ValueError(f"At least 2 nodes are required, got {len(nodes)}")
        nodes = sorted(nodes)
        target = self.target
        for x in nodes:
            if not target.accepts(x):
                raise DomainError(f"Node {x} is outside {target.interval()}")

        thinned = nodes[:-1]

        # p1 interpolates f on the thinned nodes
        f = [target.value(x) for x in thinned]
        p1 = NewtonPolynomial.from_values(thinned, f)

        # p2 interpolates the alternating scale
        alternate_error = []
        for i, x in enumerate(thinned):
            s = target.scale(x)
            alternate_error.append(s.negated() if i % 2 == 1 else s)
        p2 = NewtonPolynomial.from_values(thinned, alternate_error)

        # Level at the last node: f - (p1 - e*p2) == (-1)**(m-1) * s * e there
        x_last = nodes[-1]
        s_last = target.scale(x_last)
        signed_scale_last = s_last.negated() if (len(nodes) - 1) % 2 == 1 else s_last
        e = p1.value(x_last).minus(target.value(x_last)).divided_by(
            p2.value(x_last).minus(signed_scale_last)
        )

        leveled = [f_i.minus(a_i.times(e)) for f_i, a_i in zip(f, alternate_error)]
        return NewtonPolynomial.from_values(thinned, leveled), e


class RemezExchange:
    """Mutable node state of a single exchange run.

    Not thread-safe and not reusable: :class:`MinimaxApproxExecutor` creates
    one per call to :meth:`MinimaxApproxExecutor.apply`.

    Parameters
    ----------
    target : ApproxTarget
        Function to approximate.
    nodes : sequence of RealFieldElement
        Initial reference nodes, ascending, ``order + 2`` of them.
    """

    def __init__(self, target: ApproxTarget, nodes: Sequence[RealFieldElement]):
        self._target = target
        self._factory = RemezPolynomialFactory(target)
        self._nodes: List[RealFieldElement] = list(nodes)

    @property
    def nodes(self) -> List[RealFieldElement]:
        """Copy of the current reference nodes."""
        return list(self._nodes)

    def iteration(self, relative_delta: float) -> None:
        """Move every node one step towards its local error extremum.

        Each node ``x`` is compared with ``x - d * (x - x_prev)`` and
        ``x + d * (x_next - x)``; it moves to whichever candidate has a
        strictly larger sign-oriented error than the other two. All candidates
        are evaluated against the polynomial leveled on the current nodes.
        """
        if not (_MIN_RELATIVE_DELTA <= relative_delta <= _MAX_RELATIVE_DELTA):
            raise ValueError(
                f"relative_delta must lie in [{_MIN_RELATIVE_DELTA}, "
                f"{_MAX_RELATIVE_DELTA}], got {relative_delta}"
            )

        node = self._nodes
        error = ScaledError(self._target, self._factory.create(node))
        node_errors = [error.value(x) for x in node]
        err_sign_is_positive = self._err_sign_is_positive(node_errors)

        interval = self._target.interval()
        last = len(node) - 1
        next_nodes = list(node)
        for i, x_mid in enumerate(node):
            # even nodes keep the overall sign, odd nodes the opposite one
            node_sign = err_sign_is_positive != (i % 2 == 1)

            x_prev = interval.lower if i == 0 else node[i - 1]
            x_next = interval.upper if i == last else node[i + 1]

            x_l = x_mid.minus(x_mid.minus(x_prev).times(relative_delta))
            x_u = x_mid.plus(x_next.minus(x_mid).times(relative_delta))

            e_l = error.value(x_l)
            e_mid = node_errors[i]
            e_u = error.value(x_u)
            if not node_sign:
                e_l, e_mid, e_u = e_l.negated(), e_mid.negated(), e_u.negated()

            if e_l.compare_to(e_mid) > 0 and e_l.compare_to(e_u) > 0:
                next_nodes[i] = x_l
            elif e_u.compare_to(e_mid) > 0 and e_u.compare_to(e_l) > 0:
                next_nodes[i] = x_u

        self._nodes = next_nodes

    def _err_sign_is_positive(self, node_errors: List[RealFieldElement]) -> bool:
        """Sign of the alternating sum of the errors at the nodes.

        The sum is built with field arithmetic, so an unusable error raises
        ArithmeticError here instead of silently choosing a sign.
        """
        zero = self._target.field().zero()
        total = zero
        for i, err in enumerate(node_errors):
            total = total.plus(err if i % 2 == 0 else err.negated())
        return total.compare_to(zero) > 0

    def leveled_error(self) -> RealFieldElement:
        """``|e|`` of the polynomial leveled on the current nodes."""
        return self._factory.create_with_level(self._nodes)[1].abs()

    def calc_result(self) -> NewtonPolynomial:
        """Leveled polynomial on the current nodes; the approximation output."""
        return self._factory.create(self._nodes)


class MinimaxApproxExecutor:
    """Minimax polynomial approximation of a fixed degree.

    The executor only holds its configuration, so one instance can serve
    many targets, including from several threads at once.

    Parameters
    ----------
    order : int
        Polynomial degree, ``0 <= order <= 100``.
    iterations_per_step : int, optional
        Exchange iterations per step size of :data:`RELATIVE_DELTAS`.
        Default is :data:`DEFAULT_ITERATIONS_PER_STEP`.

    Examples
    --------
    >>> import math
    >>> from pyminimax import FunctionTarget
    >>> target = FunctionTarget.from_floats(math.exp, None, 0.0, 1.0)
    >>> result = MinimaxApproxExecutor.of(5).apply(target)  # doctest: +SKIP
    >>> result.get().degree  # doctest: +SKIP
    5
    """

    LOWER_LIMIT_OF_ORDER = 0
    UPPER_LIMIT_OF_ORDER = 100

    def __init__(self, order: int, iterations_per_step: int = DEFAULT_ITERATIONS_PER_STEP):
        if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
            raise ConfigurationError(f"order must be an int, got {type(order).__name__}")
        if not (self.LOWER_LIMIT_OF_ORDER <= order <= self.UPPER_LIMIT_OF_ORDER):
            raise ConfigurationError(
                f"order must lie in [{self.LOWER_LIMIT_OF_ORDER}, "
                f"{self.UPPER_LIMIT_OF_ORDER}], got {order}"
            )
        if (isinstance(iterations_per_step, bool)
                or not isinstance(iterations_per_step, (int, np.integer))
                or iterations_per_step < 1):
            raise ConfigurationError(
                f"iterations_per_step must be an int >= 1, got {iterations_per_step!r}"
            )
        if iterations_per_step < 10:
            warnings.warn(
                f"iterations_per_step={iterations_per_step} is too small for the "
                f"exchange to reach the error extrema; results may be far from minimax.",
                RuntimeWarning,
                stacklevel=2,
            )
        self._order = int(order)
        self._iterations_per_step = int(iterations_per_step)

    @classmethod
    def of(cls, order: int) -> "MinimaxApproxExecutor":
        """Executor of degree *order* with the default schedule."""
        return cls(order)

    @property
    def order(self) -> int:
        return self._order

    @property
    def iterations_per_step(self) -> int:
        return self._iterations_per_step

    def apply(self, target: ApproxTarget, verbose: bool = False) -> ApproxResult:
        """Approximate *target* and wrap the polynomial in an :class:`ApproxResult`.

        Arithmetic and domain failures anywhere in the run are reported as an
        empty result with a message; they are never raised.

        Parameters
        ----------
        target : ApproxTarget
            Function, scale and interval to approximate on.
        verbose : bool, optional
            If True, print progress. Default is False.

        Returns
        -------
        ApproxResult
            Holds a :class:`Polynomial` of degree ``order`` on success.
        """
        if not isinstance(target, ApproxTarget):
            raise TypeError(f"target must be an ApproxTarget, got {type(target).__name__}")

        n_steps = len(RELATIVE_DELTAS)
        if verbose:
            print(f"Running Remez exchange for order {self._order} on {target.interval()} "
                  f"({n_steps} steps x {self._iterations_per_step} iterations)...")

        start = time.time()
        try:
            exchange = RemezExchange(target, chebyshev_nodes(self._order + 2, target.interval()))
            for step, relative_delta in enumerate(RELATIVE_DELTAS):
                for _ in range(self._iterations_per_step):
                    exchange.iteration(relative_delta)
                if verbose:
                    level = exchange.leveled_error().as_float()
                    print(f"  Step {step + 1}/{n_steps} (delta {relative_delta:g}): "
                          f"leveled error {level:.3e}")
            polynomial = exchange.calc_result()
        except (ArithmeticError, DomainError) as exc:
            message = (
                f"Approximation failed: the target or its scale may be producing "
                f"values that cannot be handled ({exc})"
            )
            if verbose:
                print(f"  {message}")
            return ApproxResult.failed(message)

        if verbose:
            print(f"  Finished in {time.time() - start:.3f}s")
        return ApproxResult.present(polynomial)

    def __repr__(self) -> str:
        return (
            f"MinimaxApproxExecutor(order={self._order}, "
            f"iterations_per_step={self._iterations_per_step})"
        )
