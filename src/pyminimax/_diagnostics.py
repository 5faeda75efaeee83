"""A-posteriori error estimation for computed approximations."""

from __future__ import annotations

import numpy as np

from pyminimax.polynomial import Polynomial
from pyminimax.remez import ScaledError
from pyminimax.target import ApproxTarget


def error_estimate(target: ApproxTarget, polynomial: Polynomial, n_samples: int = 2001) -> float:
    """Estimate ``max |(f(x) - p(x)) / s_f(x)|`` over the target interval.

    Samples the scaled error on a uniform grid, then refines every sampled
    local maximum with a bounded scalar minimization on its two neighbouring
    grid cells.

    Parameters
    ----------
    target : ApproxTarget
        Approximated function.
    polynomial : Polynomial
        Approximation to assess, with coefficients in the target's field.
    n_samples : int, optional
        Number of grid points, at least 3. Default is 2001.

    Returns
    -------
    float
        Estimated maximum absolute scaled error.

    Raises
    ------
    ArithmeticError
        If the scaled error cannot be evaluated somewhere on the grid.
    """
    from scipy.optimize import minimize_scalar

    if n_samples < 3:
        raise ValueError(f"n_samples must be >= 3, got {n_samples}")

    interval = target.interval()
    field = target.field()
    error = ScaledError(target, polynomial)

    def abs_error(t: float) -> float:
        x = field.from_float(float(t))
        # float rounding of the boundaries may step just outside the interval
        if x.compare_to(interval.lower) < 0:
            x = interval.lower
        elif x.compare_to(interval.upper) > 0:
            x = interval.upper
        return abs(error.value(x).as_float())

    grid = np.linspace(interval.lower.as_float(), interval.upper.as_float(), n_samples)
    values = np.array([abs_error(t) for t in grid])
    best = float(np.max(values))

    interior = np.arange(1, n_samples - 1)
    peaks = interior[(values[interior] > values[interior - 1])
                     & (values[interior] >= values[interior + 1])]
    for i in peaks:
        res = minimize_scalar(
            lambda t: -abs_error(t),
            bounds=(grid[i - 1], grid[i + 1]),
            method="bounded",
        )
        best = max(best, -float(res.fun))
    return best
