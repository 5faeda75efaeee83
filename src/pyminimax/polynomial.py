"""Polynomials over a real field, built by Newton divided differences.

References
----------
- Stoer & Bulirsch (2002), "Introduction to Numerical Analysis", 3rd ed.,
  Springer, Section 2.1.3: Newton's interpolation formula.
"""

from __future__ import annotations

import abc
from typing import Callable, List, Sequence

import numpy as np

from pyminimax.field import RealField, RealFieldElement


class Polynomial(abc.ABC):
    """Immutable polynomial with coefficients in a real field.

    ``value`` works in the field and raises :class:`ArithmeticError` when the
    result cannot be represented. The float helpers (:meth:`float_coefficients`,
    :meth:`vectorized_eval`, :meth:`to_numpy`) follow floating-point convention
    instead and may yield ``inf`` or ``nan``.
    """

    @property
    @abc.abstractmethod
    def degree(self) -> int:
        """Formal degree; the leading coefficient may be zero."""

    @abc.abstractmethod
    def value(self, x: RealFieldElement) -> RealFieldElement:
        """Evaluate the polynomial at *x*."""

    @abc.abstractmethod
    def coefficient(self) -> List[RealFieldElement]:
        """Return ascending power-basis coefficients ``[a0, ..., an]`` as a fresh list."""

    @abc.abstractmethod
    def field(self) -> RealField:
        """Return the field of the coefficients."""

    def __call__(self, x: RealFieldElement) -> RealFieldElement:
        return self.value(x)

    def float_coefficients(self) -> np.ndarray:
        """Return the ascending coefficients as a float64 array."""
        return np.array([c.as_float() for c in self.coefficient()], dtype=float)

    def to_numpy(self) -> np.polynomial.Polynomial:
        """Return the power-basis form as a :class:`numpy.polynomial.Polynomial`."""
        return np.polynomial.Polynomial(self.float_coefficients())

    def vectorized_eval(self, points) -> np.ndarray:
        """Evaluate the float coefficients at many points with NumPy.

        Parameters
        ----------
        points : array_like
            Evaluation points.

        Returns
        -------
        ndarray
            Values with the same shape as *points*. Overflow gives ``inf``
            or ``nan`` rather than an exception.
        """
        x = np.asarray(points, dtype=float)
        with np.errstate(over="ignore", invalid="ignore"):
            return np.polynomial.polynomial.polyval(x, self.float_coefficients())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(degree={self.degree})"

    def __str__(self) -> str:
        coeffs = self.coefficient()
        lines = [f"{type(self).__name__} (degree {self.degree})"]
        for i, c in enumerate(coeffs):
            lines.append(f"  a{i:<3d} = {c}")
        return "\n".join(lines)


class NewtonPolynomial(Polynomial):
    """Interpolating polynomial in Newton form.

    ``p(x) = b0 + (x - x0) * (b1 + (x - x1) * (b2 + ...))`` where the ``b_i``
    are divided differences of the data. Build with :meth:`from_values` or
    :meth:`from_function`.

    Examples
    --------
    >>> from pyminimax import DoubleLike
    >>> field = DoubleLike.field()
    >>> nodes = [field.from_float(x) for x in (0.0, 1.0, 2.0)]
    >>> p = NewtonPolynomial.from_function(nodes, lambda x: x * x + 1)
    >>> [c.as_float() for c in p.coefficient()]
    [1.0, 0.0, 1.0]
    """

    def __init__(self, nodes: List[RealFieldElement], newton_coefficients: List[RealFieldElement]):
        # Use from_values() / from_function(); lists are owned by the instance.
        self._nodes = nodes
        self._newton_coefficients = newton_coefficients
        self._field = nodes[0].field()
        # May raise ArithmeticError
        self._coefficients = self._calc_coefficients()

    @property
    def degree(self) -> int:
        return len(self._nodes) - 1

    def field(self) -> RealField:
        return self._field

    def value(self, x: RealFieldElement) -> RealFieldElement:
        nodes = self._nodes
        b = self._newton_coefficients
        result = self._field.zero()
        for i in range(len(nodes) - 1, -1, -1):
            result = result.times(x.minus(nodes[i])).plus(b[i])
        return result

    def coefficient(self) -> List[RealFieldElement]:
        return list(self._coefficients)

    def nodes(self) -> List[RealFieldElement]:
        """Return the interpolation nodes as a fresh list."""
        return list(self._nodes)

    def _calc_coefficients(self) -> List[RealFieldElement]:
        """Expand the Newton form into ascending power-basis coefficients.

        Works from the innermost factor outwards: each step multiplies the
        partial polynomial by ``(x - x_k)`` and adds ``b_k``.
        """
        size = len(self._nodes)
        poly: List[RealFieldElement] = []
        for i in range(size):
            x_k = self._nodes[size - 1 - i]
            expanded = [self._newton_coefficients[size - 1 - i]] + poly
            for j in range(i):
                expanded[j] = expanded[j].minus(x_k.times(poly[j]))
            poly = expanded
        return poly

    @staticmethod
    def _divided_differences(
        nodes: List[RealFieldElement], values: List[RealFieldElement]
    ) -> List[RealFieldElement]:
        """Newton coefficients by the standard divided-difference recurrence.

        Coincident nodes give a zero denominator and raise ArithmeticError.
        """
        b = nodes[0].field().create_array(len(nodes))
        for i, (x_i, value_i) in enumerate(zip(nodes, values)):
            for k in range(i):
                value_i = value_i.minus(b[k]).divided_by(x_i.minus(nodes[k]))
            b[i] = value_i
        return b

    @classmethod
    def from_values(
        cls, nodes: Sequence[RealFieldElement], values: Sequence[RealFieldElement]
    ) -> "NewtonPolynomial":
        """Interpolate ``(nodes[i], values[i])``.

        Raises
        ------
        ValueError
            If the sequences are empty or differ in length.
        ArithmeticError
            If two nodes coincide or an intermediate result is not finite.
        """
        nodes = list(nodes)
        values = list(values)
        if len(nodes) != len(values):
            raise ValueError(
                f"nodes and values must have the same length, "
                f"got {len(nodes)} and {len(values)}"
            )
        if len(nodes) == 0:
            raise ValueError("At least one node is required")
        return cls(nodes, cls._divided_differences(nodes, values))

    @classmethod
    def from_function(
        cls,
        nodes: Sequence[RealFieldElement],
        function: Callable[[RealFieldElement], RealFieldElement],
    ) -> "NewtonPolynomial":
        """Interpolate *function* at *nodes*."""
        nodes = list(nodes)
        return cls.from_values(nodes, [function(x) for x in nodes])
