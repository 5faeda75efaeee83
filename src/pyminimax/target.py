"""Functions to be approximated, together with their error scale."""

from __future__ import annotations

import abc
from typing import Callable, Optional

from pyminimax._errors import DomainError
from pyminimax.field import RealField, RealFieldElement
from pyminimax.interval import ClosedInterval


class ApproxTarget(abc.ABC):
    """A function ``f`` and a positive error scale ``s_f`` on a closed interval.

    The approximation minimizes ``max |(f(x) - p(x)) / s_f(x)|``. Subclasses
    implement :meth:`compute_value`, :meth:`compute_scale`, :meth:`interval`
    and :meth:`field`; callers go through :meth:`value` and :meth:`scale`,
    which check the argument range and the sign of the scale before
    dispatching.

    Implementations must be immutable: a target may be shared between
    concurrent approximation runs. :meth:`interval` should return the same
    object on every call.
    """

    @abc.abstractmethod
    def compute_value(self, x: RealFieldElement) -> RealFieldElement:
        """Return ``f(x)``. Only called with ``x`` inside the interval.

        May raise ArithmeticError if ``f(x)`` cannot be represented.
        """

    @abc.abstractmethod
    def compute_scale(self, x: RealFieldElement) -> RealFieldElement:
        """Return ``s_f(x)``. Only called with ``x`` inside the interval."""

    @abc.abstractmethod
    def interval(self) -> ClosedInterval:
        """Return the approximation interval."""

    def field(self) -> RealField:
        return self.interval().field()

    def value(self, x: RealFieldElement) -> RealFieldElement:
        """Return ``f(x)``.

        Raises
        ------
        DomainError
            If *x* lies outside the interval.
        ArithmeticError
            Propagated from :meth:`compute_value`.
        """
        if not self.accepts(x):
            raise DomainError(f"x = {x} is outside {self.interval()}")
        return self.compute_value(x)

    def scale(self, x: RealFieldElement) -> RealFieldElement:
        """Return ``s_f(x)``.

        Raises
        ------
        DomainError
            If *x* lies outside the interval.
        ArithmeticError
            If the scale is not strictly positive, or propagated from
            :meth:`compute_scale`.
        """
        if not self.accepts(x):
            raise DomainError(f"x = {x} is outside {self.interval()}")
        out = self.compute_scale(x)
        if out.compare_to(self.field().zero()) <= 0:
            raise ArithmeticError(f"scale at x = {x} is not positive: {out}")
        return out

    def accepts(self, x: RealFieldElement) -> bool:
        """Equivalent to ``self.interval().accepts(x)``."""
        return self.interval().accepts(x)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(interval={self.interval()})"


class FunctionTarget(ApproxTarget):
    """Target built from two callables on field elements.

    Parameters
    ----------
    function : callable
        ``f(x) -> element`` for elements ``x`` of the interval's field.
    scale : callable or None
        ``s_f(x) -> element``. ``None`` means the scale is one everywhere,
        i.e. the absolute error is minimized.
    interval : ClosedInterval
        Approximation interval.

    Examples
    --------
    >>> import math
    >>> target = FunctionTarget.from_floats(math.exp, None, 0.0, 1.0)
    >>> target.value(target.interval().upper).as_float() == math.e
    True
    """

    def __init__(
        self,
        function: Callable[[RealFieldElement], RealFieldElement],
        scale: Optional[Callable[[RealFieldElement], RealFieldElement]],
        interval: ClosedInterval,
    ):
        if not isinstance(interval, ClosedInterval):
            raise TypeError(
                f"interval must be a ClosedInterval, got {type(interval).__name__}"
            )
        self._function = function
        self._scale = scale
        self._interval = interval

    def compute_value(self, x: RealFieldElement) -> RealFieldElement:
        return self._function(x)

    def compute_scale(self, x: RealFieldElement) -> RealFieldElement:
        if self._scale is None:
            return self.field().one()
        return self._scale(x)

    def interval(self) -> ClosedInterval:
        return self._interval

    @classmethod
    def from_floats(
        cls,
        function: Callable[[float], float],
        scale: Optional[Callable[[float], float]],
        lower: float,
        upper: float,
        field: Optional[RealField] = None,
    ) -> "FunctionTarget":
        """Build a target from callables on plain floats.

        Arguments are passed to the callables as ``x.as_float()`` and results
        are lifted with ``field.from_float``, so a callable returning an
        infinity or NaN surfaces as ArithmeticError. A ValueError raised by
        the callable, such as ``math.log(0.0)``, is re-raised as
        ArithmeticError.

        Parameters
        ----------
        function : callable
            ``f(x: float) -> float``.
        scale : callable or None
            ``s_f(x: float) -> float``; ``None`` for absolute error.
        lower, upper : float
            Interval boundaries.
        field : RealField, optional
            Field to work in. Defaults to ``DoubleLike.field()``.
        """
        if field is None:
            from pyminimax.double_like import DoubleLike

            field = DoubleLike.field()

        def lifted_function(x):
            return field.from_float(_call_float(function, x))

        lifted_scale = None
        if scale is not None:
            def lifted_scale(x):
                return field.from_float(_call_float(scale, x))

        return cls(lifted_function, lifted_scale, ClosedInterval.from_floats(lower, upper, field))


def _call_float(func: Callable[[float], float], x: RealFieldElement) -> float:
    """Call *func* on ``x.as_float()``; math domain errors become ArithmeticError."""
    t = x.as_float()
    try:
        return func(t)
    except ValueError as exc:
        raise ArithmeticError(f"Function failed at x={t!r}: {exc}") from exc
