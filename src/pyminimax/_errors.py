"""Exception types raised by PyMinimax.

Arithmetic failures (non-finite results, zero pivots, non-positive scales)
use the built-in :class:`ArithmeticError` and its subclasses.
"""

from __future__ import annotations


class DomainError(ValueError):
    """An argument lies outside the interval an operation requires."""


class ConfigurationError(ValueError):
    """Invalid construction arguments (order out of range, interval too narrow)."""


class EmptyResultError(LookupError):
    """Raised by :meth:`ApproxResult.get` when the result holds no value."""
