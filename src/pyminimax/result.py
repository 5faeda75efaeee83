"""Optional-like wrapper for approximation results."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from pyminimax._errors import EmptyResultError

T = TypeVar("T")


class ApproxResult(Generic[T]):
    """Either a computed value or a failure message.

    Create with :meth:`present` or :meth:`failed`; callers should check
    :meth:`is_present` before calling :meth:`get`.

    Examples
    --------
    >>> r = ApproxResult.failed("target produced extreme values")
    >>> r.is_empty()
    True
    >>> r.message()
    'target produced extreme values'
    """

    __slots__ = ("_content", "_message")

    def __init__(self, content: Optional[T], message: str):
        # Use present() / failed()
        self._content = content
        self._message = message

    @classmethod
    def present(cls, content: T) -> "ApproxResult[T]":
        """Wrap a successful result. *content* must not be None."""
        if content is None:
            raise ValueError("content must not be None; use failed() for an empty result")
        return cls(content, "")

    @classmethod
    def failed(cls, message: Optional[str]) -> "ApproxResult[T]":
        """Build an empty result carrying *message* (None becomes ``""``)."""
        return cls(None, "" if message is None else str(message))

    def is_present(self) -> bool:
        return self._content is not None

    def is_empty(self) -> bool:
        return not self.is_present()

    def get(self) -> T:
        """Return the held value.

        Raises
        ------
        EmptyResultError
            If the result is empty.
        """
        if self.is_empty():
            raise EmptyResultError(f"Result is empty: {self._message}")
        return self._content

    def or_else_raise(self, exception_factory: Callable[[], BaseException]) -> T:
        """Return the held value, or raise the exception built by *exception_factory*."""
        if self.is_empty():
            raise exception_factory()
        return self._content

    def message(self) -> str:
        """Failure message; empty string on success."""
        return self._message

    def __repr__(self) -> str:
        if self.is_present():
            return f"ApproxResult({self._content!r})"
        return f"ApproxResult(empty, message={self._message!r})"
