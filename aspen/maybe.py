"""A value that may instead be an exception."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

__all__ = ["Maybe", "try_call"]

T = TypeVar("T")

_MISSING = object()


class Maybe(Generic[T]):
    """Stores either a value or the exception raised while producing it.

    A Maybe built with neither holds no value and raises on access.
    """

    __slots__ = ("_value", "_exception")

    def __init__(
        self, value: object = _MISSING, *, exception: Optional[BaseException] = None
    ) -> None:
        if value is not _MISSING and exception is not None:
            raise ValueError("a Maybe holds either a value or an exception")
        self._value = value
        self._exception = exception

    def has_value(self) -> bool:
        """Returns True iff a value is stored."""
        return self._value is not _MISSING

    def has_exception(self) -> bool:
        """Returns True iff no value is stored."""
        return self._value is _MISSING

    @property
    def exception(self) -> Optional[BaseException]:
        """The stored exception, or None."""
        return self._exception

    def get(self) -> T:
        """Returns the stored value, or raises the stored exception."""
        if self._value is not _MISSING:
            return self._value  # type: ignore[return-value]
        if self._exception is not None:
            raise self._exception
        raise RuntimeError("Uninitialized.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self.has_value() and other.has_value():
            return self._value == other._value
        return not self.has_value() and not other.has_value() and (
            self._exception is other._exception
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.has_value():
            return f"Maybe({self._value!r})"
        if self._exception is not None:
            return f"Maybe(exception={self._exception!r})"
        return "Maybe()"


def try_call(f: Callable[[], T]) -> Maybe[T]:
    """Calls f, capturing its result or the exception it raises."""
    try:
        return Maybe(f())
    except Exception as error:
        return Maybe(exception=error)