"""Elementary reactors: throwing, perpetual, proxy, state monitor and owner."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar, Union

from aspen.state import State, combine, has_continuation, is_complete

__all__ = [
    "Throw",
    "throws",
    "Perpetual",
    "perpetual",
    "Proxy",
    "proxy",
    "StateReactor",
    "Unique",
]

T = TypeVar("T")

ExceptionSource = Union[BaseException, type]


class Throw(Generic[T]):
    """A reactor that unconditionally raises an exception when evaluated.

    The exception may be given as an instance, raised afresh on every
    evaluation, or as an exception class, instantiated on every evaluation.
    """

    def __init__(self, exception: ExceptionSource) -> None:
        if isinstance(exception, type) and not issubclass(exception,
                                                          BaseException):
            raise TypeError("Throw needs an exception or an exception class.")
        self._exception = exception

    def commit(self, sequence: int) -> State:
        return State.COMPLETE_EVALUATED

    def eval(self) -> T:
        exception = self._exception
        if isinstance(exception, type):
            exception = exception()
        raise exception.with_traceback(None)


def throws(exception: ExceptionSource) -> Throw[Any]:
    """Returns a reactor that always raises the given exception."""
    return Throw(exception)


class Perpetual:
    """A reactor that always evaluates to nothing and asks to continue."""

    value = None

    def commit(self, sequence: int) -> State:
        return State.CONTINUE_EVALUATED

    def eval(self) -> None:
        return self.value


def perpetual() -> Perpetual:
    """Returns a reactor that perpetually evaluates."""
    return Perpetual()


class Proxy(Generic[T]):
    """A reactor that forwards its commits and evaluations to another reactor.

    Re-entrant commits, as happen when the proxied reactor depends on the
    proxy itself, are cut short and report the last known state.
    """

    def __init__(self) -> None:
        self._reactor: Optional[Any] = None
        self._has_cycle = False
        self._state = State.NONE

    def set_reactor(self, reactor: Any) -> None:
        """Sets the reactor to proxy."""
        self._reactor = reactor

    def commit(self, sequence: int) -> State:
        if is_complete(self._state) or self._has_cycle or self._reactor is None:
            return self._state
        self._has_cycle = True
        try:
            state = self._reactor.commit(sequence)
        finally:
            self._has_cycle = False
        self._state = state if is_complete(state) else State.NONE
        return state

    def eval(self) -> T:
        if self._reactor is None:
            raise RuntimeError("Uninitialized.")
        return self._reactor.eval()


def proxy() -> Proxy[Any]:
    """Makes an empty proxy reactor."""
    return Proxy()


class StateReactor:
    """A reactor that evaluates to another reactor's state."""

    def __init__(self, reactor: Any) -> None:
        self._reactor = reactor
        self._value = State.EVALUATED

    def commit(self, sequence: int) -> State:
        value = self._reactor.commit(sequence)
        if is_complete(value):
            state = State.COMPLETE_EVALUATED
        elif value == State.NONE and self._value == State.NONE:
            state = State.NONE
        else:
            state = State.EVALUATED
        self._value = value
        if has_continuation(value):
            state = combine(state, State.CONTINUE)
        return state

    def eval(self) -> State:
        return self._value


class Unique(Generic[T]):
    """Holds a reactor owned by a single parent and forwards to it."""

    def __init__(self, reactor: Any) -> None:
        self._reactor = reactor

    @property
    def reactor(self) -> Any:
        """The owned reactor."""
        return self._reactor

    def commit(self, sequence: int) -> State:
        return self._reactor.commit(sequence)

    def eval(self) -> T:
        return self._reactor.eval()