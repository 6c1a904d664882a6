"""A reactor that evaluates to the most recently set value."""

from __future__ import annotations

import threading
from typing import Generic, Optional, TypeVar

from aspen.state import State, combine
from aspen.trigger import Trigger

__all__ = ["Cell"]

T = TypeVar("T")

_EMPTY = object()


class Cell(Generic[T]):
    """A reactor that evaluates to the most recently set value."""

    def __init__(self, value: object = _EMPTY) -> None:
        self._lock = threading.Lock()
        self._is_complete = False
        self._current: object = _EMPTY
        self._next: object = value
        self._trigger: Optional[Trigger] = None

    def __copy__(self) -> "Cell[T]":
        copy = Cell()
        with self._lock:
            copy._is_complete = self._is_complete
            copy._current = self._current
            copy._next = self._next
        return copy

    def _update(self, value: object, complete: bool) -> None:
        with self._lock:
            if value is not _EMPTY:
                self._next = value
            if complete:
                self._is_complete = True
            trigger = self._trigger
        if trigger is not None:
            trigger.signal()

    def set(self, value: T) -> None:
        """Sets the value to evaluate to."""
        self._update(value, False)

    def set_complete(self, value: object = _EMPTY) -> None:
        """Brings this reactor to completion, optionally with a final value."""
        self._update(value, True)

    def commit(self, sequence: int) -> State:
        with self._lock:
            if self._trigger is None:
                self._trigger = Trigger.get_trigger()
            state = State.NONE
            if self._next is not _EMPTY:
                self._current = self._next
                self._next = _EMPTY
                state = State.EVALUATED
            if self._is_complete:
                state = combine(state, State.COMPLETE)
            return state

    def eval(self) -> T:
        current = self._current
        if current is _EMPTY:
            raise RuntimeError("Uninitialized.")
        return current  # type: ignore[return-value]