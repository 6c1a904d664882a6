"""A reactor that evaluates to the values pushed onto a queue."""

from __future__ import annotations

import collections
import threading
from typing import Deque, Generic, Optional, TypeVar

from aspen.state import State
from aspen.trigger import Trigger

__all__ = ["Queue"]

T = TypeVar("T")

_EMPTY = object()


class Queue(Generic[T]):
    """A reactor that evaluates to the values pushed to an internal queue."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._is_complete = False
        self._has_commit = False
        self._entries: Deque[T] = collections.deque()
        self._exception: Optional[BaseException] = None
        self._trigger: Optional[Trigger] = None

    def _update(self, *, entry: object = _EMPTY, complete: bool = False,
                exception: Optional[BaseException] = None) -> None:
        with self._lock:
            if entry is not _EMPTY:
                self._entries.append(entry)  # type: ignore[arg-type]
            self._is_complete |= complete
            if exception is not None:
                self._exception = exception
            trigger = self._trigger
        if trigger is not None:
            trigger.signal()

    def push(self, value: T) -> None:
        """Pushes a value to the queue."""
        self._update(entry=value)

    def set_complete(self, value: object = _EMPTY) -> None:
        """Brings this reactor to completion, optionally pushing a final value."""
        self._update(entry=value, complete=True)

    def set_exception(self, exception: BaseException) -> None:
        """Brings this reactor to completion by raising an exception."""
        self._update(exception=exception)

    def commit(self, sequence: int) -> State:
        with self._lock:
            if self._trigger is None:
                self._trigger = Trigger.get_trigger()
            size = len(self._entries)
            if size > 1 or (size == 1 and not self._has_commit):
                if self._has_commit:
                    self._entries.popleft()
                self._has_commit = True
                if len(self._entries) > 1 or self._exception is not None:
                    return State.CONTINUE_EVALUATED
                if self._is_complete:
                    return State.COMPLETE_EVALUATED
                return State.EVALUATED
            if self._exception is not None:
                self._entries.clear()
                return State.COMPLETE_EVALUATED
            return State.COMPLETE if self._is_complete else State.NONE

    def eval(self) -> T:
        with self._lock:
            if self._entries:
                return self._entries[0]
            if self._exception is not None:
                raise self._exception
            raise RuntimeError("Uninitialized.")