"""Reactors that interleave or gate the evaluations of other reactors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

from aspen.cell import Cell
from aspen.state import (
    State,
    combine,
    has_continuation,
    has_evaluation,
    is_complete,
)

__all__ = ["Group", "group", "When", "when", "Concur", "concur"]

T = TypeVar("T")

_BOTH_COMPLETE = 0b11


def _is_reactor(value: Any) -> bool:
    return callable(getattr(value, "commit", None)) and callable(
        getattr(value, "eval", None))


def _to_reactor(value: Any) -> Any:
    """Returns reactors unchanged and wraps other values in a finished cell."""
    if _is_reactor(value):
        return value
    cell: Cell[Any] = Cell()
    cell.set_complete(value)
    return cell


class Group(Generic[T]):
    """A reactor that evaluates two children concurrently, taking turns."""

    def __init__(self, first: Any, second: Any) -> None:
        self._children = (first, second)
        self._completed = 0
        self._current = 0
        self._position = 0

    def _next_position(self) -> int:
        return (self._position + 1) % 2

    def _is_done(self, position: int) -> bool:
        return bool(self._completed & (1 << position))

    def commit(self, sequence: int) -> State:
        if self._position != self._current and self._is_done(self._position):
            self._position = self._next_position()
        state = State.NONE
        if self._completed != _BOTH_COMPLETE:
            start = self._position
            while True:
                position = self._position
                self._position = self._next_position()
                if not self._is_done(position):
                    child_state = self._children[position].commit(sequence)
                    if has_continuation(child_state):
                        state = combine(state, State.CONTINUE)
                    elif is_complete(child_state):
                        self._completed |= 1 << position
                    if has_evaluation(child_state):
                        state = combine(state, State.EVALUATED)
                        if not self._is_done(self._position):
                            state = combine(state, State.CONTINUE)
                        self._current = position
                        break
                if self._position == start:
                    break
        if self._completed == _BOTH_COMPLETE:
            state = combine(state, State.COMPLETE)
        return state

    def eval(self) -> T:
        return self._children[self._current].eval()


def group(*args: Any) -> Any:
    """Groups reactors together so that they are evaluated concurrently.

    Values that are not reactors evaluate once to themselves. With no
    arguments the result completes without evaluating.
    """
    if not args:
        empty: Cell[Any] = Cell()
        empty.set_complete()
        return empty
    result = _to_reactor(args[-1])
    for item in reversed(args[:-1]):
        result = Group(_to_reactor(item), result)
    return result


class When(Generic[T]):
    """A reactor that begins evaluating its series once a condition is true."""

    def __init__(self, condition: Any, series: Any) -> None:
        self._condition = condition
        self._series = series
        self._is_condition_complete = False
        self._is_triggered = False

    def commit(self, sequence: int) -> State:
        state = State.NONE
        if not self._is_triggered:
            condition_state = self._condition.commit(sequence)
            if has_evaluation(condition_state):
                try:
                    self._is_triggered = bool(self._condition.eval())
                except Exception:
                    pass
            self._is_condition_complete = is_complete(condition_state)
            if not self._is_triggered:
                if self._is_condition_complete:
                    state = combine(state, State.COMPLETE)
                elif has_continuation(condition_state):
                    state = combine(state, State.CONTINUE)
        if self._is_triggered:
            series_state = self._series.commit(sequence)
            if has_evaluation(series_state):
                state = combine(state, State.EVALUATED)
            if is_complete(series_state):
                state = combine(state, State.COMPLETE)
            elif has_continuation(series_state):
                state = combine(state, State.CONTINUE)
        return state

    def eval(self) -> T:
        return self._series.eval()


def when(condition: Any, series: Any) -> When[Any]:
    """Returns a reactor evaluating series once condition evaluates true."""
    return When(condition, series)


@dataclass(eq=False)
class _Child:
    reactor: Any
    is_complete: bool = False


class Concur(Generic[T]):
    """A reactor that evaluates to every value produced by the reactors its
    producer evaluates to, visiting them in turn."""

    def __init__(self, producer: Any) -> None:
        self._producer: Optional[Any] = producer
        self._children: List[_Child] = []
        self._current: Optional[_Child] = None
        self._position = 0

    def _increment(self) -> None:
        self._position = (self._position + 1) % len(self._children)

    def _erase_at_position(self) -> None:
        del self._children[self._position]
        if self._position >= len(self._children):
            self._position = 0

    def _commit_producer(self, sequence: int) -> State:
        producer = self._producer
        if producer is None:
            return State.NONE
        producer_state = producer.commit(sequence)
        if has_evaluation(producer_state):
            try:
                self._children.append(_Child(producer.eval()))
                if len(self._children) == 1:
                    self._position = 0
            except Exception:
                pass
        if has_continuation(producer_state):
            return State.CONTINUE
        if is_complete(producer_state):
            self._producer = None
        return State.NONE

    def commit(self, sequence: int) -> State:
        state = self._commit_producer(sequence)
        while self._children:
            child = self._children[self._position]
            if child is self._current or not child.is_complete:
                break
            self._erase_at_position()
        if self._children:
            start = self._children[self._position]
            while True:
                child = self._children[self._position]
                if child.is_complete and child is not self._current:
                    self._erase_at_position()
                    if child is start:
                        start = self._children[self._position]
                elif child.is_complete:
                    self._increment()
                else:
                    child_state = child.reactor.commit(sequence)
                    if has_continuation(child_state):
                        state = combine(state, State.CONTINUE)
                    elif is_complete(child_state):
                        child.is_complete = True
                    self._increment()
                    if has_evaluation(child_state):
                        state = combine(state, State.EVALUATED)
                        if len(self._children) > 1:
                            state = combine(state, State.CONTINUE)
                        self._current = child
                        break
                if self._children[self._position] is start:
                    break
        if self._producer is None and (
                not self._children or (
                    len(self._children) == 1 and self._children[0].is_complete)):
            state = combine(state, State.COMPLETE)
        return state

    def eval(self) -> T:
        if self._current is None:
            raise RuntimeError("Uninitialized.")
        return self._current.reactor.eval()


def concur(producer: Any) -> Concur[Any]:
    """Builds a reactor evaluating the reactors produced by its producer."""
    return Concur(producer)