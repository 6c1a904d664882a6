"""Helpers that commit a collection of reactors and aggregate their states."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, TypeVar

from aspen.state import (
    State,
    combine,
    has_continuation,
    has_evaluation,
    is_complete,
)

__all__ = ["CommitHandler", "StaticCommitHandler", "apply"]

R = TypeVar("R")


@dataclass
class _Child:
    reactor: Any
    state: State = State.NONE
    has_evaluation: bool = False


class CommitHandler:
    """Commits a list of reactors and evaluates to their aggregate state.

    While initializing, the aggregate state only carries an evaluation once
    every child has produced one. A child that completes without ever having
    evaluated completes the whole handler.
    """

    def __init__(self, children: Iterable[Any]) -> None:
        self._children: List[_Child] = [_Child(child) for child in children]
        self._is_initializing = True

    def commit(self, sequence: int) -> State:
        """Commits all children and returns their aggregate state."""
        if not self._children:
            return State.COMPLETE
        state = State.NONE
        evaluation_count = 0
        completion_count = 0
        has_continue = False
        for child in self._children:
            if is_complete(child.state):
                completion_count += 1
                if self._is_initializing and child.has_evaluation:
                    evaluation_count += 1
                continue
            child.state = child.reactor.commit(sequence)
            if self._is_initializing:
                child.has_evaluation |= has_evaluation(child.state)
                if child.has_evaluation:
                    evaluation_count += 1
            elif has_evaluation(child.state):
                evaluation_count += 1
            if is_complete(child.state):
                completion_count += 1
                if not child.has_evaluation:
                    return State.COMPLETE
            else:
                has_continue |= has_continuation(child.state)
        if self._is_initializing:
            if evaluation_count == len(self._children):
                self._is_initializing = False
                state = combine(state, State.EVALUATED)
        elif evaluation_count != 0:
            state = combine(state, State.EVALUATED)
        if completion_count == len(self._children):
            state = combine(state, State.COMPLETE)
        elif has_continue:
            state = combine(state, State.CONTINUE)
        return state

    def __len__(self) -> int:
        return len(self._children)

    def __getitem__(self, index: int) -> Any:
        return self._children[index].reactor

    def __iter__(self):
        return (child.reactor for child in self._children)


class StaticCommitHandler(CommitHandler):
    """A commit handler over a fixed set of reactors given as arguments."""

    def __init__(self, *args: Any) -> None:
        super().__init__(args)


def apply(f: Callable[..., R], handler: CommitHandler) -> R:
    """Calls f with every reactor managed by handler as arguments."""
    return f(*handler)