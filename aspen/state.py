"""Reactor states reported after a commit."""

from __future__ import annotations

import enum

__all__ = [
    "State",
    "combine",
    "has_evaluation",
    "has_continuation",
    "is_complete",
    "set_flag",
    "reset_flag",
]


class State(enum.IntFlag):
    """The state of a reactor after a commit operation."""

    NONE = 0
    """No update."""

    EVALUATED = 1
    """The reactor has a new value."""

    CONTINUE = 2
    """The reactor should immediately be committed again."""

    COMPLETE = 4
    """The reactor has come to an end."""

    CONTINUE_EVALUATED = EVALUATED | CONTINUE
    """The reactor has a new value and should be committed again."""

    COMPLETE_EVALUATED = COMPLETE | EVALUATED
    """The reactor has terminated with an evaluation."""

    def __str__(self) -> str:
        name = _NAMES.get(int(self))
        if name is not None:
            return name
        return f"State({int(self)})"


_NAMES = {
    0: "NONE",
    1: "EVALUATED",
    2: "CONTINUE",
    4: "COMPLETE",
    3: "CONTINUE_EVALUATED",
    5: "COMPLETE_EVALUATED",
}


def combine(a: State, b: State) -> State:
    """Returns the combination of two states."""
    return State(int(a) | int(b))


def has_evaluation(state: State) -> bool:
    """Returns True iff the state carries an evaluation."""
    return bool(int(state) & State.EVALUATED)


def has_continuation(state: State) -> bool:
    """Returns True iff the state asks to be committed again."""
    return bool(int(state) & State.CONTINUE)


def is_complete(state: State) -> bool:
    """Returns True iff the state marks completion."""
    return bool(int(state) & State.COMPLETE)


def set_flag(state: State, update: State) -> State:
    """Returns the state with the flags of update set."""
    return State(int(state) | int(update))


def reset_flag(state: State, update: State) -> State:
    """Returns the state with the flags of update cleared."""
    return State(int(state) & ~int(update))