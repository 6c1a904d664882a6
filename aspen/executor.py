"""Runs a single reactor in a synchronized environment."""

from __future__ import annotations

import enum
import signal
import threading
from typing import Any, ClassVar, Set

from aspen.state import has_continuation, is_complete
from aspen.trigger import Trigger

__all__ = ["Executor"]


class _Update(enum.Enum):
    NONE = enum.auto()
    UPDATE = enum.auto()
    ABORT = enum.auto()


class Executor:
    """Provides a synchronized environment for running a single reactor.

    While running to completion an interrupt signal aborts every running
    executor instead of raising KeyboardInterrupt.
    """

    _abort_lock: ClassVar[threading.Lock] = threading.Lock()
    _running: ClassVar[Set["Executor"]] = set()

    def __init__(self, reactor: Any) -> None:
        self._reactor = reactor
        self._condition = threading.Condition()
        self._trigger = Trigger(self._on_update)
        self._sequence = 0
        self._update = _Update.NONE

    def run_until_none(self) -> None:
        """Commits the reactor repeatedly until it stops asking to continue."""
        old_trigger = Trigger.get_trigger()
        Trigger.set_trigger(self._trigger)
        try:
            while has_continuation(self._reactor.commit(self._sequence)):
                self._sequence += 1
            self._sequence += 1
        finally:
            Trigger.set_trigger(old_trigger)

    def run_until_complete(self) -> None:
        """Commits the reactor until it completes, waiting for updates."""
        old_trigger = Trigger.get_trigger()
        Trigger.set_trigger(self._trigger)
        in_main_thread = threading.current_thread() is threading.main_thread()
        previous_handler = None
        with Executor._abort_lock:
            if in_main_thread:
                previous_handler = signal.signal(
                    signal.SIGINT, Executor._ctrl_handler)
            Executor._running.add(self)
        try:
            while True:
                state = self._reactor.commit(self._sequence)
                self._sequence += 1
                if is_complete(state):
                    break
                if has_continuation(state):
                    continue
                with self._condition:
                    while self._update is _Update.NONE:
                        self._condition.wait(0.1)
                    if self._update is _Update.ABORT:
                        break
                    self._update = _Update.NONE
        finally:
            with Executor._abort_lock:
                Executor._running.discard(self)
                if in_main_thread:
                    signal.signal(signal.SIGINT, previous_handler)
            Trigger.set_trigger(old_trigger)

    def _abort(self) -> None:
        with self._condition:
            self._update = _Update.ABORT
            self._condition.notify()

    def _on_update(self) -> None:
        with self._condition:
            if self._update is not _Update.ABORT:
                self._update = _Update.UPDATE
            self._condition.notify()

    @staticmethod
    def _ctrl_handler(signum: int, frame: Any) -> None:
        for executor in list(Executor._running):
            executor._abort()