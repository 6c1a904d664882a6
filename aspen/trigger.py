"""Signalling of asynchronous updates to a running reactor."""

from __future__ import annotations

import threading
from typing import Callable, Optional

__all__ = ["Trigger"]

_current = threading.local()


class Trigger:
    """Indicates that an asynchronous update is available in a reactor."""

    __slots__ = ("_slot",)

    def __init__(self, slot: Optional[Callable[[], object]] = None) -> None:
        self._slot = slot

    def signal(self) -> None:
        """Signals that an update is available."""
        if self._slot is not None:
            self._slot()

    @staticmethod
    def get_trigger() -> Optional["Trigger"]:
        """Returns the trigger used within this thread, if any."""
        return getattr(_current, "trigger", None)

    @staticmethod
    def set_trigger(trigger: Optional["Trigger"]) -> None:
        """Sets the trigger to use within this thread."""
        _current.trigger = trigger