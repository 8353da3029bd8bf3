"""Drop-if-busy gate allowing at most one in-flight evaluation."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


class InFlightGate:
    """Try-acquire/run/release gate; contended callers are dropped, never queued."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._busy = False
        self._dropped = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def dropped_count(self) -> int:
        """Return number of acquisitions refused while busy."""
        return self._dropped

    def try_acquire(self) -> bool:
        if self._busy:
            self._dropped += 1
            return False
        self._busy = True
        return True

    def release(self) -> None:
        self._busy = False

    def run(self, callback: Callable[[], T]) -> T | None:
        """Run `callback` inside the gate; return its result, or None if dropped."""
        if not self.try_acquire():
            return None
        try:
            return callback()
        finally:
            self.release()
