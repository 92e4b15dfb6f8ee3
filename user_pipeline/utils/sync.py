"""
Synchronization helpers for the dispatch strategies.

``WaitGroup`` counts outstanding units of work: the dispatcher calls
``add(1)`` before handing a unit to the pool, the unit calls ``done()`` when
it exits, and ``wait()`` blocks until the counter is back at zero.
"""

from __future__ import annotations

import threading
from typing import Optional


class WaitGroup:
    """Counter that blocks waiters until every added unit has reported done."""

    def __init__(self) -> None:
        self._count = 0
        self._cond = threading.Condition(threading.Lock())

    @property
    def count(self) -> int:
        with self._cond:
            return self._count

    def add(self, delta: int = 1) -> None:
        with self._cond:
            if self._count + delta < 0:
                raise ValueError("WaitGroup counter cannot go negative")
            self._count += delta
            if self._count == 0:
                self._cond.notify_all()

    def done(self) -> None:
        self.add(-1)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the counter reaches zero. Returns False on timeout."""
        with self._cond:
            return self._cond.wait_for(lambda: self._count == 0, timeout=timeout)


__all__ = ["WaitGroup"]
