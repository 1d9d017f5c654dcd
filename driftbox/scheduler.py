"""Timing sources that re-invoke the animation loop.

A scheduler holds one-shot callbacks. The host releases them, either by
pumping ``run_due()`` from its own event loop or by calling ``drain()``,
which sleeps until each callback is due.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from driftbox.types import FrameCallback

logger = logging.getLogger(__name__)


class Scheduler:
    def __init__(
        self,
        time_fn: Callable[[], float] = time.monotonic,
        sleep_fn: Callable[[float], None] = time.sleep,
    ) -> None:
        self._time = time_fn
        self._sleep = sleep_fn
        self._pending: dict[int, tuple[float, FrameCallback]] = {}
        self._next_handle = 1

    def now(self) -> float:
        return self._time()

    def _due(self, now: float) -> float:
        raise NotImplementedError

    def request(self, callback: FrameCallback) -> int:
        """Schedule ``callback`` once. Returns a handle for ``cancel()``."""
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = (self._due(self._time()), callback)
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def pending(self) -> int:
        return len(self._pending)

    def next_due(self) -> float | None:
        if not self._pending:
            return None
        return min(due for due, _ in self._pending.values())

    def run_due(self, now: float | None = None) -> int:
        """Run callbacks due at ``now``. Returns how many ran.

        Callbacks requested while running wait for a later call.
        """
        if now is None:
            now = self._time()
        ready = sorted(
            (due, handle)
            for handle, (due, _) in self._pending.items()
            if due <= now
        )
        ran = 0
        for due, handle in ready:
            entry = self._pending.pop(handle, None)
            if entry is None:
                # cancelled by an earlier callback in this batch
                continue
            entry[1](due)
            ran += 1
        return ran

    def drain(self, limit: int | None = None) -> int:
        """Sleep and run callbacks until none are pending or ``limit`` ran."""
        ran = 0
        while limit is None or ran < limit:
            due = self.next_due()
            if due is None:
                break
            wait = due - self._time()
            if wait > 0:
                self._sleep(wait)
            ran += self.run_due(max(due, self._time()))
        logger.debug("scheduler drained after %d callbacks", ran)
        return ran


class IntervalScheduler(Scheduler):
    """Re-trigger after a fixed delay, like a plain timeout."""

    def __init__(
        self,
        interval: float = 0.033,
        time_fn: Callable[[], float] = time.monotonic,
        sleep_fn: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        super().__init__(time_fn, sleep_fn)
        self._interval = interval

    @property
    def interval(self) -> float:
        return self._interval

    def _due(self, now: float) -> float:
        return now + self._interval


class FrameScheduler(Scheduler):
    """Frame callbacks paced to ``interval`` seconds between frames.

    A request made late in a frame waits only for the remainder of it.
    Callbacks receive the frame's target timestamp.
    """

    def __init__(
        self,
        interval: float = 1 / 60,
        time_fn: Callable[[], float] = time.monotonic,
        sleep_fn: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        super().__init__(time_fn, sleep_fn)
        self._interval = interval
        self._last = 0.0

    @property
    def interval(self) -> float:
        return self._interval

    def _due(self, now: float) -> float:
        delay = max(0.0, self._interval - (now - self._last))
        self._last = now + delay
        return self._last
