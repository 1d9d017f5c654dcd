"""Clocks that turn host timestamps into per-frame delta time."""

from __future__ import annotations

import random
from typing import Callable

from driftbox.types import FrameContext


class Clock:
    """Delta-time clock: each frame advances by the seconds since the last one."""

    def __init__(self) -> None:
        self._then: float | None = None
        self._frame_number = 0
        self._elapsed = 0.0
        self._dt = 0.0

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def dt(self) -> float:
        return self._dt

    def mark(self, now: float) -> None:
        """Re-base the clock so the next frame measures from ``now``."""
        self._then = now

    def _delta(self, now: float) -> float:
        if self._then is None:
            return 0.0
        return max(0.0, now - self._then)

    def advance(self, now: float) -> float:
        self._dt = self._delta(now)
        self._then = now
        self._frame_number += 1
        self._elapsed += self._dt
        return self._dt

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self) -> None:
        self._then = None
        self._frame_number = 0
        self._elapsed = 0.0
        self._dt = 0.0


class FixedClock(Clock):
    """Fixed-step clock: every frame advances by ``step`` seconds."""

    def __init__(self, step: float) -> None:
        if step <= 0:
            raise ValueError("step must be positive")
        super().__init__()
        self._step = step

    @property
    def step(self) -> float:
        return self._step

    def _delta(self, now: float) -> float:
        return self._step
