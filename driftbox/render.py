"""Renderers that need no display."""

from __future__ import annotations

import logging

from driftbox.types import Snapshot


class NullRenderer:
    """Discards every snapshot."""

    def __call__(self, snapshot: Snapshot) -> None:
        pass


class LogRenderer:
    """Writes each snapshot to a logger: a summary at INFO, entities at DEBUG."""

    def __init__(self, logger: logging.Logger | None = None, every: int = 1) -> None:
        if every <= 0:
            raise ValueError("every must be positive")
        self._logger = logger or logging.getLogger(__name__)
        self._every = every
        self.frames_drawn = 0

    def __call__(self, snapshot: Snapshot) -> None:
        self.frames_drawn += 1
        if snapshot.frame_number % self._every:
            return
        player = snapshot.player
        self._logger.info(
            "frame %d dt=%.3f player=(%.1f, %.1f) vX: %.2f vY: %.2f",
            snapshot.frame_number,
            snapshot.dt,
            player.x,
            player.y,
            player.vx,
            player.vy,
        )
        if self._logger.isEnabledFor(logging.DEBUG):
            for i, enemy in enumerate(snapshot.enemies):
                self._logger.debug(
                    "  enemy %d at (%.1f, %.1f) size %gx%g",
                    i,
                    enemy.x,
                    enemy.y,
                    enemy.w,
                    enemy.h,
                )
