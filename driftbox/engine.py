"""Engine - animation driver with start/stop/reset controls."""

from __future__ import annotations

import logging
import os
import random
from typing import Callable

from driftbox.clock import Clock, FixedClock
from driftbox.config import GameConfig
from driftbox.motion import make_motion_system
from driftbox.render import NullRenderer
from driftbox.scheduler import FrameScheduler, IntervalScheduler, Scheduler
from driftbox.session import Session
from driftbox.types import FrameContext, Renderer, Snapshot, System

logger = logging.getLogger(__name__)

Hook = Callable[["Engine"], None]


def make_scheduler(config: GameConfig) -> Scheduler:
    if config.timing == "interval":
        return IntervalScheduler(config.fixed_interval)
    return FrameScheduler(config.frame_interval)


def make_clock(config: GameConfig) -> Clock:
    if config.timing == "interval":
        return FixedClock(config.fixed_interval)
    return Clock()


class Engine:
    """Animation driver. Owns the session and the playing flag.

    While playing, each frame runs the systems, hands a snapshot to the
    renderer and asks the scheduler for the next frame.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        renderer: Renderer | None = None,
        scheduler: Scheduler | None = None,
        clock: Clock | None = None,
        seed: int | None = None,
    ) -> None:
        self._config = config or GameConfig()
        self._renderer = renderer or NullRenderer()
        self._scheduler = scheduler or make_scheduler(self._config)
        self._clock = clock or make_clock(self._config)

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._session: Session | None = None
        self._systems: list[System] = [make_motion_system()]
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._playing = False
        self._handle: int | None = None
        self._stop_requested = False

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Engine.setup() has not been called")
        return self._session

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def playing(self) -> bool:
        return self._playing

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    # -- Controls --

    def setup(self) -> None:
        """Spawn the player and enemies, then start or draw once."""
        self._session = Session.spawn(self._rng, self._config)
        logger.info(
            "session ready: %d enemies, seed=%d, timing=%s",
            len(self._session.enemies),
            self._seed,
            self._config.timing,
        )
        if self._config.autoplay:
            self.start()
        else:
            self.render()

    def start(self) -> None:
        if self._playing:
            return
        if self._session is None:
            raise RuntimeError("Engine.setup() has not been called")
        now = self._scheduler.now()
        self._playing = True
        self._clock.mark(now)
        logger.info("animation started at frame %d", self._clock.frame_number)
        for hook in self._start_hooks:
            hook(self)
        self.frame(now)

    def stop(self) -> None:
        if not self._playing:
            return
        self._playing = False
        if self._handle is not None:
            self._scheduler.cancel(self._handle)
            self._handle = None
        logger.info("animation stopped at frame %d", self._clock.frame_number)
        for hook in self._stop_hooks:
            hook(self)

    def reset(self) -> None:
        """Re-spawn every entity and draw once. Playing state is kept."""
        self.session.respawn(self._rng, self._config)
        logger.info("session reset (playing=%s)", self._playing)
        self.render()

    # -- Loop --

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _run_systems(self, ctx: FrameContext) -> None:
        self._stop_requested = False
        for system in self._systems:
            system(self.session, ctx)
            if self._stop_requested:
                break

    def frame(self, now: float) -> None:
        """Scheduler callback: update, draw, and schedule the next frame."""
        self._handle = None
        dt = self._clock.advance(now)
        if not self._playing:
            return
        try:
            self._run_systems(self._clock.context(self._request_stop, self._rng))
            logger.debug("frame %d dt=%.4f", self._clock.frame_number, dt)
            self.render()
        except Exception:
            # no frame is pending, so start() must be able to resume
            self._playing = False
            raise
        if self._stop_requested:
            self.stop()
        elif self._playing:
            self._handle = self._scheduler.request(self.frame)

    def step(self, dt: float) -> None:
        """Run the systems once with an explicit ``dt``; no draw, no scheduling."""
        self._run_systems(
            FrameContext(
                frame_number=self._clock.frame_number,
                dt=dt,
                elapsed=self._clock.elapsed,
                request_stop=self._request_stop,
                random=self._rng,
            )
        )

    def snapshot(self) -> Snapshot:
        return self.session.snapshot(
            frame_number=self._clock.frame_number,
            dt=self._clock.dt,
            playing=self._playing,
        )

    def render(self) -> None:
        self._renderer(self.snapshot())
