"""driftbox - wrap-around rectangles animated by a small frame loop."""

from driftbox.clock import Clock, FixedClock
from driftbox.config import EnemyConfig, GameConfig, PlayerConfig, SpeedRange
from driftbox.engine import Engine
from driftbox.motion import advance, make_motion_system, wrap
from driftbox.scheduler import FrameScheduler, IntervalScheduler, Scheduler
from driftbox.session import Session
from driftbox.types import Bounds, Entity, FrameContext, Snapshot

__all__ = [
    "Engine",
    "Session",
    "Entity",
    "Bounds",
    "Snapshot",
    "FrameContext",
    "Clock",
    "FixedClock",
    "Scheduler",
    "FrameScheduler",
    "IntervalScheduler",
    "GameConfig",
    "PlayerConfig",
    "EnemyConfig",
    "SpeedRange",
    "advance",
    "wrap",
    "make_motion_system",
]
