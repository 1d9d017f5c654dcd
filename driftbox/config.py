"""Fixed defaults for a driftbox session."""

from __future__ import annotations

from dataclasses import dataclass, field

from driftbox.types import Bounds, Size

TIMINGS = ("frame", "interval")


@dataclass(frozen=True)
class SpeedRange:
    """Magnitude range for a random velocity component, ``[min, max)``."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(
                f"speed range min {self.min} exceeds max {self.max}"
            )


@dataclass(frozen=True)
class PlayerConfig:
    w: float = 16
    h: float = 16
    color: str = "#EFC9FF"
    safety_zone: Size = field(default_factory=lambda: Size(32, 32))
    speed: SpeedRange | None = field(default_factory=lambda: SpeedRange(50, 100))


@dataclass(frozen=True)
class EnemyConfig:
    """Enemy spawn parameters.

    Attributes:
        count: Number of enemies created at setup.
        size_min: Lower bound of the random size multiplier.
        size_max: Upper bound of the random size multiplier.
        size_factor: Pixels per size unit.
    """

    color: str = "#EFC9FF"
    speed: SpeedRange | None = field(default_factory=lambda: SpeedRange(25, 75))
    count: int = 10
    size_min: int = 2
    size_max: int = 8
    size_factor: int = 4

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("enemy count must not be negative")


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a session.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        border: Inner margin kept free when placing enemies.
        speed: Fallback range for player or enemy configs whose own
            ``speed`` is None.
        timing: ``"frame"`` for delta-scaled frame callbacks, ``"interval"``
            for a fixed step re-triggered after a fixed delay.
        frame_interval: Target seconds between frame callbacks.
        fixed_interval: Delay and step size for the interval timing.
        autoplay: Start animating as soon as the session is set up.
    """

    width: float = 400
    height: float = 400
    border: float = 4
    speed: SpeedRange = field(default_factory=lambda: SpeedRange(25, 75))
    player: PlayerConfig = field(default_factory=PlayerConfig)
    enemy: EnemyConfig = field(default_factory=EnemyConfig)
    timing: str = "frame"
    frame_interval: float = 1 / 60
    fixed_interval: float = 0.033
    autoplay: bool = True

    def __post_init__(self) -> None:
        if self.timing not in TIMINGS:
            raise ValueError(
                f"Unknown timing {self.timing!r}, expected one of {TIMINGS}"
            )
        if self.frame_interval <= 0 or self.fixed_interval <= 0:
            raise ValueError("timing intervals must be positive")

    def bounds(self) -> Bounds:
        return Bounds(self.width, self.height, self.border)

    def speed_range(self, own: SpeedRange | None) -> SpeedRange:
        return own if own is not None else self.speed
