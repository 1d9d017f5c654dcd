"""Shared records and type aliases for driftbox."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

PLAYER = "player"
ENEMY = "enemy"


@dataclass(slots=True)
class Entity:
    """A moving rectangle. Player and enemy differ only by ``kind``."""

    kind: str
    x: float
    y: float
    w: float
    h: float
    vx: float = 0.0
    vy: float = 0.0
    color: str = "#FFFFFF"


@dataclass(frozen=True, slots=True)
class Bounds:
    w: float
    h: float
    border: float = 4

    def __post_init__(self) -> None:
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"bounds must be positive, got {self.w}x{self.h}")

    @property
    def center_x(self) -> float:
        return self.w / 2

    @property
    def center_y(self) -> float:
        return self.h / 2

    @property
    def center(self) -> Position:
        return Position(self.center_x, self.center_y)


@dataclass(frozen=True, slots=True)
class Size:
    w: float
    h: float


@dataclass(frozen=True, slots=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Speed:
    vx: float
    vy: float


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of one frame. Entities are copies."""

    frame_number: int
    dt: float
    playing: bool
    player: Entity
    enemies: tuple[Entity, ...]


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


if TYPE_CHECKING:
    from driftbox.session import Session

System = Callable[["Session", FrameContext], None]
Renderer = Callable[[Snapshot], None]
FrameCallback = Callable[[float], None]
