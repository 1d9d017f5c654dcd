"""Session - the entity storage owned by the engine."""

from __future__ import annotations

import dataclasses
import random

from driftbox.config import GameConfig
from driftbox.spawner import create_enemies, create_player, reset_enemies, reset_player
from driftbox.types import Bounds, Entity, Snapshot


class Session:
    """Bounds, player and enemies for one run. Entities are mutated in place."""

    def __init__(self, bounds: Bounds, player: Entity, enemies: list[Entity]) -> None:
        self._bounds = bounds
        self._player = player
        self._enemies = enemies

    @classmethod
    def spawn(cls, rng: random.Random, config: GameConfig) -> Session:
        return cls(
            config.bounds(),
            create_player(rng, config),
            create_enemies(rng, config),
        )

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def player(self) -> Entity:
        return self._player

    @property
    def enemies(self) -> list[Entity]:
        return self._enemies

    def respawn(self, rng: random.Random, config: GameConfig) -> None:
        """Re-randomize every entity in place. Enemy count is unchanged."""
        reset_enemies(self._enemies, rng, config)
        reset_player(self._player, rng, config)

    def snapshot(
        self, frame_number: int = 0, dt: float = 0.0, playing: bool = False
    ) -> Snapshot:
        return Snapshot(
            frame_number=frame_number,
            dt=dt,
            playing=playing,
            player=dataclasses.replace(self._player),
            enemies=tuple(dataclasses.replace(e) for e in self._enemies),
        )
