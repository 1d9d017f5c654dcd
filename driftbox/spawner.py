"""Randomized spawning of the player and enemies."""

from __future__ import annotations

import math
import random

from driftbox.config import GameConfig
from driftbox.types import ENEMY, PLAYER, Bounds, Entity, Position, Size, Speed


def random_float(rng: random.Random, lo: float, hi: float) -> float:
    """Uniform float in ``[lo, hi)``."""
    return rng.random() * (hi - lo) + lo


def random_int(rng: random.Random, lo: float, hi: float) -> int:
    """``floor`` of a uniform float in ``[lo, hi)``."""
    return math.floor(random_float(rng, lo, hi))


def random_sign(rng: random.Random, num: float) -> float:
    if rng.random() > 0.5:
        return num
    return -num


def random_speed(rng: random.Random, lo: float, hi: float) -> Speed:
    """Velocity with each magnitude in ``[lo, hi)`` and an independent sign per axis."""
    return Speed(
        vx=random_sign(rng, random_float(rng, lo, hi)),
        vy=random_sign(rng, random_float(rng, lo, hi)),
    )


def random_enemy_size(
    rng: random.Random, lo: int, hi: int, factor: int
) -> Size:
    return Size(
        w=random_int(rng, lo, hi) * factor,
        h=random_int(rng, lo, hi) * factor,
    )


def random_safety_position(
    rng: random.Random,
    size: Size,
    safety_zone: Size,
    center: Position,
    bounds: Bounds,
) -> Position:
    """Pick a position in one of the four quadrants, clear of the safety zone.

    The zone spans ``safety_zone`` in every direction from ``center``. Each
    axis independently picks the near or far half. When ``size`` is larger
    than the chosen half the range inverts and the result is not clamped.
    """
    if rng.random() > 0.5:
        # left
        min_x = bounds.border
        max_x = center.x - safety_zone.w - size.w
    else:
        # right
        min_x = center.x + safety_zone.w
        max_x = bounds.w - bounds.border - size.w

    if rng.random() > 0.5:
        # top
        min_y = bounds.border
        max_y = center.y - safety_zone.h - size.h
    else:
        # bottom
        min_y = center.y + safety_zone.h
        max_y = bounds.h - bounds.border - size.h

    return Position(
        x=random_int(rng, min_x, max_x),
        y=random_int(rng, min_y, max_y),
    )


def center_of(size: Size, bounds: Bounds) -> Position:
    """Top-left corner that centres a box of ``size`` in ``bounds``."""
    return Position(
        x=bounds.center_x - size.w / 2,
        y=bounds.center_y - size.h / 2,
    )


# -- Player --


def create_player(rng: random.Random, config: GameConfig) -> Entity:
    player = Entity(
        kind=PLAYER,
        x=0.0,
        y=0.0,
        w=config.player.w,
        h=config.player.h,
        color=config.player.color,
    )
    reset_player(player, rng, config)
    return player


def reset_player(player: Entity, rng: random.Random, config: GameConfig) -> None:
    """Re-centre the player and give it a fresh speed."""
    pos = center_of(Size(player.w, player.h), config.bounds())
    speed_range = config.speed_range(config.player.speed)
    speed = random_speed(rng, speed_range.min, speed_range.max)
    player.x = pos.x
    player.y = pos.y
    player.vx = speed.vx
    player.vy = speed.vy


# -- Enemies --


def create_enemies(
    rng: random.Random, config: GameConfig, count: int | None = None
) -> list[Entity]:
    if count is None:
        count = config.enemy.count
    enemies = [
        Entity(kind=ENEMY, x=0.0, y=0.0, w=0, h=0, color=config.enemy.color)
        for _ in range(count)
    ]
    reset_enemies(enemies, rng, config)
    return enemies


def reset_enemies(
    enemies: list[Entity], rng: random.Random, config: GameConfig
) -> None:
    """Give every enemy a new size, safety position and speed, in place."""
    bounds = config.bounds()
    enemy_cfg = config.enemy
    speed_range = config.speed_range(enemy_cfg.speed)
    for enemy in enemies:
        size = random_enemy_size(
            rng, enemy_cfg.size_min, enemy_cfg.size_max, enemy_cfg.size_factor
        )
        enemy.w = size.w
        enemy.h = size.h

        pos = random_safety_position(
            rng, size, config.player.safety_zone, bounds.center, bounds
        )
        enemy.x = pos.x
        enemy.y = pos.y

        speed = random_speed(rng, speed_range.min, speed_range.max)
        enemy.vx = speed.vx
        enemy.vy = speed.vy
