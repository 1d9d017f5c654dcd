"""Per-frame position update with edge wrap."""

from __future__ import annotations

from typing import TYPE_CHECKING

from driftbox.types import Bounds, Entity, FrameContext, System

if TYPE_CHECKING:
    from driftbox.session import Session


def wrap(entity: Entity, bounds: Bounds) -> None:
    """Teleport an entity that fully left the canvas to the opposite edge.

    Only the edge the entity is moving towards is checked, so an entity
    parked outside the canvas with zero velocity stays there.
    """
    # right
    if entity.x > bounds.w and entity.vx > 0:
        entity.x = -entity.w
    # left
    if entity.x < -entity.w and entity.vx < 0:
        entity.x = bounds.w
    # bottom
    if entity.y > bounds.h and entity.vy > 0:
        entity.y = -entity.h
    # top
    if entity.y < -entity.h and entity.vy < 0:
        entity.y = bounds.h


def advance(entity: Entity, dt: float, bounds: Bounds) -> None:
    """Move ``entity`` by its velocity scaled by ``dt`` seconds, then wrap."""
    entity.x += entity.vx * dt
    entity.y += entity.vy * dt
    wrap(entity, bounds)


def make_motion_system() -> System:
    """Advance the player, then every enemy in spawn order."""

    def motion_system(session: "Session", ctx: FrameContext) -> None:
        advance(session.player, ctx.dt, session.bounds)
        for enemy in session.enemies:
            advance(enemy, ctx.dt, session.bounds)

    return motion_system
