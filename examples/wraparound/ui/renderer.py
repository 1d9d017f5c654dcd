"""Canvas and status bar drawing."""
from __future__ import annotations

import pygame

from driftbox import Snapshot

from ui.constants import (
    BG_COLOR,
    CANVAS_H,
    CANVAS_W,
    PAUSED_COLOR,
    PLAYING_COLOR,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


class CanvasRenderer:
    """Draws snapshots onto the canvas area of ``surface``.

    The player is filled, enemies are stroked. The status bar shows the
    player's velocity and which control is live, like the start/stop
    buttons of a web page swapping places.
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._canvas = surface.subsurface(pygame.Rect(0, 0, CANVAS_W, CANVAS_H))
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def __call__(self, snapshot: Snapshot) -> None:
        self._canvas.fill(BG_COLOR)

        player = snapshot.player
        pygame.draw.rect(
            self._canvas,
            pygame.Color(player.color),
            pygame.Rect(int(player.x), int(player.y), int(player.w), int(player.h)),
        )
        for enemy in snapshot.enemies:
            pygame.draw.rect(
                self._canvas,
                pygame.Color(enemy.color),
                pygame.Rect(int(enemy.x), int(enemy.y), int(enemy.w), int(enemy.h)),
                1,
            )

        self._draw_status(snapshot)

    def _draw_status(self, snapshot: Snapshot) -> None:
        bar_rect = pygame.Rect(0, CANVAS_H, SCREEN_W, STATUS_H)
        pygame.draw.rect(self._surface, STATUS_BG, bar_rect)

        font = self._get_font()
        player = snapshot.player
        info = font.render(
            f"vX: {player.vx:.2f}   vY: {player.vy:.2f}", True, TEXT_COLOR
        )
        self._surface.blit(info, (8, CANVAS_H + 6))

        if snapshot.playing:
            label, color = "[Space] Stop", PLAYING_COLOR
        else:
            label, color = "[Space] Start", PAUSED_COLOR
        control = font.render(label, True, color)
        self._surface.blit(control, (8, CANVAS_H + 26))
        hint = font.render("[R] Reset  [Esc] Quit", True, TEXT_DIM)
        self._surface.blit(hint, (150, CANVAS_H + 26))
