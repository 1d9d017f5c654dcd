"""Wraparound — interactive driftbox demo.

A filled player square and outlined enemies drift across the canvas and
reappear on the opposite edge.

Controls:
  Space   Start / Stop
  R       Reset (re-spawn everything, keeps the play state)
  Esc     Quit

Run from this directory: python main.py [--timing interval] [--seed 7]
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from driftbox import Engine, EnemyConfig, GameConfig
from driftbox.config import TIMINGS
from driftbox.log import configure_logging

from ui.constants import CANVAS_H, CANVAS_W, FPS, SCREEN_H, SCREEN_W
from ui.renderer import CanvasRenderer

logger = logging.getLogger("wraparound")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Wraparound — driftbox visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument("--enemies", type=int, default=10, help="Enemy count (default: 10)")
    p.add_argument("--timing", choices=TIMINGS, default="frame",
                   help="frame (delta time) or interval (fixed 33 ms step)")
    args = p.parse_args()
    args.enemies = max(0, min(50, args.enemies))
    return args


def main() -> None:
    args = parse_args()
    configure_logging()

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(f"Wraparound — {args.timing} timing")
    clock = pygame.time.Clock()

    config = GameConfig(
        width=CANVAS_W,
        height=CANVAS_H,
        enemy=EnemyConfig(count=args.enemies),
        timing=args.timing,
    )
    renderer = CanvasRenderer(screen)
    engine = Engine(config, renderer=renderer, seed=args.seed)
    # Redraw once on stop so the status bar swaps to the start control.
    engine.on_stop(lambda e: e.render())
    engine.setup()

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    if engine.playing:
                        engine.stop()
                    else:
                        engine.start()
                elif event.key == pygame.K_r:
                    engine.reset()

        # --- Frame callbacks (update + draw) ---
        engine.scheduler.run_due()

        pygame.display.flip()

    logger.info("quit after %d frames", engine.clock.frame_number)
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
