"""Headless runner.

Run: python -m driftbox --frames 120 --seed 7
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from driftbox.config import TIMINGS, EnemyConfig, GameConfig
from driftbox.engine import Engine
from driftbox.log import configure_logging
from driftbox.render import LogRenderer
from driftbox.session import Session
from driftbox.types import FrameContext, System

logger = logging.getLogger(__name__)


def make_frame_limit_system(frames: int) -> System:
    """Request a stop once ``frames`` frames have run."""

    def frame_limit_system(session: Session, ctx: FrameContext) -> None:
        if ctx.frame_number >= frames:
            ctx.request_stop()

    return frame_limit_system


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="driftbox", description="Run the wrap-around animation headless"
    )
    p.add_argument("--frames", type=int, default=60, help="Frames to run (default: 60)")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument("--enemies", type=int, default=10, help="Enemy count (default: 10)")
    p.add_argument("--timing", choices=TIMINGS, default="frame",
                   help="frame: delta-scaled frame callbacks; interval: fixed 33 ms step")
    p.add_argument("--every", type=int, default=10, metavar="N",
                   help="Log every Nth frame (default: 10)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log entity detail")
    args = p.parse_args(argv)
    args.frames = max(1, args.frames)
    args.enemies = max(0, args.enemies)
    args.every = max(1, args.every)
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = GameConfig(enemy=EnemyConfig(count=args.enemies), timing=args.timing)
    renderer = LogRenderer(logging.getLogger("driftbox.frames"), every=args.every)
    engine = Engine(config, renderer=renderer, seed=args.seed)
    engine.add_system(make_frame_limit_system(args.frames))

    engine.setup()
    engine.scheduler.drain()

    logger.info(
        "done after %d frames (%.2fs simulated, seed=%d)",
        engine.clock.frame_number,
        engine.clock.elapsed,
        engine.seed,
    )
    return 0
