"""Logging setup for driftbox hosts."""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO, format: str | None = None) -> None:
    """Configure the root logger once; an existing configuration wins."""
    if logging.getLogger().handlers:
        return

    logging.basicConfig(
        level=level,
        format=format or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
