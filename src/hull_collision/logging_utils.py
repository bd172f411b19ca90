# MIT License (see LICENSE)
"""
Logging helpers.

Library modules obtain their logger with `logging.getLogger(__name__)` and
never configure handlers themselves. Scripts (examples, benchmarks) call
setup_default_logging() once at startup.
"""
from __future__ import annotations
import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """
    Apply a minimal logging configuration once.

    Does nothing if the root logger already has handlers, i.e. when the
    application configured logging itself.
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
