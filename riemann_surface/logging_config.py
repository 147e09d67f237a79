"""Logging setup for the visualiser.

Usage:
    from riemann_surface.logging_config import setup_logging
    setup_logging()  # once, at the entry point
"""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level=logging.INFO, fmt=DEFAULT_FORMAT):
    """Configure the root logger with a single stderr handler.

    Accepts a logging level number or name ("DEBUG", "info", ...).  Repeated
    calls are no-ops, as with logging.basicConfig.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=fmt, handlers=[logging.StreamHandler(sys.stderr)])
