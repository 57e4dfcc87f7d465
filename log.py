"""Logging setup for the scene loader."""

import logging
import os
import sys


ROOT_NAME = "raycast"
ENV_LOG_LEVEL = "RAYCAST_LOG_LEVEL"

# Library modules log under their own module names
_LIBRARY_LOGGERS = ("scene_parser",)


def _get_level_from_env(default):
    raw = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    return getattr(logging, raw, default) if raw else default


def setup_logging(level=None):
    """Configure console logging for the command line tool and the library modules."""
    if level is None:
        level = _get_level_from_env(logging.WARNING)

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                            datefmt="%Y-%m-%d %H:%M:%S")
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(fmt)

    for name in (ROOT_NAME,) + _LIBRARY_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False
        logger.handlers.clear()
        logger.addHandler(console)

    return logging.getLogger(ROOT_NAME)
