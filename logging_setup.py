#!/usr/bin/env python3
"""
logging_setup.py
================
Configures the root logger with a console handler and a rotating file
handler (``patrol.log``, 1 MB, 2 backups).

Call :func:`setup_logging` once at startup before the game loop starts.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

import config


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = config.LOG_FILE,
    world_log_file: Optional[str] = config.WORLD_DEBUG_LOG_FILE,
) -> None:
    """Apply a unified log format to both console and file output.

    Parameters
    ----------
    level : int
        Minimum severity level (e.g. ``logging.DEBUG``, ``logging.INFO``).
    log_file : str or None
        Rotating log file path; ``None`` logs to the console only.
    world_log_file : str or None
        Dedicated DEBUG file for the ``world`` logger; ``None`` disables it.
    """
    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    # handler levels also filter records propagated from the DEBUG world logger
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)

    root.handlers.clear()
    root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=2)
        fh.setLevel(level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # ── Dedicated debug file for the simulation step ──────────────────
    world_logger = logging.getLogger("world")
    world_logger.handlers.clear()
    if world_log_file:
        world_logger.setLevel(logging.DEBUG)
        dfh = RotatingFileHandler(
            world_log_file, maxBytes=5_000_000, backupCount=2
        )
        dfh.setLevel(logging.DEBUG)
        dfh.setFormatter(fmt)
        world_logger.addHandler(dfh)
    else:
        world_logger.setLevel(logging.NOTSET)
