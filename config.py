#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Every value can be overridden with a ``PATROL_*`` environment variable,
read once at import time (e.g. ``PATROL_FPS=30 python main.py``).
This module is a thin, import-safe leaf; it never imports from
other project packages.  Gameplay tunables live in
:class:`sim.game_policy.GamePolicy` instead.
"""

import os
from typing import Optional


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    return int(raw) if raw not in (None, "") else default


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    return int(raw) if raw not in (None, "") else None


# ── Window / loop ────────────────────────────────────────────────────────────
WINDOW_WIDTH: int = _env_int("PATROL_WINDOW_WIDTH", 800)
WINDOW_HEIGHT: int = _env_int("PATROL_WINDOW_HEIGHT", 600)
TARGET_FPS: int = _env_int("PATROL_FPS", 60)
WINDOW_TITLE: str = os.environ.get(
    "PATROL_WINDOW_TITLE", "Night Highway Patrol - Enhanced Edition"
)

# ── Simulation ───────────────────────────────────────────────────────────────
DEFAULT_SEED: Optional[int] = _env_optional_int("PATROL_SEED")
HEADLESS_TICKS: int = _env_int("PATROL_HEADLESS_TICKS", 3600)
MAX_CATCH_UP_TICKS: int = _env_int("PATROL_MAX_CATCH_UP_TICKS", 5)

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.environ.get("PATROL_LOG_LEVEL", "INFO").upper()
LOG_FILE: str = os.environ.get("PATROL_LOG_FILE", "patrol.log")
WORLD_DEBUG_LOG_FILE: str = os.environ.get("PATROL_WORLD_LOG_FILE", "world_debug.log")
