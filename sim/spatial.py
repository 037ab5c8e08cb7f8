#!/usr/bin/env python3
"""
sim/spatial.py
==============
Overlap and collision predicates used by :mod:`sim.spawner` and
:mod:`sim.world`.

All boxes are axis-aligned and anchored at **bottom-centre**: ``x`` is the
horizontal centre, ``y`` the bottom edge, and the box extends ``width / 2``
either side and ``height`` upward.  Intervals are closed, so boxes that
merely touch count as overlapping.
"""

from __future__ import annotations

from typing import Any


def scale_for_y(y: float) -> float:
    """Depth scale factor for an entity at height *y*.

    Always ``1.0``; perspective scaling is not enabled.
    """
    return 1.0


def rect_overlap(
    x1: float, y1: float, w1: float, h1: float,
    x2: float, y2: float, w2: float, h2: float,
    margin: float = 8.0,
) -> bool:
    """True if the two boxes intersect once inflated horizontally by *margin*.

    Only the horizontal extent is inflated; vertical extents are exact.
    """
    left_a = x1 - w1 / 2.0 - margin
    right_a = x1 + w1 / 2.0 + margin
    left_b = x2 - w2 / 2.0 - margin
    right_b = x2 + w2 / 2.0 + margin
    return not (
        left_a > right_b
        or right_a < left_b
        or y1 + h1 < y2
        or y1 > y2 + h2
    )


def check_collision_scaled(
    x1: float, y1: float, w1: float, h1: float,
    x2: float, y2: float, w2: float, h2: float,
) -> bool:
    """Gameplay collision: AABB test after applying :func:`scale_for_y`."""
    s1 = scale_for_y(y1)
    s2 = scale_for_y(y2)
    ew1, eh1 = w1 * s1, h1 * s1
    ew2, eh2 = w2 * s2, h2 * s2
    return (
        x1 - ew1 / 2.0 <= x2 + ew2 / 2.0
        and x1 + ew1 / 2.0 >= x2 - ew2 / 2.0
        and y1 <= y2 + eh2
        and y1 + eh1 >= y2
    )


# ── entity-level wrappers ─────────────────────────────────────────────────────

def collides(a: Any, b: Any) -> bool:
    """:func:`check_collision_scaled` for two objects exposing ``x, y, width, height``."""
    return check_collision_scaled(
        a.x, a.y, a.width, a.height,
        b.x, b.y, b.width, b.height,
    )
