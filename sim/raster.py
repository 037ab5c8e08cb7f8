#!/usr/bin/env python3
"""
sim/raster.py
=============
Scan-conversion of lines and circles into integer pixel coordinates.

Every function is pure: geometry in, a list of ``(x, y)`` tuples out.
Nothing here knows about surfaces or colours; the renderer in
:mod:`ui.helpers` owns the frame buffer and plots whatever these return.

* :func:`line_dda`: digital differential analyzer (float stepping).
* :func:`line_bresenham`: integer error accumulation, exact 8-connectivity.
* :func:`circle_midpoint`: outline via the midpoint decision variable.
* :func:`filled_circle`: horizontal spans, for wheels and lamps.
"""

from __future__ import annotations

import math
from typing import Dict, List, Tuple

Point = Tuple[int, int]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's :func:`round` uses banker's rounding (``round(0.5) == 0``),
    which makes DDA output depend on the parity of the coordinate.
    """
    if value >= 0.0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def line_dda(x1: float, y1: float, x2: float, y2: float) -> List[Point]:
    """Rasterize a segment by stepping ``delta / steps`` along both axes.

    Returns ``int(max(|dx|, |dy|)) + 1`` points.  Rounding may leave small
    gaps or doubled pixels on shallow slopes; use :func:`line_bresenham`
    where a connected outline matters.
    """
    dx = x2 - x1
    dy = y2 - y1
    steps = max(abs(dx), abs(dy))

    if steps <= 0.0:
        return [(round_half_away(x1), round_half_away(y1))]

    x_inc = dx / steps
    y_inc = dy / steps
    x, y = float(x1), float(y1)

    points: List[Point] = []
    for _ in range(int(steps) + 1):
        points.append((round_half_away(x), round_half_away(y)))
        x += x_inc
        y += y_inc
    return points


def line_bresenham(x1: int, y1: int, x2: int, y2: int) -> List[Point]:
    """Connected 8-directional pixel path from ``(x1, y1)`` to ``(x2, y2)`` inclusive."""
    x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    points: List[Point] = []
    while True:
        points.append((x1, y1))
        if x1 == x2 and y1 == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x1 += sx
        if e2 < dx:
            err += dx
            y1 += sy
    return points


def circle_symmetric_points(xc: int, yc: int, x: int, y: int) -> List[Point]:
    """The eight reflections of octant offset ``(x, y)`` around ``(xc, yc)``."""
    return [
        (xc + x, yc + y),
        (xc - x, yc + y),
        (xc + x, yc - y),
        (xc - x, yc - y),
        (xc + y, yc + x),
        (xc - y, yc + x),
        (xc + y, yc - x),
        (xc - y, yc - x),
    ]


def circle_midpoint(xc: int, yc: int, r: int) -> List[Point]:
    """Outline of a circle of integer radius *r*.

    Walks one octant with the midpoint recurrence and mirrors it.
    Points that coincide on the axes / diagonals are emitted once.

    Raises
    ------
    ValueError
        If *r* is negative.
    """
    if r < 0:
        raise ValueError(f"radius must be non-negative, got {r}")
    if r == 0:
        return [(xc, yc)]

    x, y = 0, r
    p = 1 - r
    # dict keeps first-seen order while dropping duplicates
    seen: Dict[Point, None] = {}
    while x <= y:
        for pt in circle_symmetric_points(xc, yc, x, y):
            seen.setdefault(pt, None)
        x += 1
        if p < 0:
            p += 2 * x + 1
        else:
            y -= 1
            p += 2 * (x - y) + 1
    return list(seen)


def filled_circle(xc: int, yc: int, r: int) -> List[Point]:
    """Solid disk as contiguous horizontal runs, one per scanline.

    Radii below 1 are drawn as radius 1.
    """
    r = max(1, int(r))
    points: List[Point] = []
    for dy in range(-r, r + 1):
        span = int(math.floor(math.sqrt(r * r - dy * dy)))
        for dx in range(-span, span + 1):
            points.append((xc + dx, yc + dy))
    return points


def rect_outline(x1: int, y1: int, x2: int, y2: int) -> List[Point]:
    """Closed rectangle outline built from four Bresenham edges."""
    seen: Dict[Point, None] = {}
    for a, b, c, d in (
        (x1, y1, x2, y1),
        (x2, y1, x2, y2),
        (x2, y2, x1, y2),
        (x1, y2, x1, y1),
    ):
        for pt in line_bresenham(a, b, c, d):
            seen.setdefault(pt, None)
    return list(seen)
