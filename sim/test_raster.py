#!/usr/bin/env python3
"""
Tests for the line / circle rasterizers.
"""

from __future__ import annotations

import math
import unittest

from sim.raster import (
    circle_midpoint,
    circle_symmetric_points,
    filled_circle,
    line_bresenham,
    line_dda,
    rect_outline,
    round_half_away,
)

_SEGMENTS = [
    (0, 0, 10, 0),
    (0, 0, 0, -7),
    (3, 4, 17, 9),
    (-5, 2, 6, -13),
    (10, 10, -3, -1),
    (0, 0, 8, 8),
    (2, 7, -9, 6),
]


class RoundingTests(unittest.TestCase):
    def test_ties_round_away_from_zero(self) -> None:
        self.assertEqual(round_half_away(0.5), 1)
        self.assertEqual(round_half_away(2.5), 3)
        self.assertEqual(round_half_away(-0.5), -1)
        self.assertEqual(round_half_away(-2.4), -2)


class DdaLineTests(unittest.TestCase):
    def test_point_count_is_major_axis_plus_one(self) -> None:
        for x1, y1, x2, y2 in _SEGMENTS:
            pts = line_dda(x1, y1, x2, y2)
            expected = round(max(abs(x2 - x1), abs(y2 - y1))) + 1
            self.assertEqual(len(pts), expected, msg=f"{(x1, y1, x2, y2)}")

    def test_endpoints(self) -> None:
        for x1, y1, x2, y2 in _SEGMENTS:
            pts = line_dda(x1, y1, x2, y2)
            self.assertEqual(pts[0], (x1, y1))
            self.assertEqual(pts[-1], (x2, y2))

    def test_degenerate_segment_is_single_point(self) -> None:
        self.assertEqual(line_dda(4.4, 7.6, 4.4, 7.6), [(4, 8)])

    def test_half_steps_round_up(self) -> None:
        pts = line_dda(0, 0, 4, 1)
        self.assertEqual([y for _, y in pts], [0, 0, 1, 1, 1])

    def test_fractional_length_truncates_step_count(self) -> None:
        self.assertEqual(line_dda(0, 0, 2.6, 0), [(0, 0), (1, 0), (2, 0)])
        self.assertEqual(len(line_dda(0.0, 0.0, 1.5, 3.9)), 4)

    def test_vertical_line(self) -> None:
        self.assertEqual(line_dda(200, 0, 200, 3), [(200, 0), (200, 1), (200, 2), (200, 3)])


class BresenhamLineTests(unittest.TestCase):
    def test_connected_eight_path(self) -> None:
        for x1, y1, x2, y2 in _SEGMENTS:
            pts = line_bresenham(x1, y1, x2, y2)
            self.assertEqual(pts[0], (x1, y1))
            self.assertEqual(pts[-1], (x2, y2))
            for (ax, ay), (bx, by) in zip(pts, pts[1:]):
                self.assertLessEqual(abs(ax - bx), 1)
                self.assertLessEqual(abs(ay - by), 1)
                self.assertNotEqual((ax, ay), (bx, by))

    def test_length_matches_major_axis(self) -> None:
        for x1, y1, x2, y2 in _SEGMENTS:
            pts = line_bresenham(x1, y1, x2, y2)
            self.assertEqual(len(pts), max(abs(x2 - x1), abs(y2 - y1)) + 1)

    def test_horizontal(self) -> None:
        self.assertEqual(line_bresenham(0, 0, 5, 0), [(i, 0) for i in range(6)])

    def test_single_point(self) -> None:
        self.assertEqual(line_bresenham(3, 3, 3, 3), [(3, 3)])


class MidpointCircleTests(unittest.TestCase):
    def test_symmetric_under_reflections_and_diagonal_swap(self) -> None:
        xc, yc = 50, 40
        for r in range(1, 15):
            pts = set(circle_midpoint(xc, yc, r))
            for x, y in pts:
                self.assertIn((2 * xc - x, y), pts)
                self.assertIn((x, 2 * yc - y), pts)
                self.assertIn((2 * xc - x, 2 * yc - y), pts)
                self.assertIn((xc + (y - yc), yc + (x - xc)), pts)

    def test_points_lie_near_radius(self) -> None:
        for r in (1, 5, 9, 20):
            for x, y in circle_midpoint(0, 0, r):
                self.assertLess(abs(math.hypot(x, y) - r), 1.0)

    def test_no_duplicates(self) -> None:
        pts = circle_midpoint(0, 0, 6)
        self.assertEqual(len(pts), len(set(pts)))

    def test_axis_extremes(self) -> None:
        pts = set(circle_midpoint(10, 10, 4))
        for p in ((14, 10), (6, 10), (10, 14), (10, 6)):
            self.assertIn(p, pts)

    def test_zero_radius_is_center(self) -> None:
        self.assertEqual(circle_midpoint(7, -3, 0), [(7, -3)])

    def test_negative_radius_rejected(self) -> None:
        with self.assertRaises(ValueError):
            circle_midpoint(0, 0, -1)

    def test_symmetric_points_helper(self) -> None:
        pts = circle_symmetric_points(0, 0, 1, 3)
        self.assertEqual(len(pts), 8)
        self.assertEqual(
            set(pts),
            {(1, 3), (-1, 3), (1, -3), (-1, -3), (3, 1), (-3, 1), (3, -1), (-3, -1)},
        )


class FilledCircleTests(unittest.TestCase):
    def test_rows_are_contiguous(self) -> None:
        pts = filled_circle(0, 0, 6)
        rows = {}
        for x, y in pts:
            rows.setdefault(y, []).append(x)
        self.assertEqual(sorted(rows), list(range(-6, 7)))
        for xs in rows.values():
            xs.sort()
            self.assertEqual(xs, list(range(xs[0], xs[-1] + 1)))
            self.assertEqual(xs[0], -xs[-1])

    def test_half_span_uses_floor_sqrt(self) -> None:
        pts = filled_circle(0, 0, 5)
        row = sorted(x for x, y in pts if y == 3)
        self.assertEqual(row[-1], 4)
        self.assertEqual(max(x for x, _ in pts), 5)

    def test_radius_below_one_draws_radius_one(self) -> None:
        self.assertEqual(
            sorted(filled_circle(2, 2, 0)),
            sorted([(2, 1), (1, 2), (2, 2), (3, 2), (2, 3)]),
        )


class RectOutlineTests(unittest.TestCase):
    def test_perimeter_pixels(self) -> None:
        pts = rect_outline(0, 0, 4, 3)
        self.assertEqual(len(pts), len(set(pts)))
        self.assertEqual(len(pts), 14)
        for corner in ((0, 0), (4, 0), (4, 3), (0, 3)):
            self.assertIn(corner, pts)


if __name__ == "__main__":
    unittest.main()
