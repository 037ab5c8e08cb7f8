#!/usr/bin/env python3
"""
Tests for world-to-screen mapping.
"""

from __future__ import annotations

import unittest

from sim.raster import round_half_away
from ui.types import Viewport


class ViewportTests(unittest.TestCase):
    def test_flips_y_axis(self) -> None:
        vp = Viewport(800, 600)
        self.assertEqual(vp.to_screen(0, 0), (0, 600))
        self.assertEqual(vp.to_screen(400, 600), (400, 0))

    def test_half_pixels_round_like_rasterizer(self) -> None:
        vp = Viewport(800, 600)
        self.assertEqual(vp.to_screen(10.5, 0.5), (11, 600))
        self.assertEqual(vp.to_screen(-2.5, 0.0), (-3, 600))
        for wx in (0.5, 1.5, 2.5, 199.5):
            self.assertEqual(vp.to_screen(wx, 0.0)[0], round_half_away(wx))

    def test_polygon_maps_every_corner(self) -> None:
        vp = Viewport(800, 600)
        self.assertEqual(
            vp.polygon([(0.5, 0.0), (2.5, 100.0)]),
            [(1, 600), (3, 500)],
        )


if __name__ == "__main__":
    unittest.main()
