"""
ui/types.py
===========
Lightweight data containers used across every UI module.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from sim.raster import round_half_away

ColorRGB = Tuple[int, int, int]
ColorRGBA = Tuple[int, int, int, int]


@dataclass
class Viewport:
    """Maps world coordinates (``y`` up, origin bottom-left) to screen pixels."""
    screen_w: int
    screen_h: int

    def to_screen(self, wx: float, wy: float) -> Tuple[int, int]:
        return round_half_away(wx), round_half_away(self.screen_h - wy)

    def polygon(self, points: Iterable[Tuple[float, float]]) -> List[Tuple[int, int]]:
        return [self.to_screen(x, y) for x, y in points]

