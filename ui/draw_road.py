#!/usr/bin/env python3
"""Night sky, skyline, road surface, edge lines and lane markers (mixin).

Straight road edges go through the DDA rasterizer; stars are plotted
as three-pixel clusters.  Filled areas (sky, road, buildings) use
pygame fills.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import pygame

from sim.entities import GameSnapshot
from sim.raster import Point, line_dda
from ui.helpers import fill_vertical_gradient, thicken


class RoadRenderer:
    """Mixin that draws everything behind the vehicles."""

    # ------------------------------------------------------------------ #
    #  Backdrop                                                            #
    # ------------------------------------------------------------------ #

    def draw_background(self, surface: pygame.Surface, snap: GameSnapshot) -> None:
        fill_vertical_gradient(
            surface,
            pygame.Rect(0, 0, self.width, self.height),
            self.SKY_TOP_COLOR,
            self.SKY_BOTTOM_COLOR,
        )

        star_points: List[Point] = []
        for sx, sy in snap.stars:
            star_points.extend(((sx, sy), (sx + 1, sy), (sx, sy + 1)))
        self._plot(surface, star_points, self.STAR_COLOR)

        self._draw_skyline(surface)

    def _draw_skyline(self, surface: pygame.Surface) -> None:
        for i in range(3):
            x = 30 + i * 60
            h = 100 + (i % 3) * 80
            self._quad(surface, self.BUILDING_COLOR, ((x, 0), (x + 45, 0), (x + 45, h), (x, h)))
            for j in range(h // 25):
                if (i + j) % 3 == 0:
                    continue
                y0, y1 = 10 + j * 20, 16 + j * 20
                for wx in (x + 5, x + 25):
                    self._quad(
                        surface, self.BUILDING_WINDOW_COLOR,
                        ((wx, y0), (wx + 10, y0), (wx + 10, y1), (wx, y1)),
                    )

        for i in range(3):
            x = self.width - 175 + i * 60
            h = 120 + (i % 3) * 70
            self._quad(surface, self.BUILDING_COLOR, ((x, 0), (x + 45, 0), (x + 45, h), (x, h)))

    # ------------------------------------------------------------------ #
    #  Road                                                                #
    # ------------------------------------------------------------------ #

    def draw_road(self, surface: pygame.Surface) -> None:
        policy = self.policy
        left, right = int(policy.road_left), int(policy.road_right)
        fill_vertical_gradient(
            surface,
            pygame.Rect(left, 0, right - left, self.height),
            self.ROAD_FAR_COLOR,
            self.ROAD_NEAR_COLOR,
        )

        edges: List[Point] = []
        for x in (left, right):
            edges.extend(thicken(line_dda(x, 0, x, self.height), dx=1))
        self._plot(surface, edges, self.ROAD_EDGE_COLOR)

        yellow: List[Point] = []
        for x in (left + 3, right - 3):
            yellow.extend(line_dda(x, 0, x, self.height))
        self._plot(surface, yellow, self.ROAD_YELLOW_COLOR)

    def draw_lane_markers(
        self,
        surface: pygame.Surface,
        markers: Sequence[Tuple[float, float]],
    ) -> None:
        half = self.LANE_MARKER_W / 2.0
        for mx, my in markers:
            self._quad(
                surface,
                self.LANE_MARKER_COLOR,
                (
                    (mx - half, my),
                    (mx + half, my),
                    (mx + half, my + self.LANE_MARKER_H),
                    (mx - half, my + self.LANE_MARKER_H),
                ),
            )
