#!/usr/bin/env python3
"""Police, criminal and civilian sprite composition (mixin).

Body panels are filled polygons; outlines come from the Bresenham
rasterizer, wheels from the filled-disk and midpoint-circle rasterizers.
"""

from __future__ import annotations

import pygame

from sim.entities import VehicleView
from sim.raster import circle_midpoint, filled_circle, rect_outline
from sim.spatial import scale_for_y


class VehicleRenderer:
    """Mixin that draws every vehicle kind from a :class:`VehicleView`."""

    # ------------------------------------------------------------------ #
    #  Shared parts                                                        #
    # ------------------------------------------------------------------ #

    def _body_and_cabin(self, surface, v: VehicleView, w: float, h: float, body, cabin) -> None:
        x, y = v.x, v.y
        self._quad(surface, body, (
            (x - w / 2, y), (x + w / 2, y),
            (x + w / 2, y + h * 0.65), (x - w / 2, y + h * 0.65),
        ))
        self._quad(surface, cabin, (
            (x - w * 0.35, y + h * 0.65), (x + w * 0.35, y + h * 0.65),
            (x + w * 0.3, y + h), (x - w * 0.3, y + h),
        ))

    def _window(self, surface, v: VehicleView, w: float, h: float, color, inner: float, outer: float) -> None:
        x, y = v.x, v.y
        self._quad(surface, color, (
            (x - w * outer, y + h * 0.68), (x + w * outer, y + h * 0.68),
            (x + w * inner, y + h * 0.9), (x - w * inner, y + h * 0.9),
        ))

    def _wheels(self, surface, v: VehicleView, w: float, h: float, radius: int, hubcaps: bool = False) -> None:
        cy = self._ri(v.y + h * 0.15)
        for cx in (self._ri(v.x - w * 0.35), self._ri(v.x + w * 0.35)):
            self._plot(surface, filled_circle(cx, cy, radius), self.WHEEL_COLOR)
            if hubcaps and radius > 2:
                self._plot(surface, circle_midpoint(cx, cy, radius - 2), self.HUBCAP_COLOR)

    # ------------------------------------------------------------------ #
    #  Police                                                              #
    # ------------------------------------------------------------------ #

    def draw_police(self, surface: pygame.Surface, v: VehicleView, siren_on: bool, siren_blink: int) -> None:
        scale = scale_for_y(v.y)
        w, h = v.width * scale, v.height * scale
        x, y = v.x, v.y

        self._body_and_cabin(surface, v, w, h, self.POLICE_BODY_COLOR, self.POLICE_CABIN_COLOR)

        outline = rect_outline(
            self._ri(x - w / 2), self._ri(y),
            self._ri(x + w / 2), self._ri(y + h),
        )
        self._plot(surface, outline, self.OUTLINE_COLOR)

        self._window(surface, v, w, h, self.POLICE_GLASS_COLOR, inner=0.25, outer=0.28)
        self._quad(surface, self.OUTLINE_COLOR, (
            (x - w * 0.4, y + h * 0.42), (x + w * 0.4, y + h * 0.42),
            (x + w * 0.4, y + h * 0.48), (x - w * 0.4, y + h * 0.48),
        ))

        self._wheels(surface, v, w, h, int(max(4.0, 6.0 * scale)), hubcaps=True)

        if siren_on:
            lamp_r = int(max(3.0, 5.0 * scale))
            lamp_y = self._ri(y + h - 4.0 * scale)
            if siren_blink < self.policy.siren_cycle // 2:
                self._plot(surface, filled_circle(self._ri(x - w * 0.2), lamp_y, lamp_r), self.SIREN_RED)
            else:
                self._plot(surface, filled_circle(self._ri(x + w * 0.2), lamp_y, lamp_r), self.SIREN_BLUE)

    # ------------------------------------------------------------------ #
    #  Criminal                                                            #
    # ------------------------------------------------------------------ #

    def draw_criminal(self, surface: pygame.Surface, v: VehicleView) -> None:
        scale = scale_for_y(v.y)
        w, h = v.width * scale, v.height * scale
        x, y = v.x, v.y

        self._body_and_cabin(surface, v, w, h, self.CRIMINAL_BODY_COLOR, self.CRIMINAL_CABIN_COLOR)
        # racing stripe
        self._quad(surface, self.OUTLINE_COLOR, (
            (x - 4, y), (x + 4, y), (x + 4, y + h * 0.8), (x - 4, y + h * 0.8),
        ))
        self._quad(surface, self.DANGER_STRIPE_COLOR, (
            (x - w * 0.4, y + h * 0.45), (x + w * 0.4, y + h * 0.45),
            (x + w * 0.4, y + h * 0.5), (x - w * 0.4, y + h * 0.5),
        ))
        self._wheels(surface, v, w, h, int(max(3.0, 6.0 * scale)))
        self._window(surface, v, w, h, self.CRIMINAL_GLASS_COLOR, inner=0.25, outer=0.28)

    # ------------------------------------------------------------------ #
    #  Civilians                                                           #
    # ------------------------------------------------------------------ #

    def draw_civilian(self, surface: pygame.Surface, v: VehicleView) -> None:
        scale = scale_for_y(v.y)
        w, h = v.width * scale, v.height * scale
        x, y = v.x, v.y
        palette = self.CIVILIAN_COLORS
        color = palette[v.color] if 0 <= v.color < len(palette) else palette[-1]

        self._body_and_cabin(surface, v, w, h, color, color)
        self._wheels(surface, v, w, h, int(max(2.0, 5.0 * scale)))
        self._window(surface, v, w, h, self.CIVILIAN_GLASS_COLOR, inner=0.22, outer=0.25)

        if v.kind == "bus":
            for i in range(3):
                wx = x - w * 0.3 + i * (w * 0.3)
                self._quad(surface, self.BUS_WINDOW_COLOR, (
                    (wx, y + h * 0.5), (wx + w * 0.15, y + h * 0.5),
                    (wx + w * 0.15, y + h * 0.62), (wx, y + h * 0.62),
                ))

        for sign in (-1, 1):
            x0, x1 = x + sign * w * 0.32, x + sign * w * 0.38
            self._quad(surface, self.TAIL_LIGHT_COLOR, (
                (x0, y + h * 0.12), (x1, y + h * 0.12),
                (x1, y + h * 0.22), (x0, y + h * 0.22),
            ))
