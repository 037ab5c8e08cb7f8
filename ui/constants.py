#!/usr/bin/env python3
"""Visual constants shared across all renderers."""

from __future__ import annotations

from typing import Sequence, Tuple

from .types import ColorRGB


class ViewConstants:
    """Mixin providing every visual / layout constant."""

    SKY_BOTTOM_COLOR: ColorRGB = (10, 10, 36)
    SKY_TOP_COLOR: ColorRGB = (5, 5, 20)
    STAR_COLOR: ColorRGB = (255, 255, 255)
    BUILDING_COLOR: ColorRGB = (20, 20, 36)
    BUILDING_WINDOW_COLOR: ColorRGB = (255, 230, 102)

    ROAD_NEAR_COLOR: ColorRGB = (46, 46, 56)
    ROAD_FAR_COLOR: ColorRGB = (31, 31, 41)
    ROAD_EDGE_COLOR: ColorRGB = (255, 255, 255)
    ROAD_YELLOW_COLOR: ColorRGB = (255, 230, 26)
    LANE_MARKER_COLOR: ColorRGB = (255, 242, 77)
    LANE_MARKER_W = 6
    LANE_MARKER_H = 32

    POLICE_BODY_COLOR: ColorRGB = (13, 20, 166)
    POLICE_CABIN_COLOR: ColorRGB = (20, 31, 178)
    POLICE_GLASS_COLOR: ColorRGB = (128, 178, 242)
    SIREN_RED: ColorRGB = (255, 26, 26)
    SIREN_BLUE: ColorRGB = (26, 51, 255)

    CRIMINAL_BODY_COLOR: ColorRGB = (242, 13, 13)
    CRIMINAL_CABIN_COLOR: ColorRGB = (204, 13, 13)
    CRIMINAL_GLASS_COLOR: ColorRGB = (26, 26, 38)
    DANGER_STRIPE_COLOR: ColorRGB = (255, 255, 0)

    WHEEL_COLOR: ColorRGB = (20, 20, 20)
    HUBCAP_COLOR: ColorRGB = (110, 110, 110)
    CIVILIAN_GLASS_COLOR: ColorRGB = (64, 77, 102)
    BUS_WINDOW_COLOR: ColorRGB = (242, 242, 242)
    TAIL_LIGHT_COLOR: ColorRGB = (178, 13, 13)
    OUTLINE_COLOR: ColorRGB = (255, 255, 255)

    # indexed by CivilianCar.color
    CIVILIAN_COLORS: Sequence[ColorRGB] = (
        (13, 115, 204),   # blue
        (13, 166, 51),    # green
        (230, 191, 13),   # yellow
        (166, 64, 191),   # purple
        (217, 89, 38),    # orange
    )

    HUD_TEXT_COLOR: ColorRGB = (255, 255, 255)
    HUD_DIM_COLOR: ColorRGB = (200, 200, 200)
    HUD_PANEL_RGBA: Tuple[int, int, int, int] = (0, 0, 0, 140)
    OVERLAY_RGBA: Tuple[int, int, int, int] = (0, 0, 0, 150)
    GAME_OVER_COLOR: ColorRGB = (255, 70, 70)

    CONTROL_LINES: Sequence[str] = (
        "Arrows: Move",
        "S: Siren | P: Pause",
        "R: Restart | ESC: Exit",
    )
