#!/usr/bin/env python3

from .types import ColorRGB, ColorRGBA, Viewport
from .constants import ViewConstants
from .helpers import ViewHelpers
from .draw_road import RoadRenderer
from .draw_vehicles import VehicleRenderer
from .hud import HudRenderer
from .pygame_view import PygameHighwayView, run_pygame_view

__all__ = [
    "ColorRGB",
    "ColorRGBA",
    "Viewport",
    "ViewConstants",
    "ViewHelpers",
    "RoadRenderer",
    "VehicleRenderer",
    "HudRenderer",
    "PygameHighwayView",
    "run_pygame_view",
]
