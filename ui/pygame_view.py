#!/usr/bin/env python3
"""
Main view class: combines all UI mixins into one runnable Pygame window.

Module layout
─────────────
    ui/
    ├── types.py           – ColorRGB, Viewport
    ├── constants.py       – ViewConstants mixin (all class-level constants)
    ├── helpers.py         – ViewHelpers mixin  (plotting, gradients, text)
    ├── draw_road.py       – RoadRenderer mixin (sky, road, lane markers)
    ├── draw_vehicles.py   – VehicleRenderer mixin (police, criminal, civilians)
    ├── hud.py             – HudRenderer mixin  (panels, pause, game over)
    └── pygame_view.py     – PygameHighwayView (this file – main loop)
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import pygame

import config
from sim.entities import GameSnapshot
from sim.sim_bridge import InputEdge, SimBridge

from .constants import ViewConstants
from .draw_road import RoadRenderer
from .draw_vehicles import VehicleRenderer
from .helpers import ViewHelpers
from .hud import HudRenderer
from .types import Viewport

log = logging.getLogger(__name__)

_KEY_DOWN_EDGES: Dict[int, InputEdge] = {
    pygame.K_LEFT: InputEdge.LEFT_DOWN,
    pygame.K_RIGHT: InputEdge.RIGHT_DOWN,
    pygame.K_s: InputEdge.TOGGLE_SIREN,
    pygame.K_p: InputEdge.TOGGLE_PAUSE,
    pygame.K_r: InputEdge.RESTART,
    pygame.K_ESCAPE: InputEdge.QUIT,
}
_KEY_UP_EDGES: Dict[int, InputEdge] = {
    pygame.K_LEFT: InputEdge.LEFT_UP,
    pygame.K_RIGHT: InputEdge.RIGHT_UP,
}


class PygameHighwayView(
    ViewConstants,
    ViewHelpers,
    RoadRenderer,
    VehicleRenderer,
    HudRenderer,
):
    """Highway-patrol window powered by Pygame.

    Inherits drawing logic from focused mixin modules so each file
    stays small and single-purpose.  Simulation, input and rendering
    all run on this one thread.
    """

    def __init__(self, bridge: SimBridge, width: int = 800, height: int = 600, fps: int = 60):
        self.bridge = bridge
        self.policy = bridge.state.policy
        self.width = width
        self.height = height
        self.fps = fps
        self.viewport = Viewport(width, height)

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font_small: Optional[pygame.font.Font] = None
        self.font_medium: Optional[pygame.font.Font] = None
        self.font_title: Optional[pygame.font.Font] = None

    # ------------------------------------------------------------------ #
    #  Input                                                               #
    # ------------------------------------------------------------------ #
    def _handle_event(self, event: pygame.event.Event) -> bool:
        """Translate one pygame event into input edges; False means quit."""
        if event.type == pygame.QUIT:
            return self.bridge.handle(InputEdge.QUIT)
        if event.type == pygame.WINDOWFOCUSLOST:
            # key-up events are not delivered while unfocused
            self.bridge.handle(InputEdge.LEFT_UP)
            self.bridge.handle(InputEdge.RIGHT_UP)
            self.bridge.set_paused(True)
            return True
        if event.type == pygame.KEYDOWN:
            edge = _KEY_DOWN_EDGES.get(event.key)
        elif event.type == pygame.KEYUP:
            edge = _KEY_UP_EDGES.get(event.key)
        else:
            edge = None
        if edge is None:
            return True
        return self.bridge.handle(edge)

    # ------------------------------------------------------------------ #
    #  Frame                                                               #
    # ------------------------------------------------------------------ #
    def render(self, surface: pygame.Surface, snap: GameSnapshot) -> None:
        self.draw_background(surface, snap)
        self.draw_road(surface)
        self.draw_lane_markers(surface, snap.markers)

        # traffic arrives ordered back to front
        for vehicle in snap.traffic:
            self.draw_civilian(surface, vehicle)
        self.draw_criminal(surface, snap.criminal)
        self.draw_police(surface, snap.police, snap.siren_on, snap.siren_blink)

        self.draw_hud(surface, snap)
        if snap.paused:
            self._draw_pause_banner(surface)
        if snap.ended:
            self._draw_game_over(surface, snap)

    # ------------------------------------------------------------------ #
    #  Main loop                                                           #
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption(config.WINDOW_TITLE)
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()
        self.font_small = self._load_font(13)
        self.font_medium = self._load_font(18)
        self.font_title = self._load_font(28, bold=True)
        log.info("window opened %dx%d @ %d fps", self.width, self.height, self.fps)

        was_finished = False
        while not self.bridge.quit_requested:
            delta_time = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if not self._handle_event(event):
                    break
            if self.bridge.quit_requested:
                break

            self.bridge.advance(delta_time)

            finished = self.bridge.is_finished()
            if finished and not was_finished:
                snap = self.bridge.snapshot()
                log.info("run ended: score=%d caught=%d", snap.score, snap.caught)
            was_finished = finished

            self.render(self.screen, self.bridge.snapshot())
            pygame.display.flip()

        pygame.quit()


# ---------------------------------------------------------------------- #
#  Convenience entry point                                                 #
# ---------------------------------------------------------------------- #
def run_pygame_view(
    bridge: SimBridge, width: int = 800, height: int = 600, fps: int = 60
) -> None:
    view = PygameHighwayView(bridge=bridge, width=width, height=height, fps=fps)
    view.run()


if __name__ == "__main__":
    raise SystemExit(
        "pygame_view.py needs a SimBridge. Run `python main.py play` "
        "or call run_pygame_view(SimBridge())."
    )
