#!/usr/bin/env python3
"""Controls panel, score panel, pause banner and game-over screen (mixin)."""

from __future__ import annotations

import pygame

from sim.entities import GameSnapshot
from sim.raster import filled_circle
from ui.helpers import draw_alpha_rect, render_text


class HudRenderer:
    """Mixin that draws every overlay / HUD element."""

    # ------------------------------------------------------------------ #
    #  Side panels                                                         #
    # ------------------------------------------------------------------ #

    def draw_hud(self, surface: pygame.Surface, snap: GameSnapshot) -> None:
        if self.font_small is None or self.font_title is None:
            return

        # Controls (left)
        render_text(surface, self.font_medium, "CONTROLS", (10, 8), self.HUD_TEXT_COLOR)
        y = 34
        for line in self.CONTROL_LINES:
            render_text(surface, self.font_small, line, (10, y), self.HUD_DIM_COLOR)
            y += 18

        siren_rect = render_text(surface, self.font_small, "Siren:", (10, y + 6), self.HUD_DIM_COLOR)
        dot_color = self.SIREN_RED if snap.siren_on else (90, 90, 90)
        dot_x = siren_rect.right + 10
        dot_y = self.height - siren_rect.centery
        self._plot(surface, filled_circle(dot_x, dot_y, 5), dot_color)

        # Score (right)
        panel = pygame.Rect(self.width - 220, 6, 210, 78)
        draw_alpha_rect(surface, self.HUD_PANEL_RGBA, panel, border_radius=6)
        render_text(surface, self.font_medium, f"Score: {snap.score}",
                    (panel.x + 10, panel.y + 6), self.HUD_TEXT_COLOR)
        render_text(surface, self.font_small, f"Caught: {snap.caught}",
                    (panel.x + 10, panel.y + 32), self.HUD_DIM_COLOR)
        render_text(surface, self.font_small, f"Speed: {int(snap.game_speed * 100)}%",
                    (panel.x + 10, panel.y + 52), self.HUD_DIM_COLOR)

    # ------------------------------------------------------------------ #
    #  Pause banner                                                        #
    # ------------------------------------------------------------------ #

    def _draw_pause_banner(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill(self.OVERLAY_RGBA)
        surface.blit(overlay, (0, 0))
        cx, cy = self.width // 2, self.height // 2
        if self.font_title:
            render_text(surface, self.font_title, "PAUSED", (cx, cy), self.HUD_TEXT_COLOR, "center")
        if self.font_small:
            render_text(surface, self.font_small, "Press P to Resume", (cx, cy + 30),
                        self.HUD_DIM_COLOR, "center")

    # ------------------------------------------------------------------ #
    #  Game over                                                           #
    # ------------------------------------------------------------------ #

    def _draw_game_over(self, surface: pygame.Surface, snap: GameSnapshot) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill(self.OVERLAY_RGBA)
        surface.blit(overlay, (0, 0))
        if self.font_title is None or self.font_medium is None:
            return
        cx, cy = self.width // 2, self.height // 2
        render_text(surface, self.font_title, "GAME OVER!", (cx, cy - 50), self.GAME_OVER_COLOR, "center")
        render_text(surface, self.font_medium, f"Final Score: {snap.score}", (cx, cy - 15),
                    self.HUD_TEXT_COLOR, "center")
        render_text(surface, self.font_medium, f"Criminals Caught: {snap.caught}", (cx, cy + 10),
                    self.HUD_TEXT_COLOR, "center")
        render_text(surface, self.font_medium, "Press R to Restart", (cx, cy + 45),
                    self.HUD_DIM_COLOR, "center")
