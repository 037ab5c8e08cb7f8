"""
ui/helpers.py
=============
Pure utility functions shared across UI modules:
plotting rasterizer output into a surface, vertical gradients,
alpha-surface drawing, and text.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np
import pygame

from sim.raster import Point, round_half_away
from ui.types import ColorRGB, Viewport


# ── Pixel plotting ───────────────────────────────────────────────────────────

def plot_points(
    target: pygame.Surface,
    points: Sequence[Point],
    color: ColorRGB,
    viewport: Viewport,
) -> int:
    """Write world-space *points* into *target*, clipping to its bounds.

    Returns the number of pixels actually written.
    """
    if not points:
        return 0
    arr = np.asarray(points, dtype=np.int64).reshape(-1, 2)
    xs = arr[:, 0]
    ys = viewport.screen_h - arr[:, 1]
    w, h = target.get_size()
    mask = (xs >= 0) & (xs < w) & (ys >= 0) & (ys < h)
    if not mask.any():
        return 0
    pixels = pygame.surfarray.pixels3d(target)
    try:
        pixels[xs[mask], ys[mask]] = color[:3]
    finally:
        # releases the surface lock
        del pixels
    return int(mask.sum())


def thicken(points: Iterable[Point], dx: int = 1, dy: int = 0) -> list:
    """Duplicate every point shifted by ``(dx, dy)``; cheap 2-px strokes."""
    out = []
    for x, y in points:
        out.append((x, y))
        out.append((x + dx, y + dy))
    return out


# ── Fills ────────────────────────────────────────────────────────────────────

def fill_vertical_gradient(
    target: pygame.Surface,
    rect: pygame.Rect,
    top: ColorRGB,
    bottom: ColorRGB,
) -> None:
    """Fill *rect* with a top-to-bottom linear gradient (screen space)."""
    if rect.h <= 0 or rect.w <= 0:
        return
    t = np.linspace(0.0, 1.0, rect.h)[:, None]
    rows = (np.array(top, dtype=float) * (1.0 - t) + np.array(bottom, dtype=float) * t)
    column = rows.astype(np.uint8)
    strip = np.broadcast_to(column[None, :, :], (rect.w, rect.h, 3))
    surf = pygame.surfarray.make_surface(np.ascontiguousarray(strip))
    target.blit(surf, rect.topleft)


def draw_world_quad(
    target: pygame.Surface,
    color: ColorRGB,
    corners: Sequence[Tuple[float, float]],
    viewport: Viewport,
) -> None:
    """Filled polygon given in world coordinates."""
    pygame.draw.polygon(target, color, viewport.polygon(corners))


def draw_alpha_rect(
    target: pygame.Surface,
    color: Tuple[int, ...],
    rect: pygame.Rect,
    border_radius: int = 0,
) -> None:
    """Draw a semi-transparent rectangle (colour tuple with 4 channels)."""
    tmp = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    pygame.draw.rect(tmp, color, (0, 0, rect.w, rect.h), border_radius=border_radius)
    target.blit(tmp, rect.topleft)


# ── Text helper ──────────────────────────────────────────────────────────────

def render_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: Tuple[int, int],
    color: Tuple[int, ...] = (230, 230, 235),
    anchor: str = "topleft",
) -> pygame.Rect:
    """Render text with flexible *anchor* ('topleft', 'center', 'midright' …)."""
    img = font.render(text, True, color)
    rect = img.get_rect(**{anchor: pos})
    surface.blit(img, rect)
    return rect


class ViewHelpers:
    """Mixin binding the helpers above to the view's :class:`Viewport`."""

    viewport: Viewport

    def _plot(self, surface: pygame.Surface, points: Sequence[Point], color: ColorRGB) -> int:
        return plot_points(surface, points, color, self.viewport)

    def _quad(
        self,
        surface: pygame.Surface,
        color: ColorRGB,
        corners: Sequence[Tuple[float, float]],
    ) -> None:
        draw_world_quad(surface, color, corners, self.viewport)

    @staticmethod
    def _ri(value: float) -> int:
        # C-style roundf, shared with the rasterizer
        return round_half_away(value)

    def _load_font(self, size: int, bold: bool = False) -> pygame.font.Font:
        return pygame.font.SysFont("helvetica,arial", size, bold=bold)
