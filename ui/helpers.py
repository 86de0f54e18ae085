"""
ui/helpers.py
=============
Pure utility functions shared across UI modules:
traffic-light border geometry and colour, autotile road geometry,
alpha-surface drawing and text rendering.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pygame

from sim.direction import Direction
from sim.tiles import has_connection
from sim.traffic_light import TrafficLightKind
from ui.constants import COLOR_LIGHT_GREEN, COLOR_LIGHT_RED, COLOR_LIGHT_YELLOW
from ui.types import ColorRGB

Point = Tuple[int, int]
Rect = Tuple[int, int, int, int]

# ── Traffic lights ────────────────────────────────────────────────────────────

_LIGHT_COLORS: Dict[TrafficLightKind, ColorRGB] = {
    TrafficLightKind.GREEN: COLOR_LIGHT_GREEN,
    TrafficLightKind.YELLOW: COLOR_LIGHT_YELLOW,
    TrafficLightKind.RED: COLOR_LIGHT_RED,
}


def light_color(kind: TrafficLightKind) -> ColorRGB:
    return _LIGHT_COLORS[kind]


def light_border_segment(
    facing: Direction, x: int, y: int, size: int,
) -> Tuple[Point, Point]:
    """Edge of the tile square at ``(x, y)`` that a light facing *facing* occupies.

    UP → top edge, RIGHT → right edge, DOWN → bottom edge, LEFT → left edge.
    """
    right = x + size
    bottom = y + size
    if facing is Direction.UP:
        return (x, y), (right, y)
    if facing is Direction.RIGHT:
        return (right, y), (right, bottom)
    if facing is Direction.DOWN:
        return (x, bottom), (right, bottom)
    return (x, y), (x, bottom)


# ── Road autotiles ────────────────────────────────────────────────────────────

def road_rects(index: int, x: int, y: int, size: int, width_ratio: float) -> List[Rect]:
    """Rectangles that draw autotile variant *index* inside the tile at ``(x, y)``.

    A centre square of ``size * width_ratio`` plus one arm reaching the
    tile edge for every connected side.
    """
    road_w = max(1, int(size * width_ratio))
    inset = (size - road_w) // 2
    rects: List[Rect] = [(x + inset, y + inset, road_w, road_w)]
    if has_connection(index, Direction.UP):
        rects.append((x + inset, y, road_w, inset))
    if has_connection(index, Direction.DOWN):
        rects.append((x + inset, y + inset + road_w, road_w, size - inset - road_w))
    if has_connection(index, Direction.LEFT):
        rects.append((x, y + inset, inset, road_w))
    if has_connection(index, Direction.RIGHT):
        rects.append((x + inset + road_w, y + inset, size - inset - road_w, road_w))
    return rects


# ── Alpha drawing helpers ────────────────────────────────────────────────────

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
    """Mixin with font loading shared by the view and its renderers."""

    @staticmethod
    def _load_font(size: int, bold: bool = False) -> Optional[pygame.font.Font]:
        return pygame.font.SysFont("consolas,menlo,monospace", size, bold=bold)
