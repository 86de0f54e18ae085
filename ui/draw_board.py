"""
ui/draw_board.py
================
Renders the grid board: grass and grid lines, autotiled roads, lots with
their driveways, and the traffic-light border segments of every
signalled intersection.

All methods are *pure renderers* — they read a simulation snapshot and
draw to a surface.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Tuple

import pygame

from sim.catalog import BuildingKind, spec_for
from sim.direction import Direction
from sim.tiles import is_intersection
from sim.traffic_light import TrafficLightKind
from ui.constants import BUILDING_COLORS
from ui.helpers import light_border_segment, light_color, road_rects
from ui.types import GridCamera


class BoardRenderer:
    """Mixin that draws the board layers from a snapshot dict."""

    def draw_board(
        self,
        surface: pygame.Surface,
        cam: GridCamera,
        snapshot: Mapping[str, Any],
    ) -> None:
        surface.fill(self.GRASS_COLOR)
        self._draw_grid(surface, cam)
        self._draw_lots(surface, cam, snapshot.get("lots", {}))
        self._draw_roads(surface, cam, snapshot.get("roads", {}))
        self._draw_lights(surface, cam, snapshot.get("lights", []))

    # ── grid ──────────────────────────────────────────────────────────────

    def _draw_grid(self, surface: pygame.Surface, cam: GridCamera) -> None:
        w, h = surface.get_size()
        step = cam.tile_size
        for gx in range(cam.offset_x % step, w, step):
            pygame.draw.line(surface, self.GRID_COLOR, (gx, 0), (gx, h))
        for gy in range(cam.offset_y % step, h, step):
            pygame.draw.line(surface, self.GRID_COLOR, (0, gy), (w, gy))

    # ── roads ─────────────────────────────────────────────────────────────

    def _draw_roads(
        self,
        surface: pygame.Surface,
        cam: GridCamera,
        roads: Mapping[Tuple[int, int], int],
    ) -> None:
        for (cx, cy), index in roads.items():
            x, y = cam.cell_to_screen(cx, cy)
            color = self.INTERSECTION_COLOR if is_intersection(index) else self.ROAD_COLOR
            for rect in road_rects(index, x, y, cam.tile_size, self.ROAD_WIDTH_RATIO):
                pygame.draw.rect(surface, color, rect)

    # ── lots ──────────────────────────────────────────────────────────────

    def _draw_lots(
        self,
        surface: pygame.Surface,
        cam: GridCamera,
        lots: Mapping[Tuple[int, int], str],
    ) -> None:
        size = cam.tile_size
        for (ax, ay), kind_value in lots.items():
            kind = BuildingKind(kind_value)
            spec = spec_for(kind)
            x, y = cam.cell_to_screen(ax, ay)
            rect = pygame.Rect(x + 2, y + 2, spec.width * size - 4, spec.height * size - 4)
            pygame.draw.rect(surface, BUILDING_COLORS[kind], rect, border_radius=4)

            # Driveway along the entry side
            start, end = {
                Direction.UP: (rect.topleft, rect.topright),
                Direction.DOWN: (rect.bottomleft, rect.bottomright),
                Direction.LEFT: (rect.topleft, rect.bottomleft),
                Direction.RIGHT: (rect.topright, rect.bottomright),
            }[spec.entry]
            pygame.draw.line(surface, self.DRIVEWAY_COLOR, start, end, 3)

    # ── traffic lights ────────────────────────────────────────────────────

    def _draw_lights(
        self,
        surface: pygame.Surface,
        cam: GridCamera,
        lights: Any,
    ) -> None:
        for light in lights:
            x, y = cam.cell_to_screen(*light["cell"])
            start, end = light_border_segment(
                Direction(light["facing"]), x, y, cam.tile_size,
            )
            color = light_color(TrafficLightKind(light["kind"]))
            pygame.draw.line(surface, color, start, end, self.LIGHT_THICKNESS_PX)

    def draw_tile_indices(
        self,
        surface: pygame.Surface,
        cam: GridCamera,
        roads: Dict[Tuple[int, int], int],
    ) -> None:
        """Debug layer: print the autotile index in every road cell."""
        if self.font_tiny is None:
            return
        for (cx, cy), index in roads.items():
            x, y = cam.cell_to_screen(cx, cy)
            text = self.font_tiny.render(str(index), True, self.DEBUG_TEXT_COLOR)
            surface.blit(text, (x + 3, y + 2))
