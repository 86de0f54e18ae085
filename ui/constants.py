#!/usr/bin/env python3
"""Visual constants shared across all renderers."""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from sim.catalog import BuildingKind

from .types import ColorRGB

# ── Traffic-light palette ─────────────────────────────────────────────────────
COLOR_LIGHT_GREEN: ColorRGB = (0, 200, 83)
COLOR_LIGHT_YELLOW: ColorRGB = (255, 196, 0)
COLOR_LIGHT_RED: ColorRGB = (230, 40, 40)

# ── Building palette ──────────────────────────────────────────────────────────
BUILDING_COLORS: Dict[BuildingKind, ColorRGB] = {
    BuildingKind.RESIDENTIAL_A: (255, 153, 102),
    BuildingKind.RESIDENTIAL_B: (255, 204, 102),
    BuildingKind.RESIDENTIAL_C: (102, 178, 255),
    BuildingKind.RESIDENTIAL_D: (204, 153, 255),
    BuildingKind.RESIDENTIAL_E: (255, 120, 140),
    BuildingKind.COMMERCIAL: (120, 144, 156),
    BuildingKind.PARK: (76, 175, 80),
}


class ViewConstants:
    """Mixin providing every visual / layout constant."""

    BG_COLOR: ColorRGB = (15, 15, 15)
    GRASS_COLOR: ColorRGB = (33, 66, 38)
    GRID_COLOR: ColorRGB = (44, 80, 50)
    ROAD_COLOR: ColorRGB = (52, 52, 56)
    ROAD_EDGE_COLOR: ColorRGB = (70, 70, 74)
    INTERSECTION_COLOR: ColorRGB = (62, 62, 66)
    DRIVEWAY_COLOR: ColorRGB = (90, 90, 90)
    HUD_BG_COLOR: ColorRGB = (22, 22, 22)
    HUD_BORDER_COLOR: ColorRGB = (42, 42, 42)
    HUD_TEXT_COLOR: ColorRGB = (200, 200, 200)
    ACTIVE_TOOL_COLOR: ColorRGB = (0, 255, 127)
    DEBUG_TEXT_COLOR: ColorRGB = (0, 255, 127)

    ROAD_WIDTH_RATIO = 0.6
    LIGHT_THICKNESS_PX = 4
    TOOLBAR_HEIGHT = 36

    TOOL_KEYS: Sequence[Tuple[str, str]] = (
        ("1", "road"),
        ("2", "bulldozer"),
        ("3", "lot"),
        ("0", "none"),
    )

    LEGEND_ITEMS: Sequence[Tuple[str, ColorRGB]] = (
        ("GREEN", COLOR_LIGHT_GREEN),
        ("YELLOW", COLOR_LIGHT_YELLOW),
        ("RED", COLOR_LIGHT_RED),
    )

    SCREENSHOT_DIR = "screenshots"
