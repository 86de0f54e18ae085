#!/usr/bin/env python3

from .types import ColorRGB, ColorRGBA, GridCamera, ButtonRect
from .constants import ViewConstants
from .helpers import ViewHelpers, light_border_segment, light_color, road_rects
from .draw_board import BoardRenderer
from .hud import HudRenderer
from .sound import PygameSoundPlayer
from .pygame_view import PygameBoardView, run_pygame_view

__all__ = [
    "ColorRGB",
    "ColorRGBA",
    "GridCamera",
    "ButtonRect",
    "ViewConstants",
    "ViewHelpers",
    "light_border_segment",
    "light_color",
    "road_rects",
    "BoardRenderer",
    "HudRenderer",
    "PygameSoundPlayer",
    "PygameBoardView",
    "run_pygame_view",
]
