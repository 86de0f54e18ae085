"""
ui/types.py
===========
Lightweight data containers used across every UI module.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

ColorRGB = Tuple[int, int, int]
ColorRGBA = Tuple[int, int, int, int]


@dataclass
class GridCamera:
    """Viewport mapping grid cells to screen pixels."""
    tile_size: int
    offset_x: int = 0
    offset_y: int = 0

    def cell_to_screen(self, x: int, y: int) -> Tuple[int, int]:
        """Top-left pixel of cell ``(x, y)``."""
        return (
            self.offset_x + x * self.tile_size,
            self.offset_y + y * self.tile_size,
        )

    def screen_to_cell(self, sx: int, sy: int) -> Tuple[int, int]:
        return (
            (sx - self.offset_x) // self.tile_size,
            (sy - self.offset_y) // self.tile_size,
        )


@dataclass
class ButtonRect:
    """Stores a button's screen rect and label for click detection."""
    label: str
    x: int
    y: int
    w: int
    h: int

    def contains(self, mx: int, my: int) -> bool:
        return self.x <= mx <= self.x + self.w and self.y <= my <= self.y + self.h
