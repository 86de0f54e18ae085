#!/usr/bin/env python3
"""
sim/direction.py
================
Compass algebra over the four grid directions.

``UP`` points towards decreasing row index, ``RIGHT`` towards increasing
column index.  Module-level tuples group the directions by axis:

* :data:`VERTICAL`    — ``(UP, DOWN)``
* :data:`HORIZONTAL`  — ``(LEFT, RIGHT)``
* :data:`ALL`         — vertical first, then horizontal
* :data:`ORIENTATIONS` — both axis groupings
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """One of the four grid directions."""
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    def opposite(self) -> "Direction":
        """180° reflection."""
        return _OPPOSITE[self]

    def next(self) -> "Direction":
        """Clockwise rotation by one step."""
        return _CLOCKWISE[self]

    def previous(self) -> "Direction":
        """Counter-clockwise rotation by one step."""
        return _COUNTER_CLOCKWISE[self]

    def cross(self) -> Tuple["Direction", ...]:
        """Directions perpendicular to this one."""
        if self in VERTICAL:
            return HORIZONTAL
        return VERTICAL

    @property
    def rotation_degrees(self) -> int:
        """Sprite rotation for this facing (UP = 0, counter-clockwise)."""
        return _ROTATION[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}

_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}

_COUNTER_CLOCKWISE = {after: before for before, after in _CLOCKWISE.items()}

_ROTATION = {
    Direction.UP: 0,
    Direction.RIGHT: 270,
    Direction.DOWN: 180,
    Direction.LEFT: 90,
}

# ── Axis groupings ────────────────────────────────────────────────────────────

HORIZONTAL: Tuple[Direction, ...] = (Direction.LEFT, Direction.RIGHT)
VERTICAL: Tuple[Direction, ...] = (Direction.UP, Direction.DOWN)
ALL: Tuple[Direction, ...] = VERTICAL + HORIZONTAL
ORIENTATIONS: Tuple[Tuple[Direction, ...], ...] = (VERTICAL, HORIZONTAL)
