#!/usr/bin/env python3
"""
sim/collision.py
================
Axis-aligned bounding-box overlap.

Overlap is open-interval: two boxes sharing only an edge or a corner do
not collide.
"""

from __future__ import annotations

from typing import NamedTuple

from sim.cell import Cell


class BoundingBox(NamedTuple):
    """Box with top-left corner ``(x, y)`` and positive extent."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_cells(cls, anchor: Cell, width: int, height: int) -> "BoundingBox":
        """Box covering *width* × *height* cells starting at *anchor*."""
        return cls(float(anchor.x), float(anchor.y), float(width), float(height))


def aabb_overlap(a: BoundingBox, b: BoundingBox) -> bool:
    """True if the interiors of *a* and *b* intersect."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )
