#!/usr/bin/env python3
"""
sim/cell.py
===========
Grid coordinate arithmetic.

A :class:`Cell` is an ``(x, y)`` pair on an unbounded grid: ``x`` is the
column, ``y`` the row.  Stepping ``UP`` decreases ``y``, stepping
``RIGHT`` increases ``x``.  Bounds checking belongs to whoever owns the
grid (see :mod:`sim.board`).
"""

from __future__ import annotations

from typing import List, NamedTuple

from sim.direction import ALL, Direction

# Unit offset per direction; every adjacency query goes through this table.
_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_DIAGONAL_OFFSETS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


class Cell(NamedTuple):
    """A grid coordinate; compares equal to a plain ``(x, y)`` tuple."""
    x: int
    y: int

    def next(self, direction: Direction) -> "Cell":
        """The cell one step away in *direction*."""
        dx, dy = _OFFSETS[direction]
        return Cell(self.x + dx, self.y + dy)

    def diagonal_neighbors(self) -> List["Cell"]:
        """Corner neighbours: top-left, top-right, bottom-left, bottom-right."""
        return [Cell(self.x + dx, self.y + dy) for dx, dy in _DIAGONAL_OFFSETS]

    def parallel_neighbors(self) -> List["Cell"]:
        """Edge neighbours in :data:`sim.direction.ALL` order."""
        return [self.next(d) for d in ALL]

    def to_string(self) -> str:
        return f"({self.x:>3},{self.y:>3})"
