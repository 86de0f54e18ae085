#!/usr/bin/env python3
"""
sim/tiles.py
============
Neighbour-presence encoding for road autotiling.

Each road tile picks one of 16 sprite variants from which of its four
edge neighbours are also roads.  The index is a weighted sum:

    north = 1, west = 2, east = 4, south = 8

The weights are a fixed contract with the tile art, not compass order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet

from sim.cell import Cell
from sim.direction import Direction

_NORTH = 1
_WEST = 2
_EAST = 4
_SOUTH = 8

TILE_VARIANT_COUNT = 16


@dataclass(frozen=True)
class OrthogonalNeighbors:
    """Which of the four edge neighbours are occupied."""
    north: bool
    west: bool
    east: bool
    south: bool


def four_bit_bitmask(neighbors: OrthogonalNeighbors) -> int:
    """Tile variant index in ``[0, 15]``."""
    return (
        _NORTH * neighbors.north
        + _WEST * neighbors.west
        + _EAST * neighbors.east
        + _SOUTH * neighbors.south
    )


def is_surrounded_by_empty_tiles(bitmask: int) -> bool:
    return bitmask == 0


def neighbors_of(cell: Cell, occupied: AbstractSet[Cell]) -> OrthogonalNeighbors:
    """Build the presence record for *cell* from a set of occupied cells."""
    return OrthogonalNeighbors(
        north=cell.next(Direction.UP) in occupied,
        west=cell.next(Direction.LEFT) in occupied,
        east=cell.next(Direction.RIGHT) in occupied,
        south=cell.next(Direction.DOWN) in occupied,
    )


def connection_count(bitmask: int) -> int:
    """Number of occupied neighbour slots encoded in *bitmask*."""
    return bin(bitmask & 0b1111).count("1")


def is_intersection(bitmask: int) -> bool:
    """True for T-junctions and crossroads (three or more connections)."""
    return connection_count(bitmask) >= 3


def has_connection(bitmask: int, direction: Direction) -> bool:
    """True if the slot facing *direction* is set in *bitmask*."""
    return bool(bitmask & _WEIGHT_FOR_DIRECTION[direction])


_WEIGHT_FOR_DIRECTION = {
    Direction.UP: _NORTH,
    Direction.LEFT: _WEST,
    Direction.RIGHT: _EAST,
    Direction.DOWN: _SOUTH,
}
