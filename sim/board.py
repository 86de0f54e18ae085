#!/usr/bin/env python3
"""
sim/board.py
============
Road and lot occupancy for the simulation grid.

The :class:`Board` keeps every road cell together with its autotile
index (see :mod:`sim.tiles`) and the anchor cell of every placed lot.
Placing or removing a road re-tiles the cell and its four edge
neighbours and returns the set of cells whose index changed, which is
what the simulation republishes as a topology change.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from sim.catalog import BuildingKind, spec_for
from sim.cell import Cell
from sim.collision import BoundingBox, aabb_overlap
from sim.direction import ORIENTATIONS, Direction
from sim.tiles import four_bit_bitmask, has_connection, is_intersection, neighbors_of

log = logging.getLogger(__name__)


class CellOccupiedError(ValueError):
    """Raised when a placement would overlap something already on the board."""


class Board:
    """Roads and lots on an unbounded grid.

    Parameters
    ----------
    roads : iterable of (x, y)
        Road cells placed in order at construction time.
    lots : mapping of (x, y) → BuildingKind
        Lots to place, keyed by their top-left anchor cell.
    """

    def __init__(
        self,
        roads: Iterable[Tuple[int, int]] = (),
        lots: Optional[Mapping[Tuple[int, int], BuildingKind]] = None,
    ) -> None:
        self._roads: Dict[Cell, int] = {}
        self._lots: Dict[Cell, BuildingKind] = {}
        for cell in roads:
            self.place_road(cell)
        for anchor, kind in (lots or {}).items():
            self.place_lot(anchor, kind)

    # ── roads ─────────────────────────────────────────────────────────────

    def place_road(self, cell: Tuple[int, int]) -> Set[Cell]:
        """Add a road at *cell*; return the cells whose tile changed."""
        cell = Cell(*cell)
        if cell in self._roads:
            return set()
        if self.lot_at(cell) is not None:
            raise CellOccupiedError(f"lot occupies {cell.to_string()}")

        self._roads[cell] = 0
        changed = {cell} | self._retile(cell.parallel_neighbors())
        self._roads[cell] = self._index_for(cell)
        log.debug("road_placed cell=%s changed=%d", cell.to_string(), len(changed))
        return changed

    def remove_road(self, cell: Tuple[int, int]) -> Set[Cell]:
        """Remove the road at *cell*; return the cells whose tile changed."""
        cell = Cell(*cell)
        if cell not in self._roads:
            return set()

        del self._roads[cell]
        changed = {cell} | self._retile(cell.parallel_neighbors())
        log.debug("road_removed cell=%s changed=%d", cell.to_string(), len(changed))
        return changed

    def tile_at(self, cell: Tuple[int, int]) -> Optional[int]:
        """Autotile index of the road at *cell*, or ``None`` if empty."""
        return self._roads.get(Cell(*cell))

    def has_road(self, cell: Tuple[int, int]) -> bool:
        return Cell(*cell) in self._roads

    def roads(self) -> Dict[Cell, int]:
        return dict(self._roads)

    def intersections(self) -> List[Cell]:
        """Road cells with three or more connections, in row-major order."""
        return sorted(
            (cell for cell, index in self._roads.items() if is_intersection(index)),
            key=lambda c: (c.y, c.x),
        )

    def axes_at(self, cell: Tuple[int, int]) -> List[Tuple[Direction, ...]]:
        """Connected directions at *cell*, grouped per axis.

        Each entry keeps axis order, so a crossroads gives
        ``[(UP, DOWN), (LEFT, RIGHT)]`` and a T-junction without a
        southern arm gives ``[(UP,), (LEFT, RIGHT)]``.
        """
        index = self.tile_at(cell)
        if index is None:
            return []
        axes: List[Tuple[Direction, ...]] = []
        for orientation in ORIENTATIONS:
            present = tuple(d for d in orientation if has_connection(index, d))
            if present:
                axes.append(present)
        return axes

    def _index_for(self, cell: Cell) -> int:
        return four_bit_bitmask(neighbors_of(cell, self._roads.keys()))

    def _retile(self, cells: Iterable[Cell]) -> Set[Cell]:
        changed: Set[Cell] = set()
        for cell in cells:
            if cell not in self._roads:
                continue
            index = self._index_for(cell)
            if index != self._roads[cell]:
                self._roads[cell] = index
                changed.add(cell)
        return changed

    # ── lots ──────────────────────────────────────────────────────────────

    def place_lot(self, anchor: Tuple[int, int], kind: BuildingKind) -> None:
        """Place a lot with its top-left corner at *anchor*.

        Raises :class:`CellOccupiedError` if the footprint overlaps a
        road or another lot.  Lots may share edges.
        """
        anchor = Cell(*anchor)
        box = self._lot_box(anchor, kind)

        for other_anchor, other_kind in self._lots.items():
            if aabb_overlap(box, self._lot_box(other_anchor, other_kind)):
                raise CellOccupiedError(
                    f"lot at {anchor.to_string()} overlaps lot at {other_anchor.to_string()}"
                )
        for road in self._roads:
            if aabb_overlap(box, BoundingBox.from_cells(road, 1, 1)):
                raise CellOccupiedError(
                    f"lot at {anchor.to_string()} covers road at {road.to_string()}"
                )

        self._lots[anchor] = kind
        log.debug("lot_placed anchor=%s kind=%s", anchor.to_string(), kind.value)

    def remove_lot(self, anchor: Tuple[int, int]) -> bool:
        """Remove the lot anchored at *anchor*; ``False`` if there was none."""
        return self._lots.pop(Cell(*anchor), None) is not None

    def lot_at(self, cell: Tuple[int, int]) -> Optional[Cell]:
        """Anchor of the lot covering *cell*, if any."""
        probe = BoundingBox.from_cells(Cell(*cell), 1, 1)
        for anchor, kind in self._lots.items():
            if aabb_overlap(probe, self._lot_box(anchor, kind)):
                return anchor
        return None

    def lots(self) -> Dict[Cell, BuildingKind]:
        return dict(self._lots)

    def lot_entry(self, anchor: Tuple[int, int]) -> Cell:
        """Cell just outside the lot on its entry side."""
        anchor = Cell(*anchor)
        spec = spec_for(self._lots[anchor])
        if spec.entry is Direction.UP:
            return Cell(anchor.x, anchor.y - 1)
        if spec.entry is Direction.DOWN:
            return Cell(anchor.x, anchor.y + spec.height)
        if spec.entry is Direction.LEFT:
            return Cell(anchor.x - 1, anchor.y)
        return Cell(anchor.x + spec.width, anchor.y)

    def has_road_access(self, anchor: Tuple[int, int]) -> bool:
        return self.has_road(self.lot_entry(anchor))

    @staticmethod
    def _lot_box(anchor: Cell, kind: BuildingKind) -> BoundingBox:
        spec = spec_for(kind)
        return BoundingBox.from_cells(anchor, spec.width, spec.height)
