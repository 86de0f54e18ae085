#!/usr/bin/env python3
"""
Tests for board autotiling, intersection detection and lot placement.
"""

from __future__ import annotations

import unittest

from sim.board import Board, CellOccupiedError
from sim.catalog import BUILDINGS, BuildingKind, spec_for
from sim.cell import Cell
from sim.direction import Direction

# Crossroads at (1, 1) with arms of length one.
_PLUS = [(1, 0), (0, 1), (1, 1), (2, 1), (1, 2)]


class BoardRoadTests(unittest.TestCase):
    def test_lone_road_is_isolated(self) -> None:
        board = Board()
        changed = board.place_road((4, 4))
        self.assertEqual(changed, {Cell(4, 4)})
        self.assertEqual(board.tile_at((4, 4)), 0)

    def test_adjacent_roads_retile_each_other(self) -> None:
        board = Board(roads=[(0, 0)])
        changed = board.place_road((1, 0))
        self.assertEqual(changed, {Cell(0, 0), Cell(1, 0)})
        self.assertEqual(board.tile_at((0, 0)), 4)  # east neighbour
        self.assertEqual(board.tile_at((1, 0)), 2)  # west neighbour

    def test_crossroads_indices(self) -> None:
        board = Board(roads=_PLUS)
        self.assertEqual(board.tile_at((1, 1)), 15)
        self.assertEqual(board.tile_at((1, 0)), 8)
        self.assertEqual(board.tile_at((0, 1)), 4)
        self.assertEqual(board.tile_at((2, 1)), 2)
        self.assertEqual(board.tile_at((1, 2)), 1)
        self.assertEqual(board.intersections(), [Cell(1, 1)])

    def test_placing_existing_road_changes_nothing(self) -> None:
        board = Board(roads=_PLUS)
        self.assertEqual(board.place_road((1, 1)), set())

    def test_remove_road_retiles_neighbours(self) -> None:
        board = Board(roads=_PLUS)
        changed = board.remove_road((1, 2))
        self.assertEqual(changed, {Cell(1, 2), Cell(1, 1)})
        self.assertIsNone(board.tile_at((1, 2)))
        self.assertEqual(board.tile_at((1, 1)), 7)
        self.assertEqual(board.remove_road((9, 9)), set())

    def test_axes_at(self) -> None:
        board = Board(roads=_PLUS)
        self.assertEqual(
            board.axes_at((1, 1)),
            [(Direction.UP, Direction.DOWN), (Direction.LEFT, Direction.RIGHT)],
        )
        board.remove_road((1, 2))
        self.assertEqual(
            board.axes_at((1, 1)),
            [(Direction.UP,), (Direction.LEFT, Direction.RIGHT)],
        )
        self.assertEqual(board.axes_at((5, 5)), [])


class BoardLotTests(unittest.TestCase):
    def test_catalog_is_complete(self) -> None:
        for kind in BuildingKind:
            spec = spec_for(kind)
            self.assertGreater(spec.width, 0)
            self.assertGreater(spec.height, 0)
        self.assertEqual(set(BUILDINGS), set(BuildingKind))

    def test_lots_may_share_edges(self) -> None:
        board = Board()
        board.place_lot((0, 0), BuildingKind.COMMERCIAL)
        board.place_lot((2, 0), BuildingKind.COMMERCIAL)
        self.assertEqual(len(board.lots()), 2)

    def test_overlapping_lot_is_rejected(self) -> None:
        board = Board()
        board.place_lot((0, 0), BuildingKind.COMMERCIAL)
        with self.assertRaises(CellOccupiedError):
            board.place_lot((1, 1), BuildingKind.RESIDENTIAL_A)

    def test_lot_cannot_cover_road(self) -> None:
        board = Board(roads=[(1, 1)])
        with self.assertRaises(CellOccupiedError):
            board.place_lot((0, 0), BuildingKind.COMMERCIAL)

    def test_road_cannot_be_built_on_lot(self) -> None:
        board = Board(lots={(0, 0): BuildingKind.COMMERCIAL})
        with self.assertRaises(CellOccupiedError):
            board.place_road((1, 1))
        self.assertEqual(board.lot_at((1, 1)), Cell(0, 0))
        self.assertIsNone(board.lot_at((2, 2)))

    def test_entry_and_road_access(self) -> None:
        board = Board(
            roads=[(0, 2), (1, 2)],
            lots={(0, 0): BuildingKind.COMMERCIAL},
        )
        self.assertEqual(board.lot_entry((0, 0)), Cell(0, 2))
        self.assertTrue(board.has_road_access((0, 0)))

    def test_remove_lot(self) -> None:
        board = Board(lots={(3, 3): BuildingKind.PARK})
        self.assertTrue(board.remove_lot((3, 3)))
        self.assertFalse(board.remove_lot((3, 3)))


if __name__ == "__main__":
    unittest.main()
