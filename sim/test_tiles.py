#!/usr/bin/env python3
"""
Tests for the four-bit autotile encoding in sim.tiles.
"""

from __future__ import annotations

import itertools
import unittest

from sim.cell import Cell
from sim.direction import Direction
from sim.tiles import (
    TILE_VARIANT_COUNT,
    OrthogonalNeighbors,
    connection_count,
    four_bit_bitmask,
    has_connection,
    is_intersection,
    is_surrounded_by_empty_tiles,
    neighbors_of,
)


class BitmaskTests(unittest.TestCase):
    def test_all_combinations_are_weighted_and_unique(self) -> None:
        seen = set()
        for north, west, east, south in itertools.product((False, True), repeat=4):
            value = four_bit_bitmask(OrthogonalNeighbors(north, west, east, south))
            self.assertEqual(value, north * 1 + west * 2 + east * 4 + south * 8)
            self.assertTrue(0 <= value < TILE_VARIANT_COUNT)
            self.assertEqual(is_surrounded_by_empty_tiles(value), value == 0)
            seen.add(value)
        self.assertEqual(seen, set(range(TILE_VARIANT_COUNT)))

    def test_north_and_east(self) -> None:
        neighbors = OrthogonalNeighbors(north=True, west=False, east=True, south=False)
        self.assertEqual(four_bit_bitmask(neighbors), 5)

    def test_neighbors_of_reads_occupied_cells(self) -> None:
        occupied = {Cell(1, 0), Cell(2, 1)}
        neighbors = neighbors_of(Cell(1, 1), occupied)
        self.assertEqual(
            neighbors,
            OrthogonalNeighbors(north=True, west=False, east=True, south=False),
        )

    def test_connections(self) -> None:
        self.assertEqual(connection_count(0), 0)
        self.assertEqual(connection_count(15), 4)
        self.assertFalse(is_intersection(9))   # straight north-south
        self.assertTrue(is_intersection(14))   # west, east, south
        self.assertTrue(is_intersection(15))
        self.assertTrue(has_connection(1, Direction.UP))
        self.assertTrue(has_connection(8, Direction.DOWN))
        self.assertFalse(has_connection(6, Direction.UP))


if __name__ == "__main__":
    unittest.main()
