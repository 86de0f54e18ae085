#!/usr/bin/env python3
"""
Tests for the compass algebra in sim.direction.
"""

from __future__ import annotations

import unittest

from sim.direction import ALL, HORIZONTAL, ORIENTATIONS, VERTICAL, Direction


class DirectionTests(unittest.TestCase):
    def test_opposite_is_an_involution(self) -> None:
        for d in Direction:
            self.assertEqual(d.opposite().opposite(), d)
            self.assertNotEqual(d.opposite(), d)

    def test_next_rotates_clockwise(self) -> None:
        self.assertIs(Direction.UP.next(), Direction.RIGHT)
        self.assertIs(Direction.RIGHT.next(), Direction.DOWN)
        self.assertIs(Direction.DOWN.next(), Direction.LEFT)
        self.assertIs(Direction.LEFT.next(), Direction.UP)

    def test_next_and_previous_are_inverses(self) -> None:
        for d in Direction:
            self.assertIs(d.next().previous(), d)
            self.assertIs(d.previous().next(), d)

    def test_four_steps_return_to_start(self) -> None:
        for d in Direction:
            rotated = d
            for _ in range(4):
                rotated = rotated.next()
            self.assertIs(rotated, d)

    def test_two_steps_equal_opposite(self) -> None:
        for d in Direction:
            self.assertIs(d.next().next(), d.opposite())

    def test_cross_returns_perpendicular_axis(self) -> None:
        self.assertEqual(Direction.UP.cross(), (Direction.LEFT, Direction.RIGHT))
        self.assertEqual(Direction.DOWN.cross(), (Direction.LEFT, Direction.RIGHT))
        self.assertEqual(Direction.LEFT.cross(), (Direction.UP, Direction.DOWN))
        self.assertEqual(Direction.RIGHT.cross(), (Direction.UP, Direction.DOWN))

    def test_groupings(self) -> None:
        self.assertEqual(HORIZONTAL, (Direction.LEFT, Direction.RIGHT))
        self.assertEqual(VERTICAL, (Direction.UP, Direction.DOWN))
        self.assertEqual(ALL, (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT))
        self.assertEqual(ORIENTATIONS, (VERTICAL, HORIZONTAL))
        self.assertEqual(set(ALL), set(Direction))

    def test_rotation_degrees(self) -> None:
        self.assertEqual(Direction.UP.rotation_degrees, 0)
        self.assertEqual(Direction.RIGHT.rotation_degrees, 270)
        self.assertEqual(Direction.DOWN.rotation_degrees, 180)
        self.assertEqual(Direction.LEFT.rotation_degrees, 90)


if __name__ == "__main__":
    unittest.main()
