#!/usr/bin/env python3
"""
Tests for the pure geometry and colour helpers used by the renderers.
"""

from __future__ import annotations

import unittest

import pygame

from sim.direction import Direction
from sim.traffic_light import TrafficLightKind
from ui.constants import COLOR_LIGHT_GREEN, COLOR_LIGHT_RED, COLOR_LIGHT_YELLOW
from ui.helpers import (
    draw_alpha_rect,
    light_border_segment,
    light_color,
    render_text,
    road_rects,
)
from ui.types import ButtonRect, GridCamera


class LightHelperTests(unittest.TestCase):
    def test_border_segments(self) -> None:
        self.assertEqual(light_border_segment(Direction.UP, 10, 20, 8), ((10, 20), (18, 20)))
        self.assertEqual(light_border_segment(Direction.RIGHT, 10, 20, 8), ((18, 20), (18, 28)))
        self.assertEqual(light_border_segment(Direction.DOWN, 10, 20, 8), ((10, 28), (18, 28)))
        self.assertEqual(light_border_segment(Direction.LEFT, 10, 20, 8), ((10, 20), (10, 28)))

    def test_colors(self) -> None:
        self.assertEqual(light_color(TrafficLightKind.GREEN), COLOR_LIGHT_GREEN)
        self.assertEqual(light_color(TrafficLightKind.YELLOW), COLOR_LIGHT_YELLOW)
        self.assertEqual(light_color(TrafficLightKind.RED), COLOR_LIGHT_RED)


class RoadHelperTests(unittest.TestCase):
    def test_isolated_tile_is_centre_only(self) -> None:
        self.assertEqual(road_rects(0, 0, 0, 10, 0.6), [(2, 2, 6, 6)])

    def test_one_arm_per_connection(self) -> None:
        for index in range(16):
            self.assertEqual(len(road_rects(index, 0, 0, 10, 0.6)), 1 + bin(index).count("1"))

    def test_north_arm_reaches_top_edge(self) -> None:
        rects = road_rects(1, 0, 0, 10, 0.6)
        self.assertIn((2, 0, 6, 2), rects)


class _FixedWidthFont:
    """Stands in for a pygame font: 6 x 10 px per character."""

    def render(self, text, antialias, color):
        surface = pygame.Surface((6 * len(text), 10), pygame.SRCALPHA)
        surface.fill(color)
        return surface


class DrawingHelperTests(unittest.TestCase):
    def test_alpha_rect_blends_only_inside_rect(self) -> None:
        target = pygame.Surface((20, 20), pygame.SRCALPHA)
        target.fill((255, 255, 255, 255))
        draw_alpha_rect(target, (0, 0, 0, 100), pygame.Rect(5, 5, 10, 10))

        inside = target.get_at((10, 10))
        self.assertLess(inside.r, 255)
        self.assertGreater(inside.r, 0)
        self.assertEqual(tuple(target.get_at((2, 2))), (255, 255, 255, 255))

    def test_render_text_anchor(self) -> None:
        target = pygame.Surface((100, 40), pygame.SRCALPHA)
        rect = render_text(target, _FixedWidthFont(), "PAUSED", (50, 20), anchor="center")
        self.assertEqual(rect.size, (36, 10))
        self.assertEqual(rect.center, (50, 20))

        rect = render_text(target, _FixedWidthFont(), "TICK", (90, 5), anchor="midright")
        self.assertEqual(rect.right, 90)


class CameraTests(unittest.TestCase):
    def test_round_trip(self) -> None:
        cam = GridCamera(tile_size=32, offset_x=0, offset_y=36)
        sx, sy = cam.cell_to_screen(3, 2)
        self.assertEqual((sx, sy), (96, 100))
        self.assertEqual(cam.screen_to_cell(sx + 5, sy + 31), (3, 2))

    def test_button_contains(self) -> None:
        button = ButtonRect(label="road", x=10, y=5, w=20, h=10)
        self.assertTrue(button.contains(15, 10))
        self.assertFalse(button.contains(31, 10))


if __name__ == "__main__":
    unittest.main()
