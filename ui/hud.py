#!/usr/bin/env python3
"""Toolbar, legend, debug overlay and pause banner (mixin)."""

from __future__ import annotations

from typing import Any, List, Mapping

import pygame

from .helpers import draw_alpha_rect, render_text
from .types import ButtonRect


class HudRenderer:
    """Mixin that draws every overlay / HUD element."""

    # ------------------------------------------------------------------ #
    #  Toolbar                                                             #
    # ------------------------------------------------------------------ #

    def draw_toolbar(self, surface: pygame.Surface, snapshot: Mapping[str, Any]) -> List[ButtonRect]:
        """Draw the tool buttons and return their rects for click tests."""
        buttons: List[ButtonRect] = []
        if self.font_small is None:
            return buttons

        bar = pygame.Rect(0, 0, self.width, self.TOOLBAR_HEIGHT)
        pygame.draw.rect(surface, self.HUD_BG_COLOR, bar)
        pygame.draw.line(surface, self.HUD_BORDER_COLOR, bar.bottomleft, bar.bottomright)

        x = 8
        active = snapshot.get("tool", "none")
        for key, tool in self.TOOL_KEYS:
            label = f"{key} {tool.upper()}"
            text_rect = render_text(
                surface, self.font_small, label, (x + 8, 9), self.HUD_TEXT_COLOR
            )
            w = text_rect.w + 16
            rect = pygame.Rect(x, 6, w, self.TOOLBAR_HEIGHT - 12)
            border = self.ACTIVE_TOOL_COLOR if tool == active else self.HUD_BORDER_COLOR
            pygame.draw.rect(surface, border, rect, width=1, border_radius=4)
            buttons.append(ButtonRect(label=tool, x=rect.x, y=rect.y, w=rect.w, h=rect.h))
            x += w + 6

        render_text(
            surface,
            self.font_small,
            f"TICK {snapshot.get('tick', 0)}   {str(snapshot.get('state', '')).upper()}",
            (self.width - 10, self.TOOLBAR_HEIGHT // 2),
            self.HUD_TEXT_COLOR,
            anchor="midright",
        )
        return buttons

    # ------------------------------------------------------------------ #
    #  Legend                                                               #
    # ------------------------------------------------------------------ #

    def _draw_legend(self, surface: pygame.Surface) -> None:
        if self.font_tiny is None:
            return
        x = self.width - 100
        y = self.height - 16 - len(self.LEGEND_ITEMS) * 18 - 8
        box_w, box_h = 92, len(self.LEGEND_ITEMS) * 18 + 10
        pygame.draw.rect(
            surface, self.HUD_BG_COLOR, (x - 6, y - 4, box_w, box_h), border_radius=4
        )
        pygame.draw.rect(
            surface, self.HUD_BORDER_COLOR, (x - 6, y - 4, box_w, box_h), width=1, border_radius=4
        )
        for label, color in self.LEGEND_ITEMS:
            pygame.draw.line(surface, color, (x, y + 6), (x + 10, y + 6), 4)
            render_text(surface, self.font_tiny, label, (x + 16, y), (200, 200, 200))
            y += 18

    # ------------------------------------------------------------------ #
    #  Debug / FPS overlay                                                 #
    # ------------------------------------------------------------------ #

    def _draw_debug_overlay(
        self, surface: pygame.Surface, snapshot: Mapping[str, Any], dt: float
    ) -> None:
        if self.font_tiny is None:
            return
        fps = self.clock.get_fps() if self.clock else 0.0
        metrics = snapshot.get("bus_metrics", {})
        lines = [
            f"FPS  {fps:.1f}",
            f"DT   {dt * 1000:.1f} ms",
            f"ROAD {len(snapshot.get('roads', {}))}",
            f"INT  {len(snapshot.get('intersections', []))}",
            f"LOTS {len(snapshot.get('lots', {}))}",
            f"BUS  {metrics.get('published', 0)}/{metrics.get('failed', 0)}",
            f"RES  {self.width}x{self.height}",
        ]
        x, y = 16, self.TOOLBAR_HEIGHT + 10
        for line in lines:
            render_text(surface, self.font_tiny, line, (x, y), self.DEBUG_TEXT_COLOR)
            y += 14

    # ------------------------------------------------------------------ #
    #  Pause banner                                                        #
    # ------------------------------------------------------------------ #

    def _draw_pause_banner(self, surface: pygame.Surface) -> None:
        draw_alpha_rect(surface, (0, 0, 0, 100), pygame.Rect(0, 0, self.width, self.height))
        if self.font_title:
            render_text(
                surface,
                self.font_title,
                "PAUSED",
                (self.width // 2, self.height // 2),
                (220, 220, 220),
                anchor="center",
            )
