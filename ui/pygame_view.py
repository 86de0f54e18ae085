#!/usr/bin/env python3
"""
Main view class — combines all UI mixins into one runnable Pygame window.

Module layout
─────────────
    ui/
    ├── types.py           – ColorRGB, GridCamera, ButtonRect
    ├── constants.py       – palettes and the ViewConstants mixin
    ├── helpers.py         – light / road geometry and ViewHelpers mixin
    ├── draw_board.py      – BoardRenderer mixin (grid, roads, lots, lights)
    ├── hud.py             – HudRenderer mixin  (toolbar, legend, debug)
    ├── sound.py           – PygameSoundPlayer for audio.play events
    └── pygame_view.py     – PygameBoardView (this file – main loop)

Input is never applied to the simulation directly: every key press,
click, resize and focus change becomes an event published through the
bridge.
"""

from __future__ import annotations

import os
from datetime import datetime
from typing import Any, Dict, List, Optional

import pygame

import config
from bus.message import Topic

from .constants import ViewConstants
from .draw_board import BoardRenderer
from .helpers import ViewHelpers
from .hud import HudRenderer
from .sound import PygameSoundPlayer
from .types import ButtonRect, GridCamera


class PygameBoardView(
    ViewConstants,
    ViewHelpers,
    BoardRenderer,
    HudRenderer,
):
    """Grid traffic visualiser and road editor powered by Pygame."""

    def __init__(self, bridge: Any, width: int = 900, height: int = 700, fps: int = 60):
        self.bridge = bridge
        self.width = width
        self.height = height
        self.fps = fps

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font_small: Optional[pygame.font.Font] = None
        self.font_tiny: Optional[pygame.font.Font] = None
        self.font_title: Optional[pygame.font.Font] = None

        self.camera = GridCamera(
            tile_size=config.TILE_SIZE_PX, offset_x=0, offset_y=self.TOOLBAR_HEIGHT,
        )
        self.show_legend = True
        self._buttons: List[ButtonRect] = []
        self._tool_by_key: Dict[int, str] = {
            ord(key): tool for key, tool in self.TOOL_KEYS
        }

        root = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
        self.sound_player = PygameSoundPlayer(
            bridge.bus, os.path.join(root, config.SOUNDS_REL_PATH)
        )

    # ------------------------------------------------------------------ #
    #  Resize / visibility                                                 #
    # ------------------------------------------------------------------ #
    def _handle_resize(self, new_w: int, new_h: int) -> None:
        self.width = max(400, new_w)
        self.height = max(300, new_h)
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )
        self.bridge.publish(
            Topic.WINDOW_RESIZED, {"width": self.width, "height": self.height}
        )

    def _handle_visibility(self, visible: bool) -> None:
        self.bridge.publish(Topic.VISIBILITY_CHANGED, {"visible": visible})

    # ------------------------------------------------------------------ #
    #  Screenshot                                                          #
    # ------------------------------------------------------------------ #
    def _take_screenshot(self) -> None:
        if self.screen is None:
            return
        os.makedirs(self.SCREENSHOT_DIR, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(self.SCREENSHOT_DIR, f"board_{stamp}.png")
        pygame.image.save(self.screen, path)

    # ------------------------------------------------------------------ #
    #  Input → events                                                      #
    # ------------------------------------------------------------------ #
    def _handle_click(self, mx: int, my: int) -> None:
        for button in self._buttons:
            if button.contains(mx, my):
                self.bridge.publish(Topic.SELECT_TOOL, {"tool": button.label})
                return
        if my < self.TOOLBAR_HEIGHT:
            return
        cx, cy = self.camera.screen_to_cell(mx, my)
        self.bridge.publish(Topic.SELECT_TILE, {"x": cx, "y": cy})

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_SPACE:
            self.bridge.set_paused(not self.bridge.is_paused())
        elif key == pygame.K_F3:
            self.bridge.publish(Topic.TOGGLE_DEBUG)
        elif key == pygame.K_l:
            self.show_legend = not self.show_legend
        elif key == pygame.K_F12:
            self._take_screenshot()
        elif key in self._tool_by_key:
            self.bridge.publish(Topic.SELECT_TOOL, {"tool": self._tool_by_key[key]})

    # ------------------------------------------------------------------ #
    #  Main loop                                                           #
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("LIIKENNEMATTO")
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )
        self.clock = pygame.time.Clock()
        self.font_small = self._load_font(13, bold=False)
        self.font_tiny = self._load_font(11, bold=False)
        self.font_title = self._load_font(28, bold=True)

        running = True
        while running:
            delta_time = self.clock.tick(self.fps) / 1000.0

            # ---- events ------------------------------------------------- #
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self._handle_resize(event.w, event.h)
                elif event.type == pygame.WINDOWFOCUSLOST:
                    self._handle_visibility(False)
                elif event.type == pygame.WINDOWFOCUSGAINED:
                    self._handle_visibility(True)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(*event.pos)
                elif event.type == pygame.KEYDOWN:
                    self._handle_key(event.key)

            snapshot = self.bridge.get_snapshot()

            # ---- render ------------------------------------------------- #
            self.screen.fill(self.BG_COLOR)
            self.draw_board(self.screen, self.camera, snapshot)
            self._buttons = self.draw_toolbar(self.screen, snapshot)

            if self.show_legend:
                self._draw_legend(self.screen)
            if snapshot.get("debug"):
                self.draw_tile_indices(self.screen, self.camera, snapshot.get("roads", {}))
                self._draw_debug_overlay(self.screen, snapshot, delta_time)
            if snapshot.get("state") == "paused":
                self._draw_pause_banner(self.screen)

            pygame.display.flip()

        pygame.quit()


# ---------------------------------------------------------------------- #
#  Convenience entry point                                                 #
# ---------------------------------------------------------------------- #
def run_pygame_view(
    bridge: Any, width: int = 900, height: int = 700, fps: int = 60
) -> None:
    view = PygameBoardView(bridge=bridge, width=width, height=height, fps=fps)
    view.run()


if __name__ == "__main__":
    raise SystemExit(
        "pygame_view.py needs a bridge object. Run `python main.py` "
        "or call run_pygame_view(your_bridge)."
    )
