#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is a thin, import-safe leaf — it never imports from
other project packages.
"""

from typing import Tuple

# ── Simulation defaults ──────────────────────────────────────────────────────
DEFAULT_TICK_RATE_HZ: float = 1.0
DEFAULT_HEADLESS_TICKS: int = 0
"""When positive, run this many ticks without a window and exit."""

# A plus-shaped crossroads with a T-junction to its east.
DEFAULT_ROADS: Tuple[Tuple[int, int], ...] = (
    (5, 2), (5, 3), (5, 4), (5, 5), (5, 6), (5, 7), (5, 8),
    (2, 5), (3, 5), (4, 5), (6, 5), (7, 5), (8, 5), (9, 5), (10, 5), (11, 5),
    (9, 6), (9, 7), (9, 8),
)

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_FILE: str = "matto.log"
DEBUG_LOG_FILE: str = "simulation_debug.log"

# ── UI defaults ──────────────────────────────────────────────────────────────
WINDOW_WIDTH: int = 900
WINDOW_HEIGHT: int = 700
TARGET_FPS: int = 60
TILE_SIZE_PX: int = 48

# ── Assets (relative to project root) ────────────────────────────────────────
SOUNDS_REL_PATH: str = "assets/sounds"
