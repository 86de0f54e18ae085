#!/usr/bin/env python3
"""
main.py
=======
Entry point: builds the default board, starts the tick driver and opens
the pygame view.

Environment overrides
---------------------
``MATTO_TICK_RATE_HZ``   ticks per second (float)
``MATTO_HEADLESS_TICKS`` run this many ticks without a window, then exit
``MATTO_LOG_LEVEL``      ``DEBUG`` / ``INFO`` / ``WARNING`` ...
``MATTO_WINDOW_WIDTH``   window width in pixels
``MATTO_WINDOW_HEIGHT``  window height in pixels
"""

import math
import os
import logging
from typing import Callable, TypeVar

import config
# Logging
from logging_setup import setup_logging
# Simulation
from sim.board import Board
from sim.sim_bridge import SimBridge

T = TypeVar("T")

log = logging.getLogger("main")


def _env(name: str, default: T, parse: Callable[[str], T]) -> T:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return parse(raw)
    except (TypeError, ValueError):
        log.warning("Ignoring %s=%r, using default %r", name, raw, default)
        return default


def _positive_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"expected a finite positive number, got {raw!r}")
    return value


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise ValueError(f"expected a positive integer, got {raw!r}")
    return value


def run_headless(bridge: SimBridge, ticks: int) -> None:
    """Advance *ticks* ticks synchronously and log the light states."""
    for _ in range(ticks):
        bridge.step()
        snapshot = bridge.get_snapshot()
        for light in snapshot["lights"]:
            log.info(
                "tick=%d cell=%s facing=%s kind=%s remaining=%d",
                snapshot["tick"], light["cell"], light["facing"],
                light["kind"], light["time_remaining"],
            )


def main() -> None:
    level_name = os.environ.get("MATTO_LOG_LEVEL", "INFO").upper()
    setup_logging(getattr(logging, level_name, logging.INFO))
    log.info("Starting liikennematto...")

    tick_rate = _env("MATTO_TICK_RATE_HZ", config.DEFAULT_TICK_RATE_HZ, _positive_float)
    headless_ticks = _env("MATTO_HEADLESS_TICKS", config.DEFAULT_HEADLESS_TICKS, int)
    width = _env("MATTO_WINDOW_WIDTH", config.WINDOW_WIDTH, _positive_int)
    height = _env("MATTO_WINDOW_HEIGHT", config.WINDOW_HEIGHT, _positive_int)

    bridge = SimBridge(tick_rate_hz=tick_rate, board=Board(roads=config.DEFAULT_ROADS))

    if headless_ticks > 0:
        run_headless(bridge, headless_ticks)
        return

    from ui import run_pygame_view

    bridge.start()
    try:
        run_pygame_view(bridge, width=width, height=height, fps=config.TARGET_FPS)
    except KeyboardInterrupt:
        log.info("Shutting down...")
    finally:
        bridge.stop()


if __name__ == "__main__":
    main()
