#!/usr/bin/env python3
"""
sim/simulation.py
=================
Owner of the board and of every intersection's traffic lights.

:class:`Simulation` listens on the :class:`~bus.event_bus.EventBus`:

* ``UPDATE_ENVIRONMENT`` — advance every light group by one tick.
* ``SIMULATION_STATE`` / ``VISIBILITY_CHANGED`` — pause and resume.
* ``SELECT_TOOL`` / ``SELECT_TILE`` — edit the board with the active tool.
* ``TOGGLE_DEBUG`` — flip the debug flag shown by the view.

Board edits that change tiles are republished as ``TOPOLOGY_CHANGED``
and trigger a light resync: new intersections get fresh groups built
axis by axis, intersections that disappear lose theirs, and untouched
intersections keep their current phase.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Tuple

from bus.audio import AudioPort, Sound
from bus.event_bus import EventBus
from bus.message import Event, Topic
from bus.utils import cell_from_payload
from sim.board import Board, CellOccupiedError
from sim.catalog import BuildingKind
from sim.cell import Cell
from sim.direction import Direction
from sim.tiles import is_surrounded_by_empty_tiles
from sim.traffic_light import TrafficLights, advance_all, from_traffic_direction

log = logging.getLogger("simulation")

_SENDER = "simulation"


class SimulationState(Enum):
    RUNNING = "running"
    PAUSED = "paused"


class Tool(Enum):
    """Editing tool applied on tile selection."""
    NONE = "none"
    ROAD = "road"
    BULLDOZER = "bulldozer"
    LOT = "lot"


class Simulation:
    """Board, traffic lights and editor state for one running map.

    Parameters
    ----------
    bus : EventBus
        Bus to subscribe to and publish on.
    board : Board or None
        Initial board; an empty one when omitted.
    state : SimulationState
        Whether ticks advance the lights from the start.
    """

    def __init__(
        self,
        bus: EventBus,
        board: Optional[Board] = None,
        state: SimulationState = SimulationState.RUNNING,
    ) -> None:
        self.bus = bus
        self.board = board if board is not None else Board()
        self.audio = AudioPort(bus, sender=_SENDER)

        self.state = state
        self.tool = Tool.NONE
        self.building_kind = BuildingKind.RESIDENTIAL_A
        self.debug = False
        self.tick_count = 0

        self._state_before_hidden: Optional[SimulationState] = None
        self._lights: Dict[Cell, TrafficLights] = {}
        self._lock = threading.RLock()

        self.sync_traffic_lights()

        bus.subscribe(Topic.UPDATE_ENVIRONMENT, self._on_update_environment)
        bus.subscribe(Topic.SIMULATION_STATE, self._on_simulation_state)
        bus.subscribe(Topic.VISIBILITY_CHANGED, self._on_visibility_changed)
        bus.subscribe(Topic.SELECT_TOOL, self._on_select_tool)
        bus.subscribe(Topic.SELECT_TILE, self._on_select_tile)
        bus.subscribe(Topic.TOGGLE_DEBUG, self._on_toggle_debug)

    # ── ticking ───────────────────────────────────────────────────────────

    @property
    def running(self) -> bool:
        return self.state is SimulationState.RUNNING

    def tick(self) -> bool:
        """Advance every light group once; ``False`` while paused."""
        if not self.running:
            return False
        with self._lock:
            self._lights = {
                cell: advance_all(group) for cell, group in self._lights.items()
            }
            self.tick_count += 1
        return True

    # ── traffic lights ────────────────────────────────────────────────────

    def sync_traffic_lights(self) -> None:
        """Match light groups to the board's current intersections."""
        with self._lock:
            intersections = set(self.board.intersections())

            for cell in [c for c in self._lights if c not in intersections]:
                del self._lights[cell]
                log.info("lights_removed cell=%s", cell.to_string())

            for cell in intersections:
                group: TrafficLights = []
                for axis in self.board.axes_at(cell):
                    group.extend(from_traffic_direction(axis))

                current = self._lights.get(cell)
                if current is not None and _facings(current) == _facings(group):
                    continue
                self._lights[cell] = group
                log.info(
                    "lights_created cell=%s facings=%s",
                    cell.to_string(), [light.facing.name for light in group],
                )

    def lights_at(self, cell: Tuple[int, int]) -> TrafficLights:
        with self._lock:
            return list(self._lights.get(Cell(*cell), []))

    def is_green(self, cell: Tuple[int, int], facing: Direction) -> bool:
        """True if the light at *cell* facing *facing* shows green."""
        return any(
            light.facing is facing and light.is_green()
            for light in self.lights_at(cell)
        )

    # ── editing ───────────────────────────────────────────────────────────

    def apply_tool(self, cell: Tuple[int, int]) -> Set[Cell]:
        """Apply the active tool at *cell*; return cells whose tile changed."""
        cell = Cell(*cell)
        changed: Set[Cell] = set()
        sound: Optional[Sound] = None

        with self._lock:
            if self.tool is Tool.ROAD:
                try:
                    changed = self.board.place_road(cell)
                except CellOccupiedError as exc:
                    log.warning("road_rejected cell=%s reason=%s", cell.to_string(), exc)
                if changed:
                    index = self.board.tile_at(cell)
                    sound = (
                        Sound.BUILD_ROAD_START
                        if is_surrounded_by_empty_tiles(index)
                        else Sound.BUILD_ROAD_END
                    )
            elif self.tool is Tool.BULLDOZER:
                changed = self.board.remove_road(cell)
                if changed:
                    sound = Sound.DESTROY_ROAD
                else:
                    anchor = self.board.lot_at(cell)
                    if anchor is not None and self.board.remove_lot(anchor):
                        log.info("lot_removed anchor=%s", anchor.to_string())
                        sound = Sound.DESTROY_ROAD
            elif self.tool is Tool.LOT:
                try:
                    self.board.place_lot(cell, self.building_kind)
                    sound = Sound.BUILD_LOT
                except CellOccupiedError as exc:
                    log.warning("lot_rejected cell=%s reason=%s", cell.to_string(), exc)

            if changed:
                self.sync_traffic_lights()

        if changed:
            self.bus.publish(
                Topic.TOPOLOGY_CHANGED,
                _SENDER,
                {"cells": sorted([c.x, c.y] for c in changed)},
            )
        if sound is not None:
            self.audio.play(sound)
        return changed

    # ── bus handlers ──────────────────────────────────────────────────────

    def _on_update_environment(self, event: Event) -> None:
        self.tick()

    def _on_simulation_state(self, event: Event) -> None:
        try:
            self.state = SimulationState(event.payload.get("state"))
        except ValueError:
            log.warning("unknown_state payload=%r", event.payload)
            return
        log.info("state=%s", self.state.value)

    def _on_visibility_changed(self, event: Event) -> None:
        if not event.payload.get("visible", True):
            if self._state_before_hidden is None:
                self._state_before_hidden = self.state
            self.state = SimulationState.PAUSED
        elif self._state_before_hidden is not None:
            self.state = self._state_before_hidden
            self._state_before_hidden = None
        log.info("visibility=%s state=%s", event.payload.get("visible"), self.state.value)

    def _on_select_tool(self, event: Event) -> None:
        try:
            self.tool = Tool(event.payload.get("tool"))
        except ValueError:
            log.warning("unknown_tool payload=%r", event.payload)
            return
        building = event.payload.get("building")
        if building is not None:
            try:
                self.building_kind = BuildingKind(building)
            except ValueError:
                log.warning("unknown_building payload=%r", event.payload)

    def _on_select_tile(self, event: Event) -> None:
        cell = cell_from_payload(event.payload)
        if cell is None:
            log.warning("bad_tile_selection payload=%r", event.payload)
            return
        self.apply_tool(cell)

    def _on_toggle_debug(self, event: Event) -> None:
        self.debug = not self.debug

    # ── snapshot ──────────────────────────────────────────────────────────

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data copy of everything the view draws."""
        with self._lock:
            lights: List[Dict[str, Any]] = [
                {
                    "cell": (cell.x, cell.y),
                    "facing": light.facing.value,
                    "kind": light.kind.value,
                    "time_remaining": light.time_remaining,
                }
                for cell, group in sorted(self._lights.items())
                for light in group
            ]
            return {
                "tick": self.tick_count,
                "state": self.state.value,
                "tool": self.tool.value,
                "debug": self.debug,
                "roads": {(c.x, c.y): index for c, index in self.board.roads().items()},
                "intersections": [(c.x, c.y) for c in self.board.intersections()],
                "lots": {(a.x, a.y): kind.value for a, kind in self.board.lots().items()},
                "lights": lights,
            }


def _facings(group: TrafficLights) -> List[Direction]:
    return [light.facing for light in group]
