#!/usr/bin/env python3
"""
Tests for the simulation owner: ticking, light resync and bus-driven editing.
"""

from __future__ import annotations

import unittest

from bus.event_bus import EventBus
from bus.message import Topic
from sim.board import Board
from sim.catalog import BuildingKind
from sim.cell import Cell
from sim.direction import Direction
from sim.simulation import Simulation, SimulationState, Tool
from sim.traffic_light import TrafficLightKind

# Crossroads at (1, 1).
_PLUS = [(1, 0), (0, 1), (1, 1), (2, 1), (1, 2)]


class SimulationLightTests(unittest.TestCase):
    def setUp(self) -> None:
        self.bus = EventBus()
        self.sim = Simulation(self.bus, board=Board(roads=_PLUS))

    def test_crossroads_gets_both_axes(self) -> None:
        lights = self.sim.lights_at((1, 1))
        self.assertEqual(
            [(l.facing, l.kind) for l in lights],
            [
                (Direction.UP, TrafficLightKind.GREEN),
                (Direction.DOWN, TrafficLightKind.GREEN),
                (Direction.LEFT, TrafficLightKind.RED),
                (Direction.RIGHT, TrafficLightKind.RED),
            ],
        )
        self.assertTrue(self.sim.is_green((1, 1), Direction.UP))
        self.assertFalse(self.sim.is_green((1, 1), Direction.LEFT))
        self.assertFalse(self.sim.is_green((1, 0), Direction.UP))

    def test_update_environment_advances_lights(self) -> None:
        for _ in range(7):
            self.bus.publish(Topic.UPDATE_ENVIRONMENT, "test")
        self.assertEqual(self.sim.tick_count, 7)
        self.assertFalse(self.sim.is_green((1, 1), Direction.UP))
        self.assertTrue(self.sim.is_green((1, 1), Direction.RIGHT))

    def test_paused_simulation_does_not_tick(self) -> None:
        self.bus.publish(Topic.SIMULATION_STATE, "test", {"state": "paused"})
        self.assertFalse(self.sim.tick())
        self.assertEqual(self.sim.lights_at((1, 1))[0].time_remaining, 6)

        self.bus.publish(Topic.SIMULATION_STATE, "test", {"state": "running"})
        self.assertTrue(self.sim.tick())
        self.assertEqual(self.sim.lights_at((1, 1))[0].time_remaining, 5)

    def test_unknown_state_is_ignored(self) -> None:
        self.bus.publish(Topic.SIMULATION_STATE, "test", {"state": "sideways"})
        self.assertIs(self.sim.state, SimulationState.RUNNING)
        self.assertEqual(self.bus.metrics.failed, 0)

    def test_hidden_window_pauses_and_restores(self) -> None:
        self.bus.publish(Topic.VISIBILITY_CHANGED, "test", {"visible": False})
        self.assertIs(self.sim.state, SimulationState.PAUSED)
        self.bus.publish(Topic.VISIBILITY_CHANGED, "test", {"visible": True})
        self.assertIs(self.sim.state, SimulationState.RUNNING)

    def test_hidden_window_keeps_user_pause(self) -> None:
        self.sim.state = SimulationState.PAUSED
        self.bus.publish(Topic.VISIBILITY_CHANGED, "test", {"visible": False})
        self.bus.publish(Topic.VISIBILITY_CHANGED, "test", {"visible": True})
        self.assertIs(self.sim.state, SimulationState.PAUSED)

    def test_toggle_debug(self) -> None:
        self.bus.publish(Topic.TOGGLE_DEBUG, "test")
        self.assertTrue(self.sim.debug)
        self.bus.publish(Topic.TOGGLE_DEBUG, "test")
        self.assertFalse(self.sim.debug)


class SimulationEditingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.bus = EventBus()
        self.sim = Simulation(self.bus, board=Board(roads=[(1, 0), (0, 1), (1, 1), (2, 1)]))

    def _select(self, tool: str, x: int, y: int, **extra) -> None:
        self.bus.publish(Topic.SELECT_TOOL, "test", {"tool": tool, **extra})
        self.bus.publish(Topic.SELECT_TILE, "test", {"x": x, "y": y})

    def test_t_junction_only_lights_full_axis(self) -> None:
        lights = self.sim.lights_at((1, 1))
        self.assertEqual(
            [(l.facing, l.kind, l.time_remaining) for l in lights],
            [
                (Direction.LEFT, TrafficLightKind.RED, 3),
                (Direction.RIGHT, TrafficLightKind.RED, 3),
            ],
        )

    def test_completing_crossroads_rebuilds_group(self) -> None:
        self._select("road", 1, 2)
        self.assertEqual(len(self.sim.lights_at((1, 1))), 4)
        topology = self.bus.poll(Topic.TOPOLOGY_CHANGED)
        self.assertEqual(len(topology), 1)
        self.assertEqual(topology[0].payload["cells"], [[1, 1], [1, 2]])
        sounds = [e.payload["sound"] for e in self.bus.poll(Topic.PLAY_SOUND)]
        self.assertEqual(sounds, ["buildRoadEnd"])

    def test_unrelated_edit_keeps_phase(self) -> None:
        self.sim.tick()
        self.sim.tick()
        self._select("road", 5, 5)
        self.assertEqual(self.sim.lights_at((1, 1))[0].time_remaining, 1)
        sounds = [e.payload["sound"] for e in self.bus.poll(Topic.PLAY_SOUND)]
        self.assertEqual(sounds, ["buildRoadStart"])

    def test_bulldozer_removes_intersection_lights(self) -> None:
        self._select("bulldozer", 0, 1)
        self.assertEqual(self.sim.lights_at((1, 1)), [])
        self.assertIsNone(self.sim.board.tile_at((0, 1)))
        sounds = [e.payload["sound"] for e in self.bus.poll(Topic.PLAY_SOUND)]
        self.assertEqual(sounds, ["destroyRoad"])

    def test_no_tool_changes_nothing(self) -> None:
        self._select("none", 5, 5)
        self.assertIsNone(self.sim.board.tile_at((5, 5)))
        self.assertEqual(self.bus.poll(Topic.TOPOLOGY_CHANGED), [])

    def test_lot_tool_places_selected_building(self) -> None:
        self._select("lot", 4, 4, building="park")
        self.assertIs(self.sim.tool, Tool.LOT)
        self.assertEqual(self.sim.board.lots(), {Cell(4, 4): BuildingKind.PARK})
        sounds = [e.payload["sound"] for e in self.bus.poll(Topic.PLAY_SOUND)]
        self.assertEqual(sounds, ["buildLot"])

    def test_bulldozer_removes_lot(self) -> None:
        self.sim.board.place_lot((4, 4), BuildingKind.COMMERCIAL)
        self._select("bulldozer", 5, 5)
        self.assertEqual(self.sim.board.lots(), {})

    def test_road_on_lot_is_rejected_quietly(self) -> None:
        self.sim.board.place_lot((4, 4), BuildingKind.RESIDENTIAL_A)
        self._select("road", 4, 4)
        self.assertIsNone(self.sim.board.tile_at((4, 4)))
        self.assertEqual(self.bus.poll(Topic.PLAY_SOUND), [])
        self.assertEqual(self.bus.metrics.failed, 0)

    def test_malformed_tile_selection_is_ignored(self) -> None:
        self.bus.publish(Topic.SELECT_TOOL, "test", {"tool": "road"})
        self.bus.publish(Topic.SELECT_TILE, "test", {"x": "left"})
        self.assertEqual(self.bus.poll(Topic.TOPOLOGY_CHANGED), [])

    def test_snapshot_is_plain_data(self) -> None:
        snapshot = self.sim.snapshot()
        self.assertEqual(snapshot["intersections"], [(1, 1)])
        self.assertEqual(snapshot["roads"][(1, 1)], 2 + 4 + 1)
        self.assertEqual(
            [light["facing"] for light in snapshot["lights"]], ["left", "right"]
        )
        self.assertEqual(snapshot["state"], "running")


if __name__ == "__main__":
    unittest.main()
