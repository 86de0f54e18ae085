"""
sim/sim_bridge.py
=================
Background-thread tick source tying :mod:`sim.simulation` and the
:class:`bus.event_bus.EventBus` together.  The UI polls the bridge for
the latest snapshot without blocking.

Public API consumed by :mod:`ui.pygame_view`
--------------------------------------------
* ``get_snapshot()``          → ``dict``
* ``publish(topic, payload)`` → ``str``
* ``set_paused(bool)``        → ``None``
* ``step()``                  → ``None``
"""

from __future__ import annotations

import logging
import math
import threading
import time
from typing import Any, Dict, Optional

from bus.event_bus import EventBus
from bus.message import Topic
from sim.board import Board
from sim.simulation import Simulation, SimulationState

log = logging.getLogger("sim_bridge")

_SENDER = "ticker"


class SimBridge:
    """Simulation tick driver running in a background thread.

    The thread publishes ``UPDATE_ENVIRONMENT`` at ``tick_rate_hz``;
    the :class:`~sim.simulation.Simulation` subscribed to the bus
    advances its lights in response.

    Parameters
    ----------
    tick_rate_hz : float
        Simulation ticks per second.
    board : Board or None
        Initial board handed to the simulation.
    bus : EventBus or None
        Shared bus; a private one is created when omitted.
    """

    def __init__(
        self,
        tick_rate_hz: float = 1.0,
        board: Optional[Board] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        if not math.isfinite(tick_rate_hz) or tick_rate_hz <= 0:
            raise ValueError(
                f"tick_rate_hz must be a finite positive number, got {tick_rate_hz}"
            )
        self._tick_rate_hz = tick_rate_hz
        self.bus = bus if bus is not None else EventBus(keep_history=False)
        self.simulation = Simulation(self.bus, board=board)

        self._lock = threading.Lock()
        self._snapshot: Dict[str, Any] = self.simulation.snapshot()

        self._thread: Optional[threading.Thread] = None
        self._running = False

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Spawn the background tick thread."""
        if self._running:
            return
        self._running = True
        self._thread = threading.Thread(
            target=self._loop, daemon=True, name="SimBridge"
        )
        self._thread.start()
        log.info("SimBridge started at %.1f Hz", self._tick_rate_hz)

    def stop(self) -> None:
        """Signal the thread to stop and wait for it to join."""
        self._running = False
        if self._thread:
            self._thread.join(timeout=2.0)
        log.info("SimBridge stopped")

    # ── Adapter API ───────────────────────────────────────────────────────────

    def get_snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._snapshot)

    def publish(self, topic: Topic, payload: Optional[dict] = None) -> str:
        """Forward a view event to the bus and refresh the snapshot."""
        msg_id = self.bus.publish(topic, "view", payload)
        self._refresh()
        return msg_id

    def set_paused(self, paused: bool) -> None:
        """Pause / unpause the simulation tick."""
        state = SimulationState.PAUSED if paused else SimulationState.RUNNING
        self.publish(Topic.SIMULATION_STATE, {"state": state.value})

    def is_paused(self) -> bool:
        return not self.simulation.running

    def step(self) -> None:
        """Run exactly one tick on the calling thread."""
        self.bus.publish(Topic.UPDATE_ENVIRONMENT, _SENDER)
        self._refresh()

    # ── Background loop ───────────────────────────────────────────────────────

    def _loop(self) -> None:
        dt = 1.0 / self._tick_rate_hz
        while self._running:
            t0 = time.perf_counter()
            try:
                self.step()
            except Exception:
                log.exception("SimBridge tick error")
            time.sleep(max(0.0, dt - (time.perf_counter() - t0)))

    def _refresh(self) -> None:
        snapshot = self.simulation.snapshot()
        snapshot["bus_metrics"] = self.bus.metrics.report()
        with self._lock:
            self._snapshot = snapshot
