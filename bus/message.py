"""
Event and Topic: the message surface carried by the EventBus.
"""

from dataclasses import dataclass, field
from enum import Enum


class Topic(Enum):
    """
    Every kind of event exchanged between the view, the tick driver and
    the simulation.

    The simulation core only acts on UPDATE_ENVIRONMENT (one tick) and the
    board-editing topics; the rest are published for whichever host
    component cares about them.
    """
    WINDOW_RESIZED = "window.resized"
    VISIBILITY_CHANGED = "window.visibility"
    SIMULATION_STATE = "sim.state"
    UPDATE_ENVIRONMENT = "sim.environment"
    CHECK_QUEUE = "sim.queue"
    CHECK_CAR_STATUS = "sim.cars"
    SELECT_TILE = "editor.tile"
    SELECT_TOOL = "editor.tool"
    TOGGLE_DEBUG = "view.debug"
    TOPOLOGY_CHANGED = "board.topology"
    PLAY_SOUND = "audio.play"


@dataclass
class Event:
    """
    Represents a single event published on the EventBus.

    Attributes:
        id (str): Unique identifier for the event.
        topic (Topic): What kind of event this is.
        sender (str): ID of the publisher (e.g., 'view', 'ticker', 'simulation').
        payload (dict): Topic-specific data.
        ts (float): Timestamp (in seconds) when the event was created.
    """
    id: str
    topic: Topic
    sender: str
    payload: dict = field(default_factory=dict)
    ts: float = 0.0
