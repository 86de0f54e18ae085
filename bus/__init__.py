"""
bus — In-memory event infrastructure
======================================

Provides a lightweight pub/sub transport for the simulation's message
surface (window, editor, tick and board events) and the outbound sound
port, without any real I/O.

Modules
-------
message
    :class:`Event` dataclass and :class:`Topic` enum.
event_bus
    :class:`EventBus` publish / subscribe / poll transport.
metrics
    :class:`BusMetrics` counter snapshot.
audio
    :class:`AudioPort` and the :class:`Sound` labels.
utils
    ID generation and payload helpers.
"""

from .message import Event, Topic
from .event_bus import EventBus
from .metrics import BusMetrics
from .audio   import AudioPort, Sound
from .utils   import new_msg_id, cell_from_payload

__all__ = [
    "Event",
    "Topic",
    "EventBus",
    "BusMetrics",
    "AudioPort",
    "Sound",
    "new_msg_id",
    "cell_from_payload",
]
