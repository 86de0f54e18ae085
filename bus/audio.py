"""
AudioPort: Outbound sound requests published on the EventBus.

The simulation never plays audio itself. It publishes a fixed string key on
the 'audio.play' topic and whichever host registered a player (see
ui/sound.py) turns that key into an actual sound.
"""

import logging
from enum import Enum
from .event_bus import EventBus
from .message import Topic

log = logging.getLogger(__name__)


class Sound(Enum):
    """
    Closed set of sound labels. The value is the key the host player
    resolves to an audio asset.
    """
    BUILD_ROAD_START = "buildRoadStart"
    BUILD_ROAD_END = "buildRoadEnd"
    DESTROY_ROAD = "destroyRoad"
    BUILD_LOT = "buildLot"


class AudioPort:
    """
    Fire-and-forget sound notifications.

    Attributes:
        bus (EventBus): Bus the requests are published on.
        sender (str): Sender ID stamped on every request.
    """

    def __init__(self, bus: EventBus, sender: str = "audio"):
        self.bus = bus
        self.sender = sender

    def play(self, sound: Sound) -> None:
        """
        Request playback of a sound.

        Args:
            sound (Sound): The label to play.
        """
        log.debug("play_sound key=%s", sound.value)
        self.bus.publish(Topic.PLAY_SOUND, self.sender, {"sound": sound.value})
