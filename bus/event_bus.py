"""
EventBus: In-memory pub/sub channel for the simulation's message surface.

Supports:
    - Topic-based messaging
    - Queued delivery (publish / poll)
    - Synchronous callbacks registered by the host (subscribe)
    - Logging of events

Intended usage:
    - The view publishes input events ('editor.tile', 'editor.tool', ...)
    - The tick driver publishes 'sim.environment' once per tick
    - The simulation subscribes to both and publishes 'board.topology'
      and 'audio.play' in return
"""

import time
import logging
import threading
from typing import Callable, Dict, List, Optional
from .message import Event, Topic
from .metrics import BusMetrics
from .utils import new_msg_id

log = logging.getLogger(__name__)

Subscriber = Callable[[Event], None]


class EventBus:
    """
    Transport for fire-and-forget events between simulation components.

    Attributes:
        metrics (BusMetrics): Counters for published and delivered events.
        keep_history (bool): If True, events are queued for poll() as well as
            delivered to subscribers.
    """

    def __init__(self, keep_history: bool = True):
        """
        Initialize an EventBus instance.

        Args:
            keep_history (bool): Queue every published event until polled.
        """
        self._topics: Dict[Topic, List[Event]] = {}
        self._subscribers: Dict[Topic, List[Subscriber]] = {}
        self._lock = threading.Lock()
        self.keep_history = keep_history
        self.metrics = BusMetrics()

    def publish(
        self,
        topic: Topic,
        sender: str,
        payload: Optional[dict] = None,
    ) -> str:
        """
        Publish an event and hand it to every subscriber of its topic.

        Args:
            topic (Topic): The topic of the event.
            sender (str): ID of the publisher (e.g., 'view', 'ticker').
            payload (dict): Topic-specific data; defaults to an empty dict.

        Returns:
            str: The unique event ID.

        Note:
            A subscriber that raises is logged and counted in metrics.failed;
            the exception never reaches the publisher.
        """
        event = Event(
            id=new_msg_id(),
            topic=topic,
            sender=sender,
            payload=dict(payload or {}),
            ts=time.time(),
        )
        with self._lock:
            if self.keep_history:
                self._topics.setdefault(topic, []).append(event)
            subscribers = list(self._subscribers.get(topic, []))
            self.metrics.published += 1

        log.debug("publish topic=%s sender=%s id=%s", topic.value, sender, event.id)

        for callback in subscribers:
            try:
                callback(event)
            except Exception:
                self.metrics.failed += 1
                log.exception("subscriber_failed topic=%s id=%s", topic.value, event.id)
            else:
                self.metrics.delivered += 1
        return event.id

    def subscribe(self, topic: Topic, callback: Subscriber) -> None:
        """
        Register a callback invoked synchronously for every event on a topic.

        Args:
            topic (Topic): The topic to listen to.
            callback (Callable[[Event], None]): Handler; its return value is ignored.
        """
        with self._lock:
            self._subscribers.setdefault(topic, []).append(callback)

    def unsubscribe(self, topic: Topic, callback: Subscriber) -> None:
        """
        Remove a previously registered callback. Unknown callbacks are ignored.
        """
        with self._lock:
            callbacks = self._subscribers.get(topic, [])
            if callback in callbacks:
                callbacks.remove(callback)

    def poll(self, topic: Topic) -> List[Event]:
        """
        Retrieve and clear all queued events for a given topic.

        Args:
            topic (Topic): The topic to poll events from.

        Returns:
            List[Event]: Events published to the topic since the last poll.
        """
        with self._lock:
            events = self._topics.get(topic, [])
            self._topics[topic] = []
        return events
