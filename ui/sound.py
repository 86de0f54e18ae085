"""
ui/sound.py
===========
Host-side player for the ``audio.play`` events published by
:class:`bus.audio.AudioPort`.

Each sound key resolves to ``<sounds_dir>/<key>.wav``.  Missing files
or an unavailable mixer are logged once and otherwise ignored; sound is
never allowed to stop the simulation.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Set

import pygame

from bus.event_bus import EventBus
from bus.message import Event, Topic

log = logging.getLogger(__name__)


class PygameSoundPlayer:
    """Plays sound keys through :mod:`pygame.mixer`."""

    def __init__(self, bus: EventBus, sounds_dir: str) -> None:
        self.sounds_dir = sounds_dir
        self._cache: Dict[str, pygame.mixer.Sound] = {}
        self._missing: Set[str] = set()
        self._mixer_ready: Optional[bool] = None
        bus.subscribe(Topic.PLAY_SOUND, self._on_play_sound)

    def path_for(self, key: str) -> str:
        return os.path.join(self.sounds_dir, f"{key}.wav")

    def _ensure_mixer(self) -> bool:
        if self._mixer_ready is None:
            try:
                pygame.mixer.init()
                self._mixer_ready = True
            except pygame.error as exc:
                log.warning("Audio disabled: %s", exc)
                self._mixer_ready = False
        return self._mixer_ready

    def _on_play_sound(self, event: Event) -> None:
        key = str(event.payload.get("sound", ""))
        if not key or key in self._missing or not self._ensure_mixer():
            return

        sound = self._cache.get(key)
        if sound is None:
            path = self.path_for(key)
            if not os.path.isfile(path):
                log.warning("Sound asset missing: %s", path)
                self._missing.add(key)
                return
            sound = pygame.mixer.Sound(path)
            self._cache[key] = sound
        sound.play()
