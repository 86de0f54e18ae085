#!/usr/bin/env python3
"""
sim/traffic_light.py
====================
Fixed-cycle traffic-light state machine.

Each :class:`TrafficLight` faces one direction and counts down in
simulation ticks.  When the countdown is already at zero, the next
:meth:`TrafficLight.advance` switches the phase and reloads the timer:

    GREEN (6) → RED (3) → YELLOW (2) → GREEN

Each phase shows every countdown value from its duration down to zero,
so one full cycle takes 7 + 4 + 3 = 14 ticks.

An intersection axis is built with :func:`from_traffic_direction`; the
vertical pair starts green and the horizontal pair starts red, so two
axes advanced on the same cadence stay out of phase without sharing any
state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Sequence

from sim.direction import HORIZONTAL, VERTICAL, Direction

log = logging.getLogger(__name__)


class TrafficLightKind(Enum):
    """Signal phase shown by a light."""
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"

    @property
    def duration(self) -> int:
        """Ticks spent in this phase after the timer is reloaded."""
        return _DURATION[self]

    def next(self) -> "TrafficLightKind":
        return _CYCLE[self]


_DURATION = {
    TrafficLightKind.GREEN: 6,
    TrafficLightKind.RED: 3,
    TrafficLightKind.YELLOW: 2,
}

_CYCLE = {
    TrafficLightKind.GREEN: TrafficLightKind.RED,
    TrafficLightKind.RED: TrafficLightKind.YELLOW,
    TrafficLightKind.YELLOW: TrafficLightKind.GREEN,
}

CYCLE_LENGTH_TICKS: int = sum(kind.duration + 1 for kind in TrafficLightKind)


class UnsupportedAxisError(ValueError):
    """Raised by strict axis construction for pairs other than UP/DOWN or LEFT/RIGHT."""


@dataclass(frozen=True)
class TrafficLight:
    """A single signal head.

    Parameters
    ----------
    kind : TrafficLightKind
        Current phase.
    facing : Direction
        Direction the light faces; fixed for the light's lifetime.
    time_remaining : int
        Ticks left before the phase switches.  Never negative.
    """

    kind: TrafficLightKind
    facing: Direction
    time_remaining: int

    def __post_init__(self) -> None:
        if self.time_remaining < 0:
            raise ValueError(
                f"time_remaining must be >= 0, got {self.time_remaining}"
            )

    @classmethod
    def new(cls, kind: TrafficLightKind, facing: Direction) -> "TrafficLight":
        """A light at the start of *kind*'s phase."""
        return cls(kind=kind, facing=facing, time_remaining=kind.duration)

    def advance(self) -> "TrafficLight":
        """The light one tick later."""
        if self.time_remaining == 0:
            next_kind = self.kind.next()
            return replace(self, kind=next_kind, time_remaining=next_kind.duration)
        return replace(self, time_remaining=self.time_remaining - 1)

    def is_green(self) -> bool:
        return self.kind is TrafficLightKind.GREEN


TrafficLights = List[TrafficLight]


def from_traffic_direction(
    directions: Sequence[Direction],
    *,
    strict: bool = False,
) -> TrafficLights:
    """Build the light pair for one controlled axis.

    ``[UP, DOWN]`` gives two green lights, ``[LEFT, RIGHT]`` two red
    ones.  Any other sequence yields an empty list, or raises
    :class:`UnsupportedAxisError` when *strict* is set.
    """
    axis = tuple(directions)
    if axis == VERTICAL:
        return [TrafficLight.new(TrafficLightKind.GREEN, d) for d in axis]
    if axis == HORIZONTAL:
        return [TrafficLight.new(TrafficLightKind.RED, d) for d in axis]

    if strict:
        raise UnsupportedAxisError(
            "unsupported axis " + ", ".join(d.name for d in axis)
        )
    log.debug("no_lights axis=%s", [d.name for d in axis])
    return []


def advance_all(lights: Sequence[TrafficLight]) -> TrafficLights:
    """Advance every light in a group by one tick."""
    return [light.advance() for light in lights]
