#!/usr/bin/env python3
"""
sim/catalog.py
==============
Static catalogue of the buildings that can be placed on lots.

Every :class:`BuildingKind` maps to a frozen :class:`BuildingSpec` with
its footprint in cells and the side its driveway faces.  Colours are a
presentation concern and live in :mod:`ui.constants`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from sim.direction import Direction


class BuildingKind(Enum):
    """Placeable building."""
    RESIDENTIAL_A = "residential_a"
    RESIDENTIAL_B = "residential_b"
    RESIDENTIAL_C = "residential_c"
    RESIDENTIAL_D = "residential_d"
    RESIDENTIAL_E = "residential_e"
    COMMERCIAL = "commercial"
    PARK = "park"


@dataclass(frozen=True)
class BuildingSpec:
    """Footprint and entry side of a building kind."""

    width: int
    """Footprint width in cells."""

    height: int
    """Footprint height in cells."""

    entry: Direction
    """Side of the footprint that connects to the road."""


BUILDINGS: Dict[BuildingKind, BuildingSpec] = {
    BuildingKind.RESIDENTIAL_A: BuildingSpec(1, 1, Direction.DOWN),
    BuildingKind.RESIDENTIAL_B: BuildingSpec(1, 1, Direction.UP),
    BuildingKind.RESIDENTIAL_C: BuildingSpec(1, 1, Direction.LEFT),
    BuildingKind.RESIDENTIAL_D: BuildingSpec(1, 1, Direction.RIGHT),
    BuildingKind.RESIDENTIAL_E: BuildingSpec(2, 1, Direction.DOWN),
    BuildingKind.COMMERCIAL: BuildingSpec(2, 2, Direction.DOWN),
    BuildingKind.PARK: BuildingSpec(3, 2, Direction.UP),
}


def spec_for(kind: BuildingKind) -> BuildingSpec:
    return BUILDINGS[kind]
