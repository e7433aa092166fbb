"""Hex grid ranges, pathfinding and unit interaction."""

from .engine.controller import InteractionMode, UnitInteractionController
from .engine.units import UnitState
from .grid.index import GridIndex, Tile
from .hexpath.coords import HexOrientation, Offset, ParityRule
from .pathfinding import Pathfinder

__version__ = "0.1.0"

__all__ = [
    "GridIndex",
    "HexOrientation",
    "InteractionMode",
    "Offset",
    "ParityRule",
    "Pathfinder",
    "Tile",
    "UnitInteractionController",
    "UnitState",
    "__version__",
]
