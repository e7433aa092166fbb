from .coords import Cube, HexOrientation, Offset, ParityRule
from .conversions import cube_to_offset, offset_to_cube, offset_to_cube_coord
from .heuristics import hex_distance_cube, hex_distance_offset
from .neighbors import CUBE_DIRECTIONS, cube_disk, neighbors_cube, neighbors_offset
from .queue import PriorityQueue
from .astar import astar

__all__ = [
    "CUBE_DIRECTIONS",
    "Cube",
    "HexOrientation",
    "Offset",
    "ParityRule",
    "PriorityQueue",
    "astar",
    "cube_disk",
    "cube_to_offset",
    "hex_distance_cube",
    "hex_distance_offset",
    "neighbors_cube",
    "neighbors_offset",
    "offset_to_cube",
    "offset_to_cube_coord",
]
