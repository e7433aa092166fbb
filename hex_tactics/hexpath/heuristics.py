from __future__ import annotations

from .conversions import offset_to_cube_coord
from .coords import Cube, HexOrientation, Offset, ParityRule


def hex_distance_cube(a: Cube, b: Cube) -> int:
    return (abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)) // 2


def hex_distance_offset(
    a: Offset, b: Offset, orientation: HexOrientation, parity: ParityRule
) -> int:
    return hex_distance_cube(
        offset_to_cube_coord(a, orientation, parity),
        offset_to_cube_coord(b, orientation, parity),
    )
