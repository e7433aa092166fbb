from __future__ import annotations

from typing import Iterable, Iterator

from .conversions import cube_to_offset, offset_to_cube_coord
from .coords import Cube, HexOrientation, Offset, ParityRule

CUBE_DIRECTIONS: tuple[Cube, ...] = (
    Cube(+1, -1, 0),
    Cube(+1, 0, -1),
    Cube(0, +1, -1),
    Cube(-1, +1, 0),
    Cube(-1, 0, +1),
    Cube(0, -1, +1),
)


def neighbors_cube(c: Cube) -> Iterable[Cube]:
    for d in CUBE_DIRECTIONS:
        yield c + d


def neighbors_offset(
    o: Offset, orientation: HexOrientation, parity: ParityRule
) -> Iterable[Offset]:
    for c in neighbors_cube(offset_to_cube_coord(o, orientation, parity)):
        yield cube_to_offset(c, orientation, parity)


def cube_disk(center: Cube, radius: int) -> Iterator[Cube]:
    """Yield every cube within ``radius`` of ``center``, center included."""

    for dx in range(-radius, radius + 1):
        for dy in range(max(-radius, -dx - radius), min(radius, -dx + radius) + 1):
            dz = -dx - dy
            yield Cube(center.x + dx, center.y + dy, center.z + dz)
