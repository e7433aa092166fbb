"""Distance-disk range queries over a grid."""

from __future__ import annotations

from ..hexpath.neighbors import cube_disk
from .index import GridIndex, Tile


def tiles_within_range(grid: GridIndex, center: Tile, radius: int) -> set[Tile]:
    """Return every grid tile within ``radius`` cube steps of ``center``.

    The center itself is never included. Occupancy, movement cost and
    connectivity are ignored, so a tile can be in range even when every route
    to it is blocked.
    """

    if radius <= 0:
        return set()
    found: set[Tile] = set()
    for cube in cube_disk(grid.cube_of(center), radius):
        tile = grid.tile_at_cube(cube)
        if tile is not None and tile is not center:
            found.add(tile)
    return found


def movement_range(grid: GridIndex, center: Tile, radius: int) -> set[Tile]:
    return tiles_within_range(grid, center, radius)


def attack_range(grid: GridIndex, center: Tile, radius: int) -> set[Tile]:
    """Same disk as :func:`movement_range`; only the caller's intent differs."""

    return tiles_within_range(grid, center, radius)


__all__ = ["attack_range", "movement_range", "tiles_within_range"]
