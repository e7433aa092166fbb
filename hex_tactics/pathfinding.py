"""
Grid-aware A* pathfinding.

Primary goals:
- Search the precomputed neighbor cache of a :class:`GridIndex`.
- Weight each step by the movement cost of the tile being entered.
- Treat occupied tiles as walls, except when the occupied tile is the goal.
- Report an unreachable goal as ``None``; never return a partial route.

Usage:
    grid = GridIndex.rectangle(5, 5)
    pf = Pathfinder(grid)
    path = pf.find_path(grid.require((0, 0)), grid.require((2, 0)))
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .grid.index import GridIndex, Tile
from .hexpath.astar import astar

logger = logging.getLogger(__name__)


class Pathfinder:
    """
    Hex pathfinding facade over a single grid.

    Results are not cached: occupancy changes between calls.
    """

    def __init__(self, grid: GridIndex) -> None:
        self.grid = grid

    # --------- Public API ---------

    def find_path(self, start: Tile, goal: Tile) -> List[Tile] | None:
        """
        Return the steps from ``start`` (exclusive) to ``goal`` (inclusive),
        or ``None`` when ``goal`` cannot be reached.
        """
        if start not in self.grid or goal not in self.grid:
            logger.debug("Path request outside grid: %r -> %r", start, goal)
            return None

        route, total = astar(
            start,
            goal,
            self.neighbors,
            self.heuristic,
            cost=self.edge_cost,
            passable=lambda tile: self.is_passable(tile, goal),
        )
        if route is None:
            logger.debug("No path from %s to %s", start.coord, goal.coord)
            return None
        logger.debug(
            "Path from %s to %s: %d steps, cost %s",
            start.coord,
            goal.coord,
            len(route) - 1,
            total,
        )
        return route[1:]

    def path_cost(self, path: Iterable[Tile]) -> int:
        return sum(self.edge_cost(None, tile) for tile in path)

    # --------- Internal helpers ---------

    def is_passable(self, tile: Tile, goal: Tile) -> bool:
        return tile is goal or not tile.is_occupied

    def neighbors(self, tile: Tile) -> Iterable[Tile]:
        return tile.neighbors

    def heuristic(self, a: Tile, b: Tile) -> int:
        # Admissible and consistent while every movement cost is >= 1
        return self.grid.distance(a, b)

    def edge_cost(self, a: Tile | None, b: Tile) -> int:
        return b.movement_cost


__all__ = ["Pathfinder"]
