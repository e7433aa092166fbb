"""networkx views of a grid for analysis and cross-checking."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, TypeAlias

import networkx as nx

from ..hexpath.coords import Offset
from .index import GridIndex, Tile

if TYPE_CHECKING:  # pragma: no cover - typing only
    GridGraph: TypeAlias = nx.DiGraph[Offset]
else:  # pragma: no cover - runtime alias without subscripting
    GridGraph: TypeAlias = nx.DiGraph


def to_graph(grid: GridIndex, *, include_occupied: bool = True) -> GridGraph:
    """Return a directed graph of the neighbor cache keyed by offset.

    Edge ``weight`` is the movement cost of the destination tile, matching the
    cost model of :class:`~hex_tactics.pathfinding.Pathfinder`.
    """

    graph: GridGraph = nx.DiGraph(
        orientation=grid.orientation.value, parity=grid.parity.value
    )
    for tile in grid:
        if not include_occupied and tile.is_occupied:
            continue
        graph.add_node(tile.coord, movement_cost=tile.movement_cost)
    for tile in grid:
        if tile.coord not in graph:
            continue
        for neighbor in tile.neighbors:
            if neighbor.coord in graph:
                graph.add_edge(tile.coord, neighbor.coord, weight=neighbor.movement_cost)
    return graph


def path_cost(path: Sequence[Tile]) -> int:
    """Total movement cost of walking ``path`` (start tile excluded)."""

    return sum(tile.movement_cost for tile in path)


def is_connected(grid: GridIndex) -> bool:
    graph = to_graph(grid)
    if len(graph) == 0:
        return True
    return nx.is_strongly_connected(graph)


__all__ = ["GridGraph", "is_connected", "path_cost", "to_graph"]
