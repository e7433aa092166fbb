import itertools

import networkx as nx
import pytest

from hex_tactics.engine.units import UnitState
from hex_tactics.grid.graph import path_cost, to_graph
from hex_tactics.grid.index import GridIndex
from hex_tactics.hexpath import HexOrientation, Offset, ParityRule
from hex_tactics.pathfinding import Pathfinder

LAYOUTS = list(itertools.product(HexOrientation, ParityRule))


@pytest.mark.parametrize(("orientation", "parity"), LAYOUTS)
def test_uniform_path_length_equals_cube_distance(orientation, parity):
    grid = GridIndex.rectangle(6, 5, orientation=orientation, parity=parity)
    pf = Pathfinder(grid)
    start = grid.require((0, 0))
    for goal in grid:
        path = pf.find_path(start, goal)
        assert path is not None
        assert len(path) == grid.distance(start, goal)
        if path:
            assert path[-1] is goal
            assert start not in path
            steps = [start, *path]
            assert all(b in a.neighbors for a, b in zip(steps, steps[1:]))


def test_start_equals_goal_is_empty_route(pointy_grid):
    tile = pointy_grid.require((3, 3))
    assert Pathfinder(pointy_grid).find_path(tile, tile) == []


def test_routes_around_occupied_tile(pointy_grid):
    pointy_grid.place(UnitState("blocker"), (1, 0))
    path = Pathfinder(pointy_grid).find_path(
        pointy_grid.require((0, 0)), pointy_grid.require((2, 0))
    )
    assert path is not None
    assert [tile.coord for tile in path] == [Offset(0, 1), Offset(1, 1), Offset(2, 0)]


def test_encircled_goal_is_unreachable(pointy_grid):
    goal = pointy_grid.require((2, 2))
    for index, tile in enumerate(goal.neighbors):
        pointy_grid.occupy(tile, UnitState(f"wall-{index}"))
    assert Pathfinder(pointy_grid).find_path(pointy_grid.require((0, 0)), goal) is None


def test_occupied_goal_is_a_valid_terminal(pointy_grid):
    pointy_grid.place(UnitState("target"), (3, 2))
    pointy_grid.place(UnitState("blocker"), (1, 1))
    goal = pointy_grid.require((3, 2))
    path = Pathfinder(pointy_grid).find_path(pointy_grid.require((0, 0)), goal)
    assert path is not None
    assert path[-1] is goal
    assert not any(tile.is_occupied for tile in path[:-1])


def test_disconnected_goal_returns_none():
    grid = GridIndex([(0, 0), (1, 0), (4, 4)])
    assert Pathfinder(grid).find_path(grid.require((0, 0)), grid.require((4, 4))) is None


def test_tile_outside_grid_returns_none(pointy_grid):
    foreign = GridIndex([(0, 0)]).require((0, 0))
    assert Pathfinder(pointy_grid).find_path(pointy_grid.require((0, 0)), foreign) is None


def test_expensive_tile_is_avoided():
    grid = GridIndex.rectangle(
        5,
        5,
        orientation=HexOrientation.POINTY_TOP,
        parity=ParityRule.ODD_SHIFTED,
        movement_costs={(1, 0): 5},
    )
    pf = Pathfinder(grid)
    path = pf.find_path(grid.require((0, 0)), grid.require((2, 0)))
    assert path is not None
    assert grid.require((1, 0)) not in path
    assert len(path) == 3
    assert pf.path_cost(path) == path_cost(path) == 3


def test_cost_matches_networkx_astar():
    costs = {(c, r): 1 + (c * 7 + r * 3) % 4 for c in range(6) for r in range(6)}
    grid = GridIndex.rectangle(6, 6, movement_costs=costs)
    graph = to_graph(grid)
    pf = Pathfinder(grid)
    start = grid.require((0, 0))
    for goal in grid:
        path = pf.find_path(start, goal)
        assert path is not None
        expected = nx.astar_path_length(graph, start.coord, goal.coord, weight="weight")
        assert pf.path_cost(path) == expected
