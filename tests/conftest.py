from __future__ import annotations

import pytest

from hex_tactics.engine.units import UnitState
from hex_tactics.grid.index import GridIndex
from hex_tactics.hexpath.coords import HexOrientation, ParityRule


def assert_occupancy_consistent(grid: GridIndex) -> None:
    for tile in grid:
        if tile.occupant_id is not None:
            unit = grid.unit(tile.occupant_id)
            assert unit is not None
            assert unit.current_tile is tile
    for unit in grid.units:
        if unit.current_tile is not None:
            assert unit.current_tile.occupant_id == unit.unit_id
    occupied_ids = [tile.occupant_id for tile in grid if tile.is_occupied]
    assert len(occupied_ids) == len(set(occupied_ids))


@pytest.fixture
def pointy_grid() -> GridIndex:
    """5 x 5 pointy-top grid, odd rows shifted, uniform cost."""

    return GridIndex.rectangle(
        5, 5, orientation=HexOrientation.POINTY_TOP, parity=ParityRule.ODD_SHIFTED
    )


@pytest.fixture
def hero() -> UnitState:
    return UnitState("hero", remaining_movement=3)
