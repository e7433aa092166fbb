import pytest

from hex_tactics.hexpath import (
    Cube,
    HexOrientation,
    Offset,
    ParityRule,
    cube_disk,
    neighbors_cube,
    neighbors_offset,
)

FLAT = HexOrientation.FLAT_TOP
POINTY = HexOrientation.POINTY_TOP
ODD = ParityRule.ODD_SHIFTED
EVEN = ParityRule.EVEN_SHIFTED


def test_neighbors_cube_six_in_direction_order():
    n = list(neighbors_cube(Cube(0, 0, 0)))
    assert n == [
        Cube(1, -1, 0),
        Cube(1, 0, -1),
        Cube(0, 1, -1),
        Cube(-1, 1, 0),
        Cube(-1, 0, 1),
        Cube(0, -1, 1),
    ]


@pytest.mark.parametrize(
    ("offset", "orientation", "parity", "expected"),
    [
        (Offset(4, 4), POINTY, EVEN, {(3, 4), (4, 3), (4, 5), (5, 3), (5, 4), (5, 5)}),
        (Offset(4, 5), POINTY, EVEN, {(3, 4), (3, 5), (3, 6), (4, 4), (4, 6), (5, 5)}),
        (Offset(4, 4), POINTY, ODD, {(3, 3), (3, 4), (3, 5), (4, 3), (4, 5), (5, 4)}),
        (Offset(4, 5), POINTY, ODD, {(3, 5), (4, 4), (4, 6), (5, 4), (5, 5), (5, 6)}),
        (Offset(4, 4), FLAT, EVEN, {(3, 4), (3, 5), (4, 3), (4, 5), (5, 4), (5, 5)}),
        (Offset(5, 4), FLAT, EVEN, {(4, 3), (4, 4), (5, 3), (5, 5), (6, 3), (6, 4)}),
        (Offset(4, 4), FLAT, ODD, {(3, 3), (3, 4), (4, 3), (4, 5), (5, 3), (5, 4)}),
        (Offset(5, 4), FLAT, ODD, {(4, 4), (4, 5), (5, 3), (5, 5), (6, 4), (6, 5)}),
    ],
)
def test_neighbors_offset_exact_neighbor_sets(
    offset: Offset,
    orientation: HexOrientation,
    parity: ParityRule,
    expected: set[tuple[int, int]],
):
    actual = {(n.col, n.row) for n in neighbors_offset(offset, orientation, parity)}
    assert actual == expected


@pytest.mark.parametrize("radius", [0, 1, 2, 3, 5])
def test_cube_disk_size(radius: int):
    disk = list(cube_disk(Cube(2, -1, -1), radius))
    assert len(disk) == 3 * radius * (radius + 1) + 1
    assert len(set(disk)) == len(disk)
    assert Cube(2, -1, -1) in disk
