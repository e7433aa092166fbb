import itertools

import pytest

from hex_tactics.hexpath import (
    Cube,
    HexOrientation,
    Offset,
    ParityRule,
    cube_to_offset,
    offset_to_cube,
)

LAYOUTS = list(itertools.product(HexOrientation, ParityRule))


def test_cube_invariant():
    c = Cube(1, -2, 1)
    assert c.x + c.y + c.z == 0


def test_cube_rejects_nonzero_sum():
    with pytest.raises(ValueError):
        Cube(1, 1, 1)


@pytest.mark.parametrize(("orientation", "parity"), LAYOUTS)
def test_offset_cube_roundtrip(orientation: HexOrientation, parity: ParityRule):
    for col in range(-7, 8):
        for row in range(-7, 8):
            cube = offset_to_cube(col, row, orientation, parity)
            assert cube.x + cube.y + cube.z == 0
            assert cube_to_offset(cube, orientation, parity) == Offset(col, row)


@pytest.mark.parametrize(
    ("orientation", "parity", "offset", "expected"),
    [
        (HexOrientation.FLAT_TOP, ParityRule.ODD_SHIFTED, (3, 2), Cube(3, -4, 1)),
        (HexOrientation.FLAT_TOP, ParityRule.EVEN_SHIFTED, (3, 2), Cube(3, -3, 0)),
        (HexOrientation.POINTY_TOP, ParityRule.ODD_SHIFTED, (2, 3), Cube(3, -4, 1)),
        (HexOrientation.POINTY_TOP, ParityRule.EVEN_SHIFTED, (2, 3), Cube(3, -3, 0)),
        (HexOrientation.FLAT_TOP, ParityRule.ODD_SHIFTED, (-3, 0), Cube(-3, 1, 2)),
    ],
)
def test_offset_to_cube_known_values(orientation, parity, offset, expected):
    assert offset_to_cube(*offset, orientation, parity) == expected


def test_orientations_transpose_the_stored_axes():
    flat = offset_to_cube(4, 1, HexOrientation.FLAT_TOP, ParityRule.ODD_SHIFTED)
    pointy = offset_to_cube(1, 4, HexOrientation.POINTY_TOP, ParityRule.ODD_SHIFTED)
    assert flat == pointy
