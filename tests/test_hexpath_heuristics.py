from hex_tactics.hexpath import (
    Cube,
    HexOrientation,
    Offset,
    ParityRule,
    hex_distance_cube,
    hex_distance_offset,
)


def test_hex_distance_cube():
    a = Cube(0, 0, 0)
    b = Cube(1, -2, 1)
    assert hex_distance_cube(a, b) == 2


def test_hex_distance_cube_is_symmetric():
    a = Cube(3, -5, 2)
    b = Cube(-1, 0, 1)
    assert hex_distance_cube(a, b) == hex_distance_cube(b, a) == 5


def test_hex_distance_offset_along_a_row():
    # flat-top rows zigzag but still cost one step per column
    assert hex_distance_offset(
        Offset(0, 0), Offset(4, 0), HexOrientation.FLAT_TOP, ParityRule.ODD_SHIFTED
    ) == 4


def test_hex_distance_offset_pointy_column():
    assert hex_distance_offset(
        Offset(0, 0), Offset(0, 3), HexOrientation.POINTY_TOP, ParityRule.ODD_SHIFTED
    ) == 3
