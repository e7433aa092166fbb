from __future__ import annotations

from .coords import Cube, HexOrientation, Offset, ParityRule


def _shift(axis: int, parity: ParityRule) -> int:
    # both forms are exact: axis +/- (axis & 1) is always even
    if parity is ParityRule.ODD_SHIFTED:
        return (axis - (axis & 1)) // 2
    if parity is ParityRule.EVEN_SHIFTED:
        return (axis + (axis & 1)) // 2
    raise ValueError("Unknown parity rule")


def offset_to_cube(
    col: int, row: int, orientation: HexOrientation, parity: ParityRule
) -> Cube:
    """Convert a stored (col, row) pair to cube space.

    The parity axis (columns for flat-top, rows for pointy-top) maps straight
    onto ``x``; the other axis is corrected by the half-step shift.
    """
    if orientation is HexOrientation.FLAT_TOP:
        axis, other = col, row
    elif orientation is HexOrientation.POINTY_TOP:
        axis, other = row, col
    else:
        raise ValueError("Unknown orientation")
    x = axis
    z = other - _shift(axis, parity)
    y = -x - z
    return Cube(x, y, z)


def cube_to_offset(
    cube: Cube, orientation: HexOrientation, parity: ParityRule
) -> Offset:
    axis = cube.x
    other = cube.z + _shift(axis, parity)
    if orientation is HexOrientation.FLAT_TOP:
        return Offset(axis, other)
    if orientation is HexOrientation.POINTY_TOP:
        return Offset(other, axis)
    raise ValueError("Unknown orientation")


def offset_to_cube_coord(
    offset: Offset, orientation: HexOrientation, parity: ParityRule
) -> Cube:
    return offset_to_cube(offset.col, offset.row, orientation, parity)
