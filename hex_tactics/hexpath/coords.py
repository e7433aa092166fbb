from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class HexOrientation(Enum):
    FLAT_TOP = "flat_top"
    POINTY_TOP = "pointy_top"


class ParityRule(Enum):
    """Which parity of the shifting axis carries the half-step offset."""

    ODD_SHIFTED = "odd_shifted"
    EVEN_SHIFTED = "even_shifted"


@dataclass(frozen=True, slots=True)
class Cube:
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise ValueError("For cube coords, x + y + z must be 0")

    def __add__(self, other: Cube) -> Cube:
        return Cube(self.x + other.x, self.y + other.y, self.z + other.z)


@dataclass(frozen=True, slots=True, order=True)
class Offset:
    col: int
    row: int

    def __str__(self) -> str:
        return f"({self.col}, {self.row})"
