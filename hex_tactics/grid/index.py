"""Tile storage, neighbor cache and occupancy bookkeeping."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator, Mapping, Sequence, Tuple, Union

from ..errors import ConfigurationError, OccupancyError
from ..events.channels import InteractionChannel, OccupancyChanged
from ..hexpath.conversions import cube_to_offset, offset_to_cube_coord
from ..hexpath.coords import Cube, HexOrientation, Offset, ParityRule
from ..hexpath.neighbors import neighbors_cube

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..config import GridConfig, TileSpec
    from ..engine.units import UnitState

logger = logging.getLogger(__name__)

CoordLike = Union[Offset, Tuple[int, int]]
TileEntry = Union[Offset, Tuple[int, int], Tuple[int, int, int], "TileSpec"]


@dataclass(eq=False)
class Tile:
    """A grid cell. Created once per grid and never destroyed."""

    coord: Offset
    movement_cost: int = 1
    _occupant_id: str | None = field(default=None, init=False, repr=False)
    _neighbors: tuple["Tile", ...] = field(default=(), init=False, repr=False)

    @property
    def col(self) -> int:
        return self.coord.col

    @property
    def row(self) -> int:
        return self.coord.row

    @property
    def occupant_id(self) -> str | None:
        return self._occupant_id

    @property
    def is_occupied(self) -> bool:
        return self._occupant_id is not None

    @property
    def neighbors(self) -> tuple["Tile", ...]:
        return self._neighbors

    def __repr__(self) -> str:
        return f"Tile({self.col}, {self.row}, cost={self.movement_cost})"


def coerce_offset(value: object) -> Offset:
    """Accept an :class:`Offset`, a :class:`Tile` or a ``(col, row)`` pair."""

    if isinstance(value, Offset):
        return value
    if isinstance(value, Tile):
        return value.coord
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
        return Offset(int(value[0]), int(value[1]))
    raise TypeError(f"cannot interpret {value!r} as a grid coordinate")


def _coerce_entry(entry: object) -> tuple[Offset, int]:
    if isinstance(entry, Offset):
        return entry, 1
    if hasattr(entry, "col") and hasattr(entry, "row"):
        cost = getattr(entry, "movement_cost", 1)
        return Offset(int(entry.col), int(entry.row)), int(cost)  # type: ignore[attr-defined]
    if isinstance(entry, Sequence) and not isinstance(entry, str):
        if len(entry) == 2:
            return Offset(int(entry[0]), int(entry[1])), 1
        if len(entry) == 3:
            return Offset(int(entry[0]), int(entry[1])), int(entry[2])
    raise ConfigurationError(f"cannot interpret {entry!r} as a tile entry")


class GridIndex:
    """Owns every tile of a hex grid.

    Tiles are addressed by offset coordinate; nothing assumes the layout is
    rectangular. Neighbor lists are computed once at construction from cube
    space and hold exactly the six-direction neighbors that exist, in cube
    direction order.

    ``occupy``, ``vacate`` and ``move`` are the only mutators of occupancy.
    They keep a tile's occupant and the unit's ``current_tile`` in agreement.
    """

    def __init__(
        self,
        tiles: Iterable[TileEntry],
        *,
        orientation: HexOrientation = HexOrientation.FLAT_TOP,
        parity: ParityRule = ParityRule.ODD_SHIFTED,
        channel: InteractionChannel | None = None,
    ) -> None:
        self.orientation = orientation
        self.parity = parity
        self.channel = channel
        self._tiles: dict[Offset, Tile] = {}
        self._cubes: dict[Offset, Cube] = {}
        self._units: dict[str, UnitState] = {}

        for entry in tiles:
            coord, cost = _coerce_entry(entry)
            if coord in self._tiles:
                raise ConfigurationError(f"duplicate tile coordinate {coord}")
            if cost < 1:
                raise ConfigurationError(
                    f"movement cost for {coord} must be at least 1, got {cost}"
                )
            self._tiles[coord] = Tile(coord, cost)
            self._cubes[coord] = offset_to_cube_coord(coord, orientation, parity)

        self._build_neighbors()
        logger.info(
            "Built %s grid with %d tiles (%s)",
            orientation.value,
            len(self._tiles),
            parity.value,
        )

    # ------------------------------------------------------------------
    @classmethod
    def rectangle(
        cls,
        width: int,
        height: int,
        *,
        orientation: HexOrientation = HexOrientation.FLAT_TOP,
        parity: ParityRule = ParityRule.ODD_SHIFTED,
        movement_costs: Mapping[CoordLike, int] | None = None,
        channel: InteractionChannel | None = None,
    ) -> "GridIndex":
        """Build a ``width`` x ``height`` grid with optional cost overrides."""

        if width < 0 or height < 0:
            raise ConfigurationError("grid dimensions cannot be negative")
        costs = {coerce_offset(key): int(value) for key, value in (movement_costs or {}).items()}
        entries = [
            (col, row, costs.get(Offset(col, row), 1))
            for row in range(height)
            for col in range(width)
        ]
        return cls(entries, orientation=orientation, parity=parity, channel=channel)

    @classmethod
    def from_config(
        cls, config: "GridConfig", *, channel: InteractionChannel | None = None
    ) -> "GridIndex":
        return cls(
            config.tile_specs(),
            orientation=config.orientation,
            parity=config.parity,
            channel=channel,
        )

    def _build_neighbors(self) -> None:
        for coord, tile in self._tiles.items():
            found: list[Tile] = []
            for cube in neighbors_cube(self._cubes[coord]):
                neighbor = self._tiles.get(
                    cube_to_offset(cube, self.orientation, self.parity)
                )
                if neighbor is not None:
                    found.append(neighbor)
            tile._neighbors = tuple(found)

    # ------------------------------------------------------------------
    def tile_at(self, coord: CoordLike) -> Tile | None:
        return self._tiles.get(coerce_offset(coord))

    def require(self, coord: CoordLike) -> Tile:
        tile = self.tile_at(coord)
        if tile is None:
            raise KeyError(f"no tile at {coerce_offset(coord)}")
        return tile

    def cube_of(self, tile: Tile | Offset) -> Cube:
        coord = tile.coord if isinstance(tile, Tile) else tile
        cube = self._cubes.get(coord)
        if cube is None:
            cube = offset_to_cube_coord(coord, self.orientation, self.parity)
        return cube

    def tile_at_cube(self, cube: Cube) -> Tile | None:
        return self._tiles.get(cube_to_offset(cube, self.orientation, self.parity))

    def distance(self, a: Tile, b: Tile) -> int:
        ca, cb = self.cube_of(a), self.cube_of(b)
        return (abs(ca.x - cb.x) + abs(ca.y - cb.y) + abs(ca.z - cb.z)) // 2

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._tiles.values())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Tile):
            return self._tiles.get(item.coord) is item
        try:
            return coerce_offset(item) in self._tiles
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles.values())

    def __len__(self) -> int:
        return len(self._tiles)

    # Occupancy ---------------------------------------------------------
    def unit(self, unit_id: str) -> UnitState | None:
        """Return the unit standing on this grid under ``unit_id``."""

        return self._units.get(unit_id)

    @property
    def units(self) -> tuple[UnitState, ...]:
        return tuple(self._units.values())

    def _check_can_enter(self, tile: Tile, unit: UnitState) -> None:
        if tile not in self:
            raise OccupancyError(f"{tile!r} does not belong to this grid")
        if tile.is_occupied:
            raise OccupancyError(
                f"tile {tile.coord} is already occupied by {tile.occupant_id}"
            )
        registered = self._units.get(unit.unit_id)
        if registered is not None and registered is not unit:
            raise OccupancyError(f"another unit is registered as {unit.unit_id}")

    def _publish(self, *events: OccupancyChanged) -> None:
        if self.channel is None:
            return
        for event in events:
            self.channel.push(event)

    def occupy(self, tile: Tile, unit: UnitState) -> None:
        """Place ``unit`` on ``tile``; the unit must not stand anywhere else."""

        if unit.current_tile is not None:
            raise OccupancyError(
                f"unit {unit.unit_id} already stands on {unit.current_tile.coord}"
            )
        self._check_can_enter(tile, unit)

        tile._occupant_id = unit.unit_id
        unit._current_tile = tile
        self._units[unit.unit_id] = unit
        logger.debug("Unit %s occupied %s", unit.unit_id, tile.coord)
        self._publish(OccupancyChanged(tile.coord, unit.unit_id, True))

    def vacate(self, tile: Tile) -> str | None:
        """Clear ``tile`` and return the former occupant id, if any.

        The unit leaves the board, which frees its id for reuse.
        """

        unit_id = tile.occupant_id
        if unit_id is None:
            return None
        tile._occupant_id = None
        unit = self._units.get(unit_id)
        if unit is not None and unit.current_tile is tile:
            unit._current_tile = None
            del self._units[unit_id]
        logger.debug("Unit %s vacated %s", unit_id, tile.coord)
        self._publish(OccupancyChanged(tile.coord, unit_id, False))
        return unit_id

    def move(self, unit: UnitState, destination: Tile) -> Tile:
        """Transfer ``unit`` from its tile to ``destination``; return the old tile.

        Both tiles and the unit are updated before either occupancy event is
        published, so a failing listener cannot strand the unit between tiles.
        """

        origin = unit.current_tile
        if origin is None or origin not in self:
            raise OccupancyError(f"unit {unit.unit_id} is not on this grid")
        self._check_can_enter(destination, unit)

        origin._occupant_id = None
        destination._occupant_id = unit.unit_id
        unit._current_tile = destination
        logger.debug(
            "Unit %s moved %s -> %s", unit.unit_id, origin.coord, destination.coord
        )
        self._publish(
            OccupancyChanged(origin.coord, unit.unit_id, False),
            OccupancyChanged(destination.coord, unit.unit_id, True),
        )
        return origin

    def place(self, unit: UnitState, coord: CoordLike) -> Tile:
        """Convenience wrapper: look up ``coord`` and occupy it with ``unit``."""

        tile = self.require(coord)
        self.occupy(tile, unit)
        return tile


__all__ = ["CoordLike", "GridIndex", "Tile", "TileEntry", "coerce_offset"]
