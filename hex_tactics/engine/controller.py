"""Selection, move/attack modes and step-by-step movement for one unit."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from ..events.channels import (
    HighlightKind,
    HighlightsChanged,
    InteractionChannel,
    ModeChanged,
)
from ..grid.index import CoordLike, GridIndex, Tile, coerce_offset
from ..grid.ranges import attack_range, movement_range
from ..pathfinding import Pathfinder
from .units import UnitState

logger = logging.getLogger(__name__)


class InteractionMode(Enum):
    """Mode of the single selected unit."""

    IDLE = "idle"
    AWAITING_MOVE_TARGET = "awaiting_move_target"
    AWAITING_ATTACK_TARGET = "awaiting_attack_target"
    MOVING = "moving"

    def accepts_tile_clicks(self) -> bool:
        return self is InteractionMode.AWAITING_MOVE_TARGET

    def accepts_mode_toggles(self) -> bool:
        return self is not InteractionMode.MOVING


class UnitInteractionController:
    """Drive the select -> move/attack -> resolve cycle.

    Inputs that do not apply to the current mode (toggles without a selected
    unit, clicks outside move mode, anything but ``advance``/``reset`` while a
    unit is moving) are ignored and leave the controller untouched.

    Movement points drain by one per step. Movement cost only steers which
    route the pathfinder picks.
    """

    def __init__(
        self,
        grid: GridIndex,
        *,
        pathfinder: Pathfinder | None = None,
        channel: InteractionChannel | None = None,
    ) -> None:
        self.grid = grid
        self.pathfinder = pathfinder or Pathfinder(grid)
        if channel is None:
            channel = grid.channel or InteractionChannel()
        if grid.channel is None:
            grid.channel = channel
        self.channel = channel
        self._mode = InteractionMode.IDLE
        self._selected: UnitState | None = None
        self._highlighted: frozenset[Tile] = frozenset()
        self._highlight_kind = HighlightKind.NONE
        self._path: list[Tile] = []
        self._step = 0

    # ------------------------------------------------------------------
    @property
    def mode(self) -> InteractionMode:
        return self._mode

    @property
    def selected_unit(self) -> UnitState | None:
        return self._selected

    @property
    def highlighted(self) -> frozenset[Tile]:
        return self._highlighted

    @property
    def highlight_kind(self) -> HighlightKind:
        return self._highlight_kind

    @property
    def active_path(self) -> tuple[Tile, ...]:
        """Steps of the committed path not yet walked."""

        return tuple(self._path[self._step :])

    @property
    def is_moving(self) -> bool:
        return self._mode is InteractionMode.MOVING

    @property
    def can_select_cell(self) -> bool:
        return self._mode.accepts_tile_clicks()

    # Selection ---------------------------------------------------------
    def select(self, unit: UnitState | None) -> bool:
        """Select ``unit`` (or clear the selection with ``None``)."""

        if self.is_moving:
            logger.debug("Ignoring selection while a unit is moving")
            return False
        if unit is not None:
            if unit.is_enemy:
                logger.debug("Ignoring selection of enemy unit %s", unit.unit_id)
                return False
            if unit.current_tile is None or unit.current_tile not in self.grid:
                logger.debug("Ignoring selection of unplaced unit %s", unit.unit_id)
                return False
        if unit is self._selected:
            return True
        self._selected = unit
        self._set_highlights(HighlightKind.NONE, ())
        self._set_mode(InteractionMode.IDLE)
        return True

    def select_at(self, coord: CoordLike | Tile) -> bool:
        """Select the friendly unit standing on ``coord``, if there is one."""

        tile = self._resolve(coord)
        if tile is None or tile.occupant_id is None:
            return False
        unit = self.grid.unit(tile.occupant_id)
        if unit is None:
            return False
        return self.select(unit)

    # Mode toggles ------------------------------------------------------
    def enter_move_mode(self) -> bool:
        unit = self._toggle_target()
        if unit is None or unit.current_tile is None:
            return False
        tiles = movement_range(self.grid, unit.current_tile, unit.remaining_movement)
        self._set_highlights(HighlightKind.NONE, ())
        self._set_highlights(HighlightKind.MOVEMENT, tiles)
        self._set_mode(InteractionMode.AWAITING_MOVE_TARGET)
        return True

    def enter_attack_mode(self) -> bool:
        unit = self._toggle_target()
        if unit is None or unit.current_tile is None:
            return False
        tiles = attack_range(self.grid, unit.current_tile, unit.remaining_movement)
        self._set_highlights(HighlightKind.NONE, ())
        self._set_highlights(HighlightKind.ATTACK, tiles)
        self._set_mode(InteractionMode.AWAITING_ATTACK_TARGET)
        return True

    def exit_attack_mode(self) -> bool:
        if self._mode is not InteractionMode.AWAITING_ATTACK_TARGET:
            return False
        self._set_highlights(HighlightKind.NONE, ())
        self._set_mode(InteractionMode.IDLE)
        return True

    def _toggle_target(self) -> UnitState | None:
        if not self._mode.accepts_mode_toggles():
            logger.debug("Ignoring mode toggle while %s", self._mode.value)
            return None
        unit = self._selected
        if unit is None or unit.current_tile is None:
            logger.debug("Ignoring mode toggle without a placed selected unit")
            return None
        return unit

    # Tile clicks -------------------------------------------------------
    def click_tile(self, coord: CoordLike | Tile) -> list[Tile] | None:
        """Commit a move to ``coord``; returns the committed path or ``None``."""

        if not self._mode.accepts_tile_clicks():
            logger.debug("Ignoring tile click while %s", self._mode.value)
            return None
        unit = self._selected
        tile = self._resolve(coord)
        if unit is None or unit.current_tile is None or tile is None:
            return None
        if tile.is_occupied:
            logger.debug("Ignoring click on occupied tile %s", tile.coord)
            return None

        path = self.pathfinder.find_path(unit.current_tile, tile)
        if not path:
            return None
        if len(path) > unit.remaining_movement:
            logger.debug(
                "Path to %s needs %d steps, unit %s has %d",
                tile.coord,
                len(path),
                unit.unit_id,
                unit.remaining_movement,
            )
            return None

        self._path = list(path)
        self._step = 0
        self._set_highlights(HighlightKind.PATH, self._path)
        self._set_mode(InteractionMode.MOVING)
        unit.hooks.on_move_start(unit, path[-1])
        return list(path)

    # Movement ----------------------------------------------------------
    def advance(self) -> Tile | None:
        """Walk one step of the committed path and return the tile entered."""

        if not self.is_moving:
            return None
        unit = self._selected
        if unit is None or unit.current_tile is None:
            logger.warning("Moving unit lost its tile; stopping movement")
            self._finish_movement()
            return None
        if self._step >= len(self._path):
            self._finish_movement()
            return None
        destination = self._path[self._step]
        if destination.is_occupied:
            logger.info(
                "Step onto %s blocked; stopping %s on %s",
                destination.coord,
                unit.unit_id,
                unit.current_tile.coord,
            )
            self._finish_movement()
            return None

        try:
            self.grid.move(unit, destination)
        finally:
            # a listener may raise after the transfer; keep the step count in sync
            if unit.current_tile is destination:
                unit.spend_step()
                self._step += 1
        self._set_highlights(HighlightKind.PATH, self._path[self._step :])

        if self._step >= len(self._path):
            logger.info("Unit %s arrived at %s", unit.unit_id, destination.coord)
            self._finish_movement()
        return destination

    def run_to_completion(self) -> int:
        """Advance until the committed path is exhausted; return steps taken."""

        steps = 0
        while self.is_moving:
            if self.advance() is None:
                break
            steps += 1
        return steps

    def cancel_movement(self) -> bool:
        """Stop on the last committed tile."""

        if not self.is_moving:
            return False
        unit = self._selected
        logger.info(
            "Movement of %s cancelled after %d step(s)",
            unit.unit_id if unit else "?",
            self._step,
        )
        self._finish_movement()
        return True

    def reset(self) -> None:
        """Return to idle, deselect and clear highlights. Occupancy is kept."""

        self.cancel_movement()
        self._selected = None
        self._set_highlights(HighlightKind.NONE, ())
        self._set_mode(InteractionMode.IDLE)

    def _finish_movement(self) -> None:
        unit = self._selected
        self._path = []
        self._step = 0
        self._set_highlights(HighlightKind.NONE, ())
        self._set_mode(InteractionMode.IDLE)
        if unit is not None:
            unit.hooks.on_move_complete(unit)

    # ------------------------------------------------------------------
    def _resolve(self, coord: CoordLike | Tile) -> Tile | None:
        if isinstance(coord, Tile):
            return coord if coord in self.grid else None
        try:
            return self.grid.tile_at(coerce_offset(coord))
        except (TypeError, ValueError):
            return None

    def _set_mode(self, mode: InteractionMode) -> None:
        previous = self._mode
        if previous is mode:
            return
        self._mode = mode
        logger.debug("Mode %s -> %s", previous.value, mode.value)
        self.channel.push(ModeChanged(mode, previous))

    def _set_highlights(self, kind: HighlightKind, tiles: Iterable[Tile]) -> None:
        highlighted = frozenset(tiles)
        if not highlighted:
            kind = HighlightKind.NONE
        if highlighted == self._highlighted and kind is self._highlight_kind:
            return
        self._highlighted = highlighted
        self._highlight_kind = kind
        self.channel.push(
            HighlightsChanged(kind, frozenset(tile.coord for tile in highlighted))
        )


__all__ = ["InteractionMode", "UnitInteractionController"]
