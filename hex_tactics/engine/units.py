"""Unit state driven by the interaction controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from ..grid.index import Tile


class UnitHooks(Protocol):
    """Animation callbacks fired at move start and move completion."""

    def on_move_start(self, unit: "UnitState", destination: "Tile") -> None:
        ...

    def on_move_complete(self, unit: "UnitState") -> None:
        ...


class NullHooks:
    def on_move_start(self, unit: "UnitState", destination: "Tile") -> None:
        return None

    def on_move_complete(self, unit: "UnitState") -> None:
        return None


@dataclass(eq=False)
class UnitState:
    """A single unit standing on the grid.

    ``current_tile`` is written only by :class:`~hex_tactics.grid.index.GridIndex`
    and ``remaining_movement`` only by the controller.
    """

    unit_id: str
    remaining_movement: int = 3
    is_enemy: bool = False
    hooks: UnitHooks = field(default_factory=NullHooks, repr=False)
    _current_tile: "Tile | None" = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.unit_id:
            raise ValueError("unit_id must be a non-empty string")
        if self.remaining_movement < 0:
            raise ValueError("remaining_movement cannot be negative")

    @property
    def current_tile(self) -> "Tile | None":
        return self._current_tile

    def spend_step(self) -> None:
        if self.remaining_movement <= 0:
            raise ValueError("no movement left to spend")
        self.remaining_movement -= 1


__all__ = ["NullHooks", "UnitHooks", "UnitState"]
