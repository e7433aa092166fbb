"""Console rendering of a grid for the demo CLI."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from .events.channels import HighlightKind
from .grid.index import GridIndex, Tile
from .hexpath.coords import HexOrientation, Offset, ParityRule

if TYPE_CHECKING:
    from .engine.controller import UnitInteractionController

DEFAULT_SYMBOLS: Mapping[str, str] = {
    "empty": ".",
    "missing": " ",
    "friendly": "U",
    "enemy": "E",
    "selected": "@",
    HighlightKind.MOVEMENT.value: "m",
    HighlightKind.ATTACK.value: "a",
    HighlightKind.PATH.value: "*",
}

_STYLES: Mapping[str, str] = {
    "friendly": "bold green",
    "enemy": "bold magenta",
    "selected": "bold yellow",
    HighlightKind.MOVEMENT.value: "blue",
    HighlightKind.ATTACK.value: "red",
    HighlightKind.PATH.value: "cyan",
}


def _cell(
    grid: GridIndex,
    tile: Tile | None,
    controller: UnitInteractionController | None,
    symbols: Mapping[str, str],
) -> tuple[str, str]:
    if tile is None:
        return symbols["missing"], ""
    if tile.occupant_id is not None:
        unit = grid.unit(tile.occupant_id)
        if controller is not None and unit is not None and unit is controller.selected_unit:
            return symbols["selected"], _STYLES["selected"]
        key = "enemy" if unit is not None and unit.is_enemy else "friendly"
        return symbols[key], _STYLES[key]
    if controller is not None and tile in controller.highlighted:
        key = controller.highlight_kind.value
        return symbols.get(key, "?"), _STYLES.get(key, "")
    if tile.movement_cost > 1:
        return str(min(tile.movement_cost, 9)), "dim"
    return symbols["empty"], ""


def _indented(grid: GridIndex, row: int) -> bool:
    # only pointy-top rows carry a horizontal half step
    if grid.orientation is not HexOrientation.POINTY_TOP:
        return False
    odd = bool(row & 1)
    return odd if grid.parity is ParityRule.ODD_SHIFTED else not odd


def grid_text(
    grid: GridIndex,
    controller: UnitInteractionController | None = None,
    *,
    symbols: Mapping[str, str] | None = None,
) -> Text:
    """Return a styled text block with one line per grid row."""

    symbol_map = dict(DEFAULT_SYMBOLS)
    if symbols:
        symbol_map.update(symbols)
    text = Text()
    if len(grid) == 0:
        text.append("(empty grid)")
        return text

    cols = [tile.col for tile in grid]
    rows = [tile.row for tile in grid]
    for row in range(min(rows), max(rows) + 1):
        if row != min(rows):
            text.append("\n")
        if _indented(grid, row):
            text.append(" ")
        for col in range(min(cols), max(cols) + 1):
            if col != min(cols):
                text.append(" ")
            symbol, style = _cell(grid, grid.tile_at(Offset(col, row)), controller, symbol_map)
            text.append(symbol, style=style)
    return text


def render_grid(
    grid: GridIndex,
    controller: UnitInteractionController | None = None,
    *,
    title: str = "Hex Grid",
) -> RenderableType:
    subtitle = None
    if controller is not None:
        subtitle = controller.mode.value.replace("_", " ")
    return Panel(grid_text(grid, controller), title=title, subtitle=subtitle, border_style="cyan")


__all__ = ["DEFAULT_SYMBOLS", "grid_text", "render_grid"]
