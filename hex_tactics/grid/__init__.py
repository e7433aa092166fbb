"""Grid storage and range queries."""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - imported only for type checkers
    from .graph import is_connected, path_cost, to_graph
    from .index import GridIndex, Tile, coerce_offset
    from .ranges import attack_range, movement_range, tiles_within_range

__all__ = [
    "GridIndex",
    "Tile",
    "attack_range",
    "coerce_offset",
    "is_connected",
    "movement_range",
    "path_cost",
    "tiles_within_range",
    "to_graph",
]

_EXPORTS = {
    "GridIndex": "hex_tactics.grid.index",
    "Tile": "hex_tactics.grid.index",
    "coerce_offset": "hex_tactics.grid.index",
    "attack_range": "hex_tactics.grid.ranges",
    "movement_range": "hex_tactics.grid.ranges",
    "tiles_within_range": "hex_tactics.grid.ranges",
    "is_connected": "hex_tactics.grid.graph",
    "path_cost": "hex_tactics.grid.graph",
    "to_graph": "hex_tactics.grid.graph",
}


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name])
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted({*globals(), *__all__})
