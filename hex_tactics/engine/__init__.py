"""Unit state and the interaction controller."""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - imported only for type checkers
    from .controller import InteractionMode, UnitInteractionController
    from .units import NullHooks, UnitHooks, UnitState

__all__ = [
    "InteractionMode",
    "NullHooks",
    "UnitHooks",
    "UnitInteractionController",
    "UnitState",
]

_EXPORTS = {
    "InteractionMode": "hex_tactics.engine.controller",
    "UnitInteractionController": "hex_tactics.engine.controller",
    "NullHooks": "hex_tactics.engine.units",
    "UnitHooks": "hex_tactics.engine.units",
    "UnitState": "hex_tactics.engine.units",
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
