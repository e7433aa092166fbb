"""Interaction events published to render and UI collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Sequence, Union

from ..hexpath.coords import Offset

if TYPE_CHECKING:
    from ..engine.controller import InteractionMode


class HighlightKind(str, Enum):
    """Caller-visible intent attached to a highlighted tile set."""

    NONE = "none"
    MOVEMENT = "movement"
    ATTACK = "attack"
    PATH = "path"


@dataclass(frozen=True)
class ModeChanged:
    mode: "InteractionMode"
    previous: "InteractionMode"

    def format_brief(self) -> str:
        return f"[mode] {self.previous.value} -> {self.mode.value}"


@dataclass(frozen=True)
class HighlightsChanged:
    """The full highlight set after a change; never a delta."""

    kind: HighlightKind
    coords: frozenset[Offset] = field(default_factory=frozenset)

    def format_brief(self) -> str:
        if not self.coords:
            return f"[highlight] {self.kind.value}: cleared"
        cells = ", ".join(str(coord) for coord in sorted(self.coords))
        return f"[highlight] {self.kind.value}: {cells}"


@dataclass(frozen=True)
class OccupancyChanged:
    coord: Offset
    unit_id: str
    occupied: bool

    def format_brief(self) -> str:
        verb = "occupied" if self.occupied else "vacated"
        return f"[occupancy] {self.coord} {verb} by {self.unit_id}"


InteractionEvent = Union[ModeChanged, HighlightsChanged, OccupancyChanged]
Listener = Callable[[InteractionEvent], None]


class InteractionChannel:
    """Capture interaction events and fan them out to subscribers."""

    def __init__(self, *, max_entries: int = 200) -> None:
        self.max_entries = max_entries
        self._events: List[InteractionEvent] = []
        self._listeners: List[Listener] = []

    @property
    def events(self) -> Sequence[InteractionEvent]:
        return tuple(self._events)

    def push(self, event: InteractionEvent) -> None:
        self._events.append(event)
        if len(self._events) > self.max_entries:
            self._events = self._events[-self.max_entries :]
        for listener in list(self._listeners):
            listener(event)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it again."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def of_type(self, event_type: type) -> list[InteractionEvent]:
        return [event for event in self._events if isinstance(event, event_type)]

    def clear(self) -> None:
        """Remove all stored events; subscribers stay registered."""

        self._events.clear()

    def render_panel(self, *, title: str = "Events", limit: int = 10):
        from rich.panel import Panel
        from rich.table import Table

        table = Table(expand=True)
        table.add_column("#", justify="right", no_wrap=True)
        table.add_column("Event", overflow="fold")

        start = max(0, len(self._events) - limit)
        for index, event in enumerate(self._events[start:], start=start):
            table.add_row(str(index), event.format_brief())

        return Panel(table, title=title, border_style="magenta")


__all__ = [
    "HighlightKind",
    "HighlightsChanged",
    "InteractionChannel",
    "InteractionEvent",
    "ModeChanged",
    "OccupancyChanged",
]
