"""Build a grid, its units and a controller from a scenario config."""

from __future__ import annotations

from dataclasses import dataclass

from .config import GridConfig, ScenarioConfig, UnitConfig
from .engine.controller import UnitInteractionController
from .engine.units import UnitState
from .errors import ConfigurationError, OccupancyError
from .events.channels import InteractionChannel
from .grid.index import GridIndex
from .hexpath.coords import HexOrientation, ParityRule


@dataclass
class Scenario:
    grid: GridIndex
    controller: UnitInteractionController
    units: dict[str, UnitState]
    channel: InteractionChannel


def demo_config() -> ScenarioConfig:
    """A 5 x 5 pointy-top grid with one friendly unit in the corner."""

    return ScenarioConfig(
        grid=GridConfig(
            orientation=HexOrientation.POINTY_TOP,
            parity=ParityRule.ODD_SHIFTED,
            width=5,
            height=5,
        ),
        units=[UnitConfig(unit_id="hero", col=0, row=0, remaining_movement=3)],
    )


def build_scenario(config: ScenarioConfig) -> Scenario:
    """Instantiate the grid and place every configured unit.

    The first friendly unit, if any, starts selected. Duplicate unit ids,
    units off the grid and units sharing a tile raise
    :class:`~hex_tactics.errors.ConfigurationError`.
    """

    channel = InteractionChannel()
    grid = GridIndex.from_config(config.grid, channel=channel)
    units: dict[str, UnitState] = {}
    for spec in config.units:
        if spec.unit_id in units:
            raise ConfigurationError(f"duplicate unit id {spec.unit_id!r}")
        unit = UnitState(
            spec.unit_id,
            remaining_movement=spec.remaining_movement,
            is_enemy=spec.is_enemy,
        )
        tile = grid.tile_at((spec.col, spec.row))
        if tile is None:
            raise ConfigurationError(
                f"unit {spec.unit_id!r} is placed off the grid at ({spec.col}, {spec.row})"
            )
        try:
            grid.occupy(tile, unit)
        except OccupancyError as exc:
            raise ConfigurationError(f"cannot place unit {spec.unit_id!r}: {exc}") from exc
        units[unit.unit_id] = unit

    controller = UnitInteractionController(grid, channel=channel)
    for unit in units.values():
        if not unit.is_enemy:
            controller.select(unit)
            break
    return Scenario(grid=grid, controller=controller, units=units, channel=channel)


__all__ = ["Scenario", "build_scenario", "demo_config"]
