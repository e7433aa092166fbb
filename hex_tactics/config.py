"""Validated configuration models for grids and demo scenarios."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .hexpath.coords import HexOrientation, ParityRule


def _coerce_enum(enum_type: type, value: object) -> object:
    if isinstance(value, str):
        try:
            return enum_type[value.upper()]
        except KeyError:
            return value
    return value


class TileSpec(BaseModel):
    """One tile of a grid layout."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    col: int
    row: int
    movement_cost: int = Field(default=1, ge=1)


class GridConfig(BaseModel):
    """Grid shape and per-tile movement costs.

    Without an explicit ``tiles`` list the grid is a ``width`` x ``height``
    rectangle; ``movement_costs`` overrides costs keyed by ``"col,row"``.
    """

    model_config = ConfigDict(extra="forbid")

    orientation: HexOrientation = Field(default=HexOrientation.FLAT_TOP)
    parity: ParityRule = Field(default=ParityRule.ODD_SHIFTED)
    width: int = Field(default=11, ge=0)
    height: int = Field(default=9, ge=0)
    default_movement_cost: int = Field(default=1, ge=1)
    tiles: list[TileSpec] | None = Field(default=None)
    movement_costs: dict[str, int] = Field(default_factory=dict)

    @field_validator("orientation", mode="before")
    @classmethod
    def _orientation_by_name(cls, value: object) -> object:
        return _coerce_enum(HexOrientation, value)

    @field_validator("parity", mode="before")
    @classmethod
    def _parity_by_name(cls, value: object) -> object:
        return _coerce_enum(ParityRule, value)

    @field_validator("movement_costs", mode="before")
    @classmethod
    def _normalise_cost_keys(cls, value: object) -> dict[str, int]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("movement_costs must be a mapping")
        normalised: dict[str, int] = {}
        for key, cost in value.items():
            if isinstance(key, tuple) and len(key) == 2:
                key = f"{key[0]},{key[1]}"
            col, sep, row = str(key).partition(",")
            if not sep:
                raise ValueError(f"movement cost key {key!r} must look like 'col,row'")
            normalised[f"{int(col)},{int(row)}"] = int(cost)
        return normalised

    @model_validator(mode="after")
    def _check_costs(self) -> "GridConfig":
        for key, cost in self.movement_costs.items():
            if cost < 1:
                raise ValueError(f"movement cost for {key} must be at least 1")
        return self

    def tile_specs(self) -> list[TileSpec]:
        """Return the final tile list with cost overrides applied."""

        if self.tiles is not None:
            base = list(self.tiles)
        else:
            base = [
                TileSpec(col=col, row=row, movement_cost=self.default_movement_cost)
                for row in range(self.height)
                for col in range(self.width)
            ]
        specs: list[TileSpec] = []
        for spec in base:
            override = self.movement_costs.get(f"{spec.col},{spec.row}")
            if override is not None:
                spec = spec.model_copy(update={"movement_cost": override})
            specs.append(spec)
        return specs


class UnitConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    unit_id: str = Field(min_length=1)
    col: int
    row: int
    remaining_movement: int = Field(default=3, ge=0)
    is_enemy: bool = False


class ScenarioConfig(BaseModel):
    """A grid plus the units standing on it."""

    model_config = ConfigDict(extra="forbid")

    grid: GridConfig = Field(default_factory=GridConfig)
    units: list[UnitConfig] = Field(default_factory=list)


def load_scenario(path: Path | str) -> ScenarioConfig:
    """Read a JSON scenario file."""

    with Path(path).open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    return ScenarioConfig.model_validate(payload)


__all__ = [
    "GridConfig",
    "ScenarioConfig",
    "TileSpec",
    "UnitConfig",
    "load_scenario",
]
