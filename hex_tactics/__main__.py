"""Command line demo: move the selected unit across a grid and print each stage."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from .config import load_scenario
from .engine.controller import UnitInteractionController
from .errors import ConfigurationError
from .render import render_grid
from .scenario import build_scenario, demo_config


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hex-tactics", description=__doc__)
    ap.add_argument("--scenario", type=Path, help="JSON scenario file")
    ap.add_argument(
        "--target",
        type=int,
        nargs=2,
        metavar=("COL", "ROW"),
        default=(2, 0),
        help="Tile to move the selected unit to",
    )
    ap.add_argument("--attack", action="store_true", help="Show the attack range and stop")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def _rejected_click_reason(controller: UnitInteractionController, target: tuple[int, int]) -> str:
    label = f"({target[0]}, {target[1]})"
    unit = controller.selected_unit
    tile = controller.grid.tile_at(target)
    if tile is None:
        return f"No tile at {label}."
    if tile.is_occupied:
        return f"{label} is occupied by {tile.occupant_id}."
    if unit is None or unit.current_tile is None:
        return "No unit is selected."
    route = controller.pathfinder.find_path(unit.current_tile, tile)
    if not route:
        return f"No route to {label}."
    return (
        f"{label} is {len(route)} steps away; "
        f"{unit.unit_id} has {unit.remaining_movement} movement left."
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    console = Console()
    try:
        config = load_scenario(args.scenario) if args.scenario else demo_config()
        scenario = build_scenario(config)
    except (ConfigurationError, ValidationError) as exc:
        console.print(f"Invalid scenario: {exc}", markup=False)
        return 2
    controller = scenario.controller

    if controller.selected_unit is None:
        console.print("No friendly unit to control.")
        return 1

    if args.attack:
        controller.enter_attack_mode()
        console.print(render_grid(scenario.grid, controller, title="Attack range"))
        return 0

    controller.enter_move_mode()
    console.print(render_grid(scenario.grid, controller, title="Movement range"))

    target = tuple(args.target)
    path = controller.click_tile(target)
    if path is None:
        console.print(_rejected_click_reason(controller, target))
        return 1
    console.print(render_grid(scenario.grid, controller, title="Committed path"))

    controller.run_to_completion()
    console.print(render_grid(scenario.grid, controller, title="After move"))
    console.print(scenario.channel.render_panel())
    return 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
