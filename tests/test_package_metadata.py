"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hex_tactics

ROOT = Path(__file__).resolve().parents[1]


def _load_pyproject() -> dict:
    with (ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    project = pyproject["project"]

    assert project["name"] == "hex-tactics"
    assert project["version"] == hex_tactics.__version__
    assert project["scripts"]["hex-tactics"] == "hex_tactics.__main__:main"

    dependencies = " ".join(project["dependencies"])
    for dependency in ("networkx", "pydantic", "rich"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"
    assert any(dep.startswith("pytest") for dep in project["optional-dependencies"]["test"])
