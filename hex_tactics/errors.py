"""Exception hierarchy shared across the package."""

from __future__ import annotations


class HexTacticsError(Exception):
    """Base class for errors raised by :mod:`hex_tactics`."""


class ConfigurationError(HexTacticsError, ValueError):
    """Raised when a grid cannot be built from the supplied tile data."""


class OccupancyError(HexTacticsError, RuntimeError):
    """Raised when an occupancy change would break the one-unit-per-tile rule."""


class QueueUnderflowError(HexTacticsError, IndexError):
    """Raised when popping from an empty priority queue."""


__all__ = [
    "ConfigurationError",
    "HexTacticsError",
    "OccupancyError",
    "QueueUnderflowError",
]
