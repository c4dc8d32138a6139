"""Data models for machines and garage results."""

from pygarage.models.machine import Machine, MachineKind, units_required
from pygarage.models.results import LevelAvailability, Location, Placement, Release

__all__ = [
    "LevelAvailability",
    "Location",
    "Machine",
    "MachineKind",
    "Placement",
    "Release",
    "units_required",
]
