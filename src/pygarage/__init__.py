"""pygarage - Thread-safe slot allocation engine for multi-level garages."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pygarage")
except PackageNotFoundError:
    __version__ = "0+local"
from pygarage.client import GarageClient
from pygarage.config import GarageConfig
from pygarage.engine import Garage, Level, ParkingRecord, Slot
from pygarage.exceptions import (
    AllocationError,
    AlreadyParkedError,
    GarageClientClosedError,
    GarageConfigError,
    GarageError,
    InternalInconsistencyError,
    MachineNotFoundError,
    NoSpaceError,
)
from pygarage.models import (
    LevelAvailability,
    Location,
    Machine,
    MachineKind,
    Placement,
    Release,
    units_required,
)

__all__ = [
    "__version__",
    "AllocationError",
    "AlreadyParkedError",
    "Garage",
    "GarageClient",
    "GarageClientClosedError",
    "GarageConfig",
    "GarageConfigError",
    "GarageError",
    "InternalInconsistencyError",
    "Level",
    "LevelAvailability",
    "Location",
    "Machine",
    "MachineKind",
    "MachineNotFoundError",
    "NoSpaceError",
    "ParkingRecord",
    "Placement",
    "Release",
    "Slot",
    "units_required",
]
