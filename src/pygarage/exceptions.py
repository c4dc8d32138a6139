"""Custom exception hierarchy for pygarage."""

from __future__ import annotations


class GarageError(Exception):
    """Base exception for all pygarage errors."""


class GarageConfigError(GarageError):
    """Invalid or missing configuration."""


class GarageClientClosedError(GarageError):
    """Async client used outside its ``async with`` block."""


class AllocationError(GarageError):
    """A garage operation could not be carried out for a machine."""

    def __init__(self, message: str, *, machine_id: str = "") -> None:
        self.machine_id = machine_id
        super().__init__(message)


class AlreadyParkedError(AllocationError):
    """``store`` called for a machine id that is already parked."""


class NoSpaceError(AllocationError):
    """No level has a free placement for the requested number of slots."""

    def __init__(
        self,
        message: str,
        *,
        machine_id: str = "",
        units_required: int = 1,
    ) -> None:
        self.units_required = units_required
        super().__init__(message, machine_id=machine_id)


class MachineNotFoundError(AllocationError):
    """``unpark`` or ``locate`` called for a machine id that is not parked."""


class InternalInconsistencyError(AllocationError):
    """The parked-machine index and the level occupancy disagree.

    This should never happen while the garage invariants hold.  It is
    raised instead of being masked so the corruption stays visible; the
    index entry that triggered it is left in place.
    """

    def __init__(self, message: str, *, machine_id: str = "", level: int | None = None) -> None:
        self.level = level
        super().__init__(message, machine_id=machine_id)
