"""Thread-safe allocation engine.

This is the only component allowed to change slot occupancy. Every public
operation runs under one lock, so callers never observe a placement that
is half committed or an index entry without its slots.
"""

from __future__ import annotations

import logging
import threading

from pydantic import BaseModel, ConfigDict

from pygarage.config import GarageConfig
from pygarage.engine.level import Level
from pygarage.exceptions import (
    AlreadyParkedError,
    InternalInconsistencyError,
    MachineNotFoundError,
    NoSpaceError,
)
from pygarage.models.machine import Machine
from pygarage.models.results import LevelAvailability, Location, Placement, Release

_logger = logging.getLogger(__name__)


class ParkingRecord(BaseModel):
    """Index entry for one parked machine: its descriptor and its slots."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    machine: Machine
    level: int
    slots: tuple[int, ...]


class Garage:
    """Levels of slots plus the index of parked machines.

    Placement is first fit: levels are tried in ascending order and, within
    a level, the lowest free slot (or the lowest free adjacent pair for a
    truck) wins.  Given the same sequence of calls on a fresh garage, the
    results are always the same.

    Usage::

        garage = Garage(GarageConfig(levels=2, slots_per_level=20))
        placement = garage.store(Machine(identifier="ABC123", kind="car"))
        garage.unpark("ABC123")
    """

    def __init__(self, config: GarageConfig | None = None) -> None:
        self._config = config or GarageConfig()
        self._levels: tuple[Level, ...] = tuple(
            Level(index, self._config.slots_per_level) for index in range(self._config.levels)
        )
        # Single index keyed by machine id; holds both location and descriptor.
        self._parked: dict[str, ParkingRecord] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> GarageConfig:
        return self._config

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def store(self, machine: Machine) -> Placement:
        """Park *machine* in the first level that can take it.

        Raises
        ------
        AlreadyParkedError
            The machine id is already parked.
        NoSpaceError
            No level has a free slot (or free adjacent pair for a truck).
        """
        with self._lock:
            if machine.identifier in self._parked:
                raise AlreadyParkedError(
                    f"Machine with ID {machine.identifier} is already parked",
                    machine_id=machine.identifier,
                )

            needed = machine.units_required
            for level in self._levels:
                candidate = level.find_candidate(needed)
                if not candidate or not level.commit(machine.identifier, candidate):
                    continue
                record = ParkingRecord(machine=machine, level=level.level_index, slots=tuple(candidate))
                self._parked[machine.identifier] = record
                _logger.debug(
                    "Stored machine=%s kind=%s level=%d slots=%s",
                    machine.identifier,
                    machine.kind,
                    record.level,
                    list(record.slots),
                )
                return Placement(machine_id=machine.identifier, level=record.level, slots=record.slots)

            _logger.info("No space for machine=%s needing %d slot(s)", machine.identifier, needed)
            raise NoSpaceError(
                f"No suitable space found for machine ID {machine.identifier}",
                machine_id=machine.identifier,
                units_required=needed,
            )

    def unpark(self, machine_id: str) -> Release:
        """Remove a parked machine and free its slots.

        Raises
        ------
        MachineNotFoundError
            The machine id is not parked.
        InternalInconsistencyError
            The index says the machine is parked but its level holds no slot
            for it. The index entry is kept so the fault stays visible.
        """
        with self._lock:
            record = self._parked.get(machine_id)
            if record is None:
                raise MachineNotFoundError(
                    f"Machine with ID {machine_id} not found in the garage",
                    machine_id=machine_id,
                )

            if not self._levels[record.level].release(machine_id):
                _logger.error(
                    "Index lists machine=%s on level=%d slots=%s but the level holds none",
                    machine_id,
                    record.level,
                    list(record.slots),
                )
                raise InternalInconsistencyError(
                    f"Machine {machine_id} is indexed on level {record.level} but occupies no slot there",
                    machine_id=machine_id,
                    level=record.level,
                )

            del self._parked[machine_id]
            _logger.debug("Unparked machine=%s level=%d slots=%s", machine_id, record.level, list(record.slots))
            return Release(machine_id=machine_id, level=record.level, slots=record.slots)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def availability(self) -> list[LevelAvailability]:
        """Free-slot count per level, in level order."""
        with self._lock:
            return [
                LevelAvailability(level=level.level_index, free=level.free_count(), total=level.total_slots)
                for level in self._levels
            ]

    def is_full(self) -> bool:
        """``True`` when no level has a single free slot."""
        with self._lock:
            return all(level.free_count() == 0 for level in self._levels)

    def locate(self, machine_id: str) -> Location:
        """Kind and position of a parked machine.

        Raises :class:`MachineNotFoundError` if it is not parked.
        """
        with self._lock:
            record = self._parked.get(machine_id)
            if record is None:
                raise MachineNotFoundError(
                    f"Could not find machine ID {machine_id} in the garage",
                    machine_id=machine_id,
                )
            return Location(
                machine_id=machine_id,
                kind=record.machine.kind,
                level=record.level,
                slots=record.slots,
            )

    def parked_ids(self) -> list[str]:
        """Ids of all parked machines, in the order they were stored."""
        with self._lock:
            return list(self._parked)

    def __len__(self) -> int:
        with self._lock:
            return len(self._parked)

    def __contains__(self, machine_id: object) -> bool:
        with self._lock:
            return machine_id in self._parked

    def __repr__(self) -> str:
        return (
            f"Garage(levels={self._config.levels}, slots_per_level={self._config.slots_per_level}, "
            f"parked={len(self)})"
        )
