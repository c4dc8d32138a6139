"""A level (floor): an ordered, fixed-length row of slots."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pygarage.engine import policy
from pygarage.engine.slot import Slot

_logger = logging.getLogger(__name__)


class Level:
    """Ordered slots ``0..total_slots - 1`` on one floor.

    The level only knows about its own slots. Cross-level placement and
    the parked-machine index live in :class:`~pygarage.engine.garage.Garage`.
    """

    def __init__(self, level_index: int, total_slots: int) -> None:
        self._level_index = level_index
        self._slots: tuple[Slot, ...] = tuple(Slot(level_index, i) for i in range(total_slots))

    @property
    def level_index(self) -> int:
        return self._level_index

    @property
    def total_slots(self) -> int:
        return len(self._slots)

    @property
    def slots(self) -> tuple[Slot, ...]:
        return self._slots

    def find_candidate(self, units_required: int) -> list[int]:
        """Slot indices that would satisfy *units_required*, or ``[]``.

        The result is only a proposal; nothing is reserved until
        :meth:`commit` succeeds.
        """
        return policy.find_candidate([slot.is_occupied for slot in self._slots], units_required)

    def commit(self, machine_id: str, slot_indices: Iterable[int]) -> bool:
        """Occupy every slot in *slot_indices* with *machine_id*.

        All indices are re-checked first; if any is out of range or already
        taken, nothing is changed and ``False`` is returned.
        """
        indices = list(slot_indices)
        if not indices:
            return False
        for index in indices:
            if not 0 <= index < len(self._slots) or self._slots[index].is_occupied:
                _logger.debug(
                    "Stale candidate on level=%d slot=%d for machine=%s", self._level_index, index, machine_id
                )
                return False
        if len(set(indices)) != len(indices):
            return False
        for index in indices:
            self._slots[index].occupy(machine_id)
        return True

    def release(self, machine_id: str) -> bool:
        """Vacate every slot held by *machine_id*; ``True`` if any was."""
        removed = False
        for slot in self._slots:
            if slot.occupant_id == machine_id:
                slot.vacate()
                removed = True
        return removed

    def free_count(self) -> int:
        return sum(1 for slot in self._slots if not slot.is_occupied)

    def occupants(self) -> dict[int, str]:
        """Map of occupied slot index to occupant id."""
        return {slot.slot_index: slot.occupant_id for slot in self._slots if slot.occupant_id is not None}

    def __repr__(self) -> str:
        return f"Level(index={self._level_index}, free={self.free_count()}/{self.total_slots})"
