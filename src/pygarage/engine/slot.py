"""A single parking slot."""

from __future__ import annotations


class Slot:
    """One allocatable slot at fixed ``(level_index, slot_index)`` coordinates.

    The coordinates are read-only. Occupancy is derived from
    ``occupant_id`` so a slot can never be occupied without an occupant,
    or free while naming one.
    """

    __slots__ = ("_level_index", "_slot_index", "_occupant_id")

    def __init__(self, level_index: int, slot_index: int) -> None:
        self._level_index = level_index
        self._slot_index = slot_index
        self._occupant_id: str | None = None

    @property
    def level_index(self) -> int:
        return self._level_index

    @property
    def slot_index(self) -> int:
        return self._slot_index

    @property
    def occupant_id(self) -> str | None:
        return self._occupant_id

    @property
    def is_occupied(self) -> bool:
        return self._occupant_id is not None

    def occupy(self, machine_id: str) -> bool:
        """Mark the slot as held by *machine_id*. No-op if already occupied."""
        if self._occupant_id is not None:
            return False
        self._occupant_id = machine_id
        return True

    def vacate(self) -> bool:
        """Free the slot. No-op if already free."""
        if self._occupant_id is None:
            return False
        self._occupant_id = None
        return True

    def __repr__(self) -> str:
        return f"Slot(level_index={self._level_index}, slot_index={self._slot_index}, occupant_id={self._occupant_id!r})"
