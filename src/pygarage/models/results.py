"""Result records returned by garage operations.

Every record is a frozen snapshot: it never changes after the call that
produced it returns, even if the garage state moves on.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pygarage.models.machine import MachineKind


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Placement(_Result):
    """Where ``store`` put a machine."""

    machine_id: str
    level: int
    slots: tuple[int, ...]


class Release(_Result):
    """Slots freed by ``unpark``."""

    machine_id: str
    level: int
    slots: tuple[int, ...]


class Location(_Result):
    """A parked machine's kind and position, as reported by ``locate``."""

    machine_id: str
    kind: MachineKind
    level: int
    slots: tuple[int, ...]


class LevelAvailability(_Result):
    """Free-slot count for one level."""

    level: int
    free: int
    total: int

    @property
    def occupied(self) -> int:
        return self.total - self.free

    @property
    def is_full(self) -> bool:
        return self.free == 0
