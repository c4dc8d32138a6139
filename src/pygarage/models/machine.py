"""Machine (vehicle) model and slot demand per kind."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pygarage._constants import CONTIGUOUS_PAIR, KIND_ALIASES, SINGLE_SLOT


class MachineKind(enum.StrEnum):
    """Machine size class.

    ``BIKE`` and ``CAR`` take one slot; ``TRUCK`` takes two adjacent
    slots on the same level.
    """

    BIKE = "bike"
    CAR = "car"
    TRUCK = "truck"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, text: str) -> MachineKind:
        """Parse a user-supplied kind such as ``"Car"`` or ``"large"``.

        Raises :class:`ValueError` for anything that is not a known kind
        name or size alias.
        """
        token = text.strip().lower()
        token = KIND_ALIASES.get(token, token)
        try:
            return cls(token)
        except ValueError:
            choices = ", ".join([m.label for m in cls] + [a.capitalize() for a in KIND_ALIASES])
            raise ValueError(f"unknown machine kind {text!r}; expected one of: {choices}") from None


def units_required(kind: MachineKind) -> int:
    """Number of contiguous slots a machine of *kind* occupies."""
    return CONTIGUOUS_PAIR if kind == MachineKind.TRUCK else SINGLE_SLOT


class Machine(BaseModel):
    """A machine requesting a parking placement.

    Parameters
    ----------
    identifier : str
        Caller-supplied unique id (e.g. a licence plate). Surrounding
        whitespace is stripped; an empty id is rejected.
    kind : MachineKind
        Size class, which determines :attr:`units_required`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    identifier: str = Field(..., description="Unique machine id")
    kind: MachineKind = MachineKind.CAR

    @field_validator("identifier")
    @classmethod
    def _normalize_identifier(cls, value: str) -> str:
        identifier = value.strip()
        if not identifier:
            raise ValueError("identifier must be non-empty")
        return identifier

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, MachineKind):
            return MachineKind.parse(value)
        return value

    @property
    def units_required(self) -> int:
        return units_required(self.kind)
