"""Tests for machine and result models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pygarage.models.machine import Machine, MachineKind, units_required
from pygarage.models.results import LevelAvailability, Placement

# ------------------------------------------------------------------
# MachineKind
# ------------------------------------------------------------------


class TestMachineKind:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Bike", MachineKind.BIKE),
            ("car", MachineKind.CAR),
            (" TRUCK ", MachineKind.TRUCK),
            ("Small", MachineKind.BIKE),
            ("medium", MachineKind.CAR),
            ("Large", MachineKind.TRUCK),
        ],
    )
    def test_parse(self, text: str, expected: MachineKind) -> None:
        assert MachineKind.parse(text) == expected

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(ValueError, match="unknown machine kind"):
            MachineKind.parse("Boat")

    def test_label(self) -> None:
        assert MachineKind.TRUCK.label == "Truck"

    def test_units_required(self) -> None:
        assert units_required(MachineKind.BIKE) == 1
        assert units_required(MachineKind.CAR) == 1
        assert units_required(MachineKind.TRUCK) == 2


# ------------------------------------------------------------------
# Machine
# ------------------------------------------------------------------


class TestMachine:
    def test_identifier_is_stripped(self) -> None:
        machine = Machine(identifier="  ABC123 ", kind=MachineKind.CAR)
        assert machine.identifier == "ABC123"

    def test_empty_identifier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Machine(identifier="   ", kind=MachineKind.CAR)

    def test_kind_parsed_from_text(self) -> None:
        assert Machine(identifier="T1", kind="Large").kind == MachineKind.TRUCK

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Machine(identifier="X", kind="spaceship")

    def test_units_required_follows_kind(self) -> None:
        assert Machine(identifier="T1", kind=MachineKind.TRUCK).units_required == 2
        assert Machine(identifier="B1", kind=MachineKind.BIKE).units_required == 1

    def test_frozen(self) -> None:
        machine = Machine(identifier="A", kind=MachineKind.CAR)
        with pytest.raises(ValidationError):
            machine.identifier = "B"  # type: ignore[misc]


# ------------------------------------------------------------------
# Results
# ------------------------------------------------------------------


def test_placement_slots_coerced_to_tuple() -> None:
    placement = Placement(machine_id="T", level=0, slots=[1, 2])  # type: ignore[arg-type]
    assert placement.slots == (1, 2)


def test_level_availability_derived_fields() -> None:
    entry = LevelAvailability(level=1, free=0, total=4)
    assert entry.occupied == 4
    assert entry.is_full is True
