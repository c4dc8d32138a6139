from __future__ import annotations

import argparse
from collections.abc import Iterator

import pytest

from pygarage.cli import COMMANDS_HELP, GarageShell, build_config, main, run_shell
from pygarage.config import GarageConfig
from pygarage.engine.garage import Garage


def _shell(levels: int = 1, slots: int = 4) -> GarageShell:
    return GarageShell(Garage(GarageConfig(levels=levels, slots_per_level=slots)))


def _feed(lines: list[str]) -> Iterator[str]:
    return iter(lines)


class TestGarageShell:
    def test_add_and_locate(self) -> None:
        shell = _shell()
        text, keep_going = shell.execute("add_machine ABC123 Car")
        assert keep_going is True
        assert text == "Successfully stored machine 'ABC123' on Level 0 in slot(s): 0"

        text, _ = shell.execute("add_machine T1 Truck")
        assert text.endswith("in slot(s): 1 2")

        text, _ = shell.execute("locate_machine T1")
        assert text == "Machine 'T1' (Truck) is on Level 0 occupying slot(s): 1 2"

    def test_add_duplicate(self) -> None:
        shell = _shell()
        shell.execute("add_machine A Bike")
        text, keep_going = shell.execute("add_machine A Bike")
        assert text == "Machine with ID A is already parked."
        assert keep_going is True

    def test_add_without_space(self) -> None:
        shell = _shell(slots=1)
        shell.execute("add_machine A Bike")
        text, _ = shell.execute("add_machine B Bike")
        assert text == "No suitable space found for machine ID: B."

    def test_add_unknown_kind(self) -> None:
        text, _ = _shell().execute("add_machine A Boat")
        assert text.startswith("Invalid machine:")

    def test_unpark(self) -> None:
        shell = _shell()
        shell.execute("add_machine A Car")
        text, _ = shell.execute("unpark_machine A")
        assert text == "Machine 'A' has been removed from Level 0."
        text, _ = shell.execute("unpark_machine A")
        assert text == "Machine with ID A not found in the garage."

    def test_locate_unknown(self) -> None:
        text, _ = _shell().execute("locate_machine nobody")
        assert text == "Could not find machine ID nobody in the garage."

    def test_availability_and_full(self) -> None:
        shell = _shell(levels=2, slots=1)
        text, _ = shell.execute("check_availability")
        assert text == "=== Current Availability ===\nLevel 0: 1 slot(s) free.\nLevel 1: 1 slot(s) free."
        assert shell.execute("check_full")[0] == "The garage still has space available."

        shell.execute("add_machine A Car")
        shell.execute("add_machine B Car")
        assert shell.execute("check_full")[0] == "The garage is completely full."

    def test_unknown_command_and_bad_arity(self) -> None:
        shell = _shell()
        assert "don't recognize" in shell.execute("fly_away")[0]
        assert shell.execute("add_machine onlyid")[0].startswith("Usage error")
        assert shell.execute("   ") == ("", True)

    def test_commands_and_quit(self) -> None:
        shell = _shell()
        assert shell.execute("commands") == (COMMANDS_HELP, True)
        text, keep_going = shell.execute("quit")
        assert keep_going is False
        assert "Exiting" in text


def test_run_shell_stops_on_quit() -> None:
    lines = _feed(["add_machine A Car", "quit", "add_machine B Car"])
    output: list[str] = []
    garage = Garage(GarageConfig(levels=1, slots_per_level=2))

    run_shell(garage, input_fn=lambda _prompt: next(lines), output_fn=output.append)

    assert "A" in garage
    assert "B" not in garage
    assert output[-1].startswith("Exiting")


def test_run_shell_stops_on_eof() -> None:
    def no_input(_prompt: str) -> str:
        raise EOFError

    output: list[str] = []
    run_shell(Garage(GarageConfig(levels=1, slots_per_level=1)), input_fn=no_input, output_fn=output.append)
    assert output[-1] == COMMANDS_HELP


def test_build_config_prompts_for_missing_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GARAGE_LEVELS", raising=False)
    monkeypatch.delenv("GARAGE_SLOTS_PER_LEVEL", raising=False)
    answers = _feed(["zero", "-1", "2", "6"])
    args = argparse.Namespace(levels=None, slots_per_level=None)

    config = build_config(args, input_fn=lambda _prompt: next(answers))
    assert config == GarageConfig(levels=2, slots_per_level=6)


def test_build_config_uses_flags_and_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GARAGE_SLOTS_PER_LEVEL", "8")
    args = argparse.Namespace(levels=3, slots_per_level=None)

    def no_prompt(_prompt: str) -> str:
        raise AssertionError("should not prompt")

    assert build_config(args, input_fn=no_prompt) == GarageConfig(levels=3, slots_per_level=8)


def test_main_runs_until_quit(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    lines = _feed(["add_machine T1 Large", "locate_machine T1", "quit"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))

    assert main(["--levels", "1", "--slots-per-level", "3"]) == 0
    out = capsys.readouterr().out
    assert "Machine 'T1' (Truck) is on Level 0 occupying slot(s): 0 1" in out


def test_main_rejects_invalid_dimensions(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--levels", "0", "--slots-per-level", "3"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err
