"""Interactive garage shell.

Thin front end over :class:`~pygarage.engine.garage.Garage`: it parses
commands, calls the engine and renders the results. All placement logic
stays in the engine.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable, Sequence

from pydantic import ValidationError

from pygarage.config import GarageConfig
from pygarage.engine.garage import Garage
from pygarage.exceptions import (
    AlreadyParkedError,
    GarageConfigError,
    GarageError,
    MachineNotFoundError,
    NoSpaceError,
)
from pygarage.models.machine import Machine
from pygarage.models.results import LevelAvailability, Location, Placement, Release

_logger = logging.getLogger(__name__)

COMMANDS_HELP = """\
Here are the commands you can use:
  add_machine <id> <type>        (e.g. add_machine ABC123 Car)
  unpark_machine <id>            (e.g. unpark_machine ABC123)
  check_availability
  check_full
  locate_machine <id>            (e.g. locate_machine ABC123)
  commands                       (Show the list of commands again)
  quit"""

# ------------------------------------------------------------------
# Rendering
# ------------------------------------------------------------------


def _slot_list(slots: Sequence[int]) -> str:
    return " ".join(str(s) for s in slots)


def render_placement(placement: Placement) -> str:
    return (
        f"Successfully stored machine '{placement.machine_id}' on Level {placement.level} "
        f"in slot(s): {_slot_list(placement.slots)}"
    )


def render_release(release: Release) -> str:
    return f"Machine '{release.machine_id}' has been removed from Level {release.level}."


def render_availability(levels: Sequence[LevelAvailability]) -> str:
    lines = ["=== Current Availability ==="]
    lines.extend(f"Level {entry.level}: {entry.free} slot(s) free." for entry in levels)
    return "\n".join(lines)


def render_full(is_full: bool) -> str:
    return "The garage is completely full." if is_full else "The garage still has space available."


def render_location(location: Location) -> str:
    return (
        f"Machine '{location.machine_id}' ({location.kind.label}) is on Level {location.level} "
        f"occupying slot(s): {_slot_list(location.slots)}"
    )


def render_error(exc: GarageError) -> str:
    if isinstance(exc, AlreadyParkedError):
        return f"Machine with ID {exc.machine_id} is already parked."
    if isinstance(exc, NoSpaceError):
        return f"No suitable space found for machine ID: {exc.machine_id}."
    if isinstance(exc, MachineNotFoundError):
        return f"Machine with ID {exc.machine_id} not found in the garage."
    return f"Error: {exc}"


# ------------------------------------------------------------------
# Command loop
# ------------------------------------------------------------------


class GarageShell:
    """Executes one command line at a time against a garage."""

    def __init__(self, garage: Garage) -> None:
        self._garage = garage
        self._handlers: dict[str, tuple[int, Callable[..., str]]] = {
            "add_machine": (2, self._add_machine),
            "unpark_machine": (1, self._unpark_machine),
            "check_availability": (0, self._check_availability),
            "check_full": (0, self._check_full),
            "locate_machine": (1, self._locate_machine),
            "commands": (0, lambda: COMMANDS_HELP),
        }

    def execute(self, line: str) -> tuple[str, bool]:
        """Run *line*; return the text to show and whether to keep going."""
        parts = line.split()
        if not parts:
            return "", True
        command, args = parts[0], parts[1:]
        if command == "quit":
            return "Exiting the Garage System. Have a great day!", False

        entry = self._handlers.get(command)
        if entry is None:
            return "Sorry, I don't recognize that command. Type 'commands' for options.", True
        arity, handler = entry
        if len(args) != arity:
            return f"Usage error: '{command}' takes {arity} argument(s). Type 'commands' for options.", True

        try:
            return handler(*args), True
        except GarageError as exc:
            _logger.debug("Command %r failed", line, exc_info=True)
            return render_error(exc), True

    def _add_machine(self, machine_id: str, kind: str) -> str:
        try:
            machine = Machine(identifier=machine_id, kind=kind)
        except ValidationError as exc:
            return f"Invalid machine: {exc.errors()[0]['msg']}"
        return render_placement(self._garage.store(machine))

    def _unpark_machine(self, machine_id: str) -> str:
        return render_release(self._garage.unpark(machine_id))

    def _check_availability(self) -> str:
        return render_availability(self._garage.availability())

    def _check_full(self) -> str:
        return render_full(self._garage.is_full())

    def _locate_machine(self, machine_id: str) -> str:
        try:
            return render_location(self._garage.locate(machine_id))
        except MachineNotFoundError as exc:
            return f"Could not find machine ID {exc.machine_id} in the garage."


def _prompt_positive_int(prompt: str, input_fn: Callable[[str], str]) -> int:
    while True:
        text = input_fn(prompt)
        try:
            value = int(text.strip())
        except ValueError:
            print(f"Please enter a whole number, got {text!r}.")
            continue
        if value > 0:
            return value
        print("Please enter a positive number.")


def build_config(
    args: argparse.Namespace,
    input_fn: Callable[[str], str] | None = None,
) -> GarageConfig:
    """Resolve garage dimensions from flags, then env vars, then prompts."""
    input_fn = input_fn or input
    levels = args.levels
    slots = args.slots_per_level
    if levels is None and "GARAGE_LEVELS" not in os.environ:
        levels = _prompt_positive_int("Number of levels in your parking lot garage: ", input_fn)
    if slots is None and "GARAGE_SLOTS_PER_LEVEL" not in os.environ:
        slots = _prompt_positive_int("Number of slots/spots on each level: ", input_fn)
    return GarageConfig.from_env(levels=levels, slots_per_level=slots)


def run_shell(
    garage: Garage,
    input_fn: Callable[[str], str] | None = None,
    output_fn: Callable[[str], None] | None = None,
) -> None:
    """Read commands until ``quit`` or end of input."""
    input_fn = input_fn or input
    output_fn = output_fn or print
    shell = GarageShell(garage)
    output_fn("\nWelcome to the Garage System!")
    output_fn(COMMANDS_HELP)
    while True:
        try:
            line = input_fn("\nEnter command: ")
        except EOFError:
            break
        text, keep_going = shell.execute(line)
        if text:
            output_fn(text)
        if not keep_going:
            break


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive multi-level garage")
    parser.add_argument("--levels", type=int, help="Number of levels (default: GARAGE_LEVELS or prompt)")
    parser.add_argument(
        "--slots-per-level",
        type=int,
        help="Slots on each level (default: GARAGE_SLOTS_PER_LEVEL or prompt)",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except GarageConfigError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt):
        return 1

    try:
        run_shell(Garage(config))
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
