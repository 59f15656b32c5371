"""Thin wrapper around the ``aoc`` command-line client."""

from __future__ import annotations

import os
import re
import subprocess
from typing import List, Optional, Sequence

from adventkit.day import Day

_YEAR_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_YEAR = 65535


class AocCommandError(Exception):
    """Base error for failed calls to the ``aoc`` client."""

    default_message = "aoc-cli failed."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class CommandNotFound(AocCommandError):
    """The ``aoc`` client is not installed."""

    default_message = "aoc-cli is not present in environment."


class CommandNotCallable(AocCommandError):
    """The ``aoc`` client could not be started."""

    default_message = "aoc-cli could not be called."


class BadExitStatus(AocCommandError):
    """The ``aoc`` client exited with a non-zero status."""

    default_message = "aoc-cli exited with a non-zero status."

    def __init__(self, completed: subprocess.CompletedProcess) -> None:
        super().__init__()
        self.completed = completed


def check() -> None:
    """Raise CommandNotFound if the ``aoc`` client is unavailable."""
    try:
        subprocess.run(["aoc", "-V"], capture_output=True, check=False)
    except OSError as exc:
        raise CommandNotFound() from exc


def read(day: Day) -> subprocess.CompletedProcess:
    """Show the puzzle description for ``day``."""
    args = build_args(
        "read", ["--description-only", "--puzzle-file", get_puzzle_path(day)], day
    )
    return _call_aoc_cli(args)


def download(day: Day) -> subprocess.CompletedProcess:
    """Download puzzle input and description for ``day``."""
    input_path = get_input_path(day)
    puzzle_path = get_puzzle_path(day)
    args = build_args(
        "download",
        ["--overwrite", "--input-file", input_path, "--puzzle-file", puzzle_path],
        day,
    )
    completed = _call_aoc_cli(args)
    print("---")
    print(f'🎄 Successfully wrote input to "{input_path}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_path}".')
    return completed


def submit(day: Day, part: int, result: str) -> subprocess.CompletedProcess:
    """Submit ``result`` as the answer to ``part`` of ``day``."""
    # The client expects part and answer after the subcommand.
    args = build_args("submit", [], day)
    args.extend([str(part), result])
    return _call_aoc_cli(args)


def get_input_path(day: Day) -> str:
    return f"data/inputs/{day}.txt"


def get_puzzle_path(day: Day) -> str:
    return f"data/puzzles/{day}.md"


def get_year() -> Optional[int]:
    """The year from the AOC_YEAR environment variable, if set and valid."""
    value = os.environ.get("AOC_YEAR")
    if value is None or not _YEAR_PATTERN.fullmatch(value):
        return None
    year = int(value)
    return year if year <= _MAX_YEAR else None


def build_args(command: str, args: Sequence[str], day: Day) -> List[str]:
    """Assemble the client arguments for ``command``."""
    cmd_args = list(args)
    year = get_year()
    if year is not None:
        cmd_args.extend(["--year", str(year)])
    cmd_args.extend(["--day", str(day), command])
    return cmd_args


def _call_aoc_cli(args: Sequence[str]) -> subprocess.CompletedProcess:
    try:
        completed = subprocess.run(["aoc", *args], check=False)
    except OSError as exc:
        raise CommandNotCallable() from exc
    if completed.returncode != 0:
        raise BadExitStatus(completed)
    return completed