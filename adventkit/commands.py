"""Handlers behind each command of the command-line interface."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Optional

from adventkit import aoc_cli, readme_benchmarks
from adventkit.day import Day, all_days
from adventkit.run_multi import run_multi
from adventkit.timings import Timings

SOLUTIONS_DIR = Path(__file__).resolve().parent / "solutions"

MODULE_TEMPLATE = '''"""Solution for day %DAY_NUMBER%."""

from adventkit.day import Day
from adventkit.runner import run_day

DAY = Day(%DAY_NUMBER%)


def part_one(puzzle_input):
    return None


def part_two(puzzle_input):
    return None


def main(argv=None):
    run_day(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
'''

_AOC_MISSING = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)


def _fail(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def _require_aoc() -> None:
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        _fail(_AOC_MISSING)


def handle_all(is_release: bool) -> None:
    """Run every day's solution."""
    run_multi(all_days(), is_release, False)


def handle_download(day: Day) -> None:
    """Download input and puzzle description for ``day``."""
    _require_aoc()
    try:
        aoc_cli.download(day)
    except aoc_cli.AocCommandError as exc:
        _fail(f"failed to call aoc-cli: {exc}")


def handle_read(day: Day) -> None:
    """Show the puzzle description for ``day``."""
    _require_aoc()
    try:
        aoc_cli.read(day)
    except aoc_cli.AocCommandError as exc:
        _fail(f"failed to call aoc-cli: {exc}")


def _create_empty(path: str, kind: str) -> None:
    try:
        Path(path).open("w", encoding="utf-8").close()
    except OSError as exc:
        _fail(f"Failed to create {kind} file: {exc}")
    print(f'Created empty {kind} file "{path}"')


def handle_scaffold(day: Day, overwrite: bool) -> None:
    """Create the solution module and empty data files for ``day``."""
    input_path = f"data/inputs/{day}.txt"
    example_path = f"data/examples/{day}.txt"
    module_path = SOLUTIONS_DIR / f"day{day}.py"

    try:
        module_file = module_path.open("w" if overwrite else "x", encoding="utf-8")
    except OSError as exc:
        _fail(f"Failed to create module file: {exc}")

    with module_file:
        try:
            module_file.write(MODULE_TEMPLATE.replace("%DAY_NUMBER%", str(int(day))))
        except OSError as exc:
            _fail(f"Failed to write module contents: {exc}")
    print(f'Created module file "{module_path}"')

    _create_empty(input_path, "input")
    _create_empty(example_path, "example")

    print("---")
    print(f"🎄 Type `adventkit solve {day}` to run your solution.")


def handle_solve(
    day: Day, release: bool, dhat: bool, submit_part: Optional[int]
) -> None:
    """Run the solution for ``day`` in a child interpreter."""
    command = [sys.executable]
    if dhat:
        command.extend(["-X", "tracemalloc"])
    elif release:
        command.append("-O")
    command.extend(["-m", f"adventkit.solutions.day{day}"])
    if submit_part is not None:
        command.extend(["--submit", str(submit_part)])
    subprocess.run(command, check=False)


def handle_time(day: Optional[Day], run_all: bool, store: bool) -> None:
    """Benchmark solutions and optionally store the timings."""
    stored_timings = Timings.read_from_file()

    if day is not None:
        days_to_run = {day}
    elif run_all:
        days_to_run = set(all_days())
    else:
        days_to_run = {d for d in all_days() if not stored_timings.is_day_complete(d)}

    timings = run_multi(days_to_run, True, True)

    if store:
        merged = stored_timings.merge(timings)
        merged.store_file()
        print()
        try:
            readme_benchmarks.update(merged)
        except readme_benchmarks.ReadmeError:
            print("Failed to store updated benchmarks.", file=sys.stderr)
        else:
            print("Stored updated benchmarks.")