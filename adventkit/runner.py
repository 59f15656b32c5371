"""Run solution parts, time them and optionally submit answers."""

from __future__ import annotations

import re
import sys
import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Optional, Sequence, Tuple

from adventkit import aoc_cli
from adventkit.day import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET, Day, read_file

_NANOS_PER_SECOND = 1_000_000_000
_MIN_ITERATIONS = 10
_MAX_ITERATIONS = 10_000
_U8_PATTERN = re.compile(r"\+?[0-9]+")
_USAGE = "Unexpected command-line input. Format: cargo solve 1 --submit 1"


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _args(argv: Optional[Sequence[str]]) -> list:
    return list(sys.argv[1:] if argv is None else argv)


def run_part(
    func: Callable[[Any], Any],
    puzzle_input: Any,
    day: Day,
    part: int,
    argv: Optional[Sequence[str]] = None,
) -> None:
    """Run one part, print its result and timing, and submit it if asked."""
    args = _args(argv)
    part_str = f"Part {part}"
    result, duration, samples = run_timed(
        func,
        puzzle_input,
        lambda value: print_result(value, part_str, ""),
        "--time" in args,
    )
    print_result(result, part_str, format_duration(duration, samples))
    if result is not None:
        try:
            submit_result(result, day, part, args)
        except aoc_cli.AocCommandError as exc:
            print(f"failed to call aoc-cli: {exc}", file=sys.stderr)


def run_timed(
    func: Callable[[Any], Any],
    puzzle_input: Any,
    hook: Callable[[Any], None],
    timed: bool = False,
) -> Tuple[Any, int, int]:
    """Run ``func`` once; when ``timed``, also bench it.

    Returns the result, the duration in nanoseconds and the sample count.
    """
    start = time.perf_counter_ns()
    result = func(puzzle_input)
    base_time = time.perf_counter_ns() - start
    hook(result)
    if timed:
        duration, samples = bench(func, puzzle_input, base_time)
    else:
        duration, samples = base_time, 1
    return result, duration, samples


def bench(func: Callable[[Any], Any], puzzle_input: Any, base_time: int) -> Tuple[int, int]:
    """Run ``func`` repeatedly for about a second; return mean nanoseconds and samples."""
    _write(f" > {ANSI_ITALIC}benching{ANSI_RESET}")
    iterations = _NANOS_PER_SECOND // max(base_time, 10)
    iterations = min(max(iterations, _MIN_ITERATIONS), _MAX_ITERATIONS)
    total = 0
    for _ in range(iterations):
        start = time.perf_counter_ns()
        func(puzzle_input)
        total += time.perf_counter_ns() - start
    return total // iterations, iterations


def _format_nanos(nanos: int) -> str:
    for divisor, unit in ((10**9, "s"), (10**6, "ms"), (10**3, "µs"), (1, "ns")):
        if nanos >= divisor or divisor == 1:
            value = (Decimal(nanos) / Decimal(divisor)).quantize(
                Decimal("0.1"), rounding=ROUND_HALF_UP
            )
            return f"{value}{unit}"
    raise AssertionError("unreachable")


def format_duration(duration: int, samples: int) -> str:
    """Format a duration in nanoseconds, with the sample count if benched."""
    text = _format_nanos(duration)
    if samples == 1:
        return f" ({text})"
    return f" ({text} @ {samples} samples)"


def print_result(result: Any, part: str, duration_str: str) -> None:
    """Print an intermediate result (no duration) or a final result line."""
    intermediate = not duration_str
    if result is None:
        if intermediate:
            _write(f"{part}: ✖")
        else:
            _write(f"\r{part}: ✖             \n")
        return
    text = str(result)
    if "\n" in text:
        line = f"{part}: ▼ {duration_str}"
        _write(line if intermediate else f"\r{line}\n{text}\n")
    else:
        line = f"{part}: {ANSI_BOLD}{text}{ANSI_RESET}{duration_str}"
        _write(line if intermediate else f"\r{line}\n")


def _submit_part(args: Sequence[str]) -> int:
    """Return the part number following ``--submit``; exit on malformed input."""
    index = args.index("--submit") + 1
    value = args[index] if index < len(args) else ""
    if _U8_PATTERN.fullmatch(value) and int(value) <= 255:
        return int(value)
    print(_USAGE, file=sys.stderr)
    raise SystemExit(1)


def submit_result(
    result: Any, day: Day, part: int, argv: Optional[Sequence[str]] = None
):
    """Submit ``result`` if ``--submit <part>`` was given for this part.

    Returns the finished client process, or None when nothing was submitted.
    """
    args = _args(argv)
    if "--submit" not in args:
        return None
    if _submit_part(args) != part:
        return None
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        print(
            'command "aoc" not found or not callable. '
            'Try running "cargo install aoc-cli" to install it.',
            file=sys.stderr,
        )
        raise SystemExit(1)
    print("Submitting result via aoc-cli...")
    return aoc_cli.submit(day, part, str(result))


def run_day(
    day: Day,
    part_one: Optional[Callable[[str], Any]],
    part_two: Optional[Callable[[str], Any]],
    argv: Optional[Sequence[str]] = None,
) -> None:
    """Read the day's input and run the given parts on it."""
    args = _args(argv)
    puzzle_input = read_file("inputs", day)
    for part, func in ((1, part_one), (2, part_two)):
        if func is not None:
            run_part(func, puzzle_input, day, part, args)