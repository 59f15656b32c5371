"""Run several days' solutions as child processes and collect timings."""

from __future__ import annotations

import re
import subprocess
import sys
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from adventkit.day import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET, Day, all_days
from adventkit.timings import Timing, Timings

_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _solution_path(day: Day) -> Path:
    return Path(__file__).resolve().parent / "solutions" / f"day{day}.py"


def run_multi(days_to_run: Iterable[Day], is_release: bool, is_timed: bool) -> Optional[Timings]:
    """Run each requested day in order; return timings when ``is_timed``."""
    wanted = set(days_to_run)
    collected: List[Timing] = []
    need_space = False
    for day in all_days():
        if day not in wanted:
            continue
        if need_space:
            print()
        need_space = True
        print(f"{ANSI_BOLD}Day {day}{ANSI_RESET}")
        print("------")
        output = run_solution(day, is_timed, is_release)
        if not output:
            print("Not solved.")
        else:
            collected.append(parse_exec_time(output, day))
    if not is_timed:
        return None
    timings = Timings(data=collected)
    total_millis = timings.total_millis()
    print(
        f"\n{ANSI_BOLD}Total (Run):{ANSI_RESET} {ANSI_ITALIC}{total_millis:.2f}ms{ANSI_RESET}"
    )
    return timings


def _forward_stderr(stream) -> None:
    for line in stream:
        print(line.rstrip("\n"), file=sys.stderr)


def run_solution(day: Day, is_timed: bool, is_release: bool) -> List[str]:
    """Run the solution for ``day``, echo its output and return its stdout lines."""
    if not _solution_path(day).exists():
        return []
    command = [sys.executable]
    if is_release:
        command.append("-O")
    command.extend(["-m", f"adventkit.solutions.day{day}"])
    if is_timed:
        command.append("--time")

    output: List[str] = []
    with subprocess.Popen(
        command,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
    ) as process:
        forwarder = threading.Thread(target=_forward_stderr, args=(process.stderr,))
        forwarder.start()
        for line in process.stdout:
            line = line.rstrip("\n")
            print(line)
            output.append(line)
        forwarder.join()
        process.wait()
    return output


def parse_exec_time(output: Sequence[str], day: Day) -> Timing:
    """Extract per-part timings from a solution's output lines."""
    timing = Timing(day=day, part_1=None, part_2=None, total_nanos=0.0)
    for line in output:
        if " samples)" not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue
        timing_str, nanos = parsed
        part = line.split(":", 1)[0]
        if "Part 1" in part:
            timing.part_1 = timing_str
        elif "Part 2" in part:
            timing.part_2 = timing_str
        timing.total_nanos += nanos
    return timing


def _parse_float(text: str) -> Optional[float]:
    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    return float(text)


def _scaled(text: str, postfix: str, factor: float) -> Optional[float]:
    value = _parse_float(text.split(postfix, 1)[0])
    return None if value is None else value * factor


def parse_time(line: str) -> Optional[Tuple[str, float]]:
    """Return the timing text and its value in nanoseconds, or None."""
    str_timing = line.split(" samples)", 1)[0].split("(")[-1].split("@", 1)[0].strip()
    if "ns" in str_timing:
        nanos = _scaled(str_timing, "ns", 1.0)
    elif "µs" in str_timing:
        nanos = _scaled(str_timing, "µs", 1_000.0)
    elif "ms" in str_timing:
        nanos = _scaled(str_timing, "ms", 1_000_000.0)
    else:
        nanos = _scaled(str_timing, "s", 1_000_000_000.0)
    if nanos is None:
        return None
    return str_timing, nanos