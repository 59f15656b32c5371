"""Keep the benchmark table in the README up to date."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from adventkit.day import Day
from adventkit.timings import Timings

MARKER = "<!--- benchmarking table --->"
README_PATH = "README.md"


class ReadmeError(Exception):
    """Raised when the README cannot be read, parsed or written."""


@dataclass(frozen=True)
class TablePosition:
    """Start and end offsets of the benchmark table, markers included."""

    pos_start: int
    pos_end: int


def get_path_for_bin(day: Day) -> str:
    """Path of the solution linked from the table row for ``day``."""
    return f"./src/bin/{day}.rs"


def _marker_positions(readme: str) -> list:
    positions = []
    start = readme.find(MARKER)
    while start != -1:
        positions.append(start)
        start = readme.find(MARKER, start + len(MARKER))
    return positions


def locate_table(readme: str) -> TablePosition:
    """Find the span between the first and the last table marker."""
    positions = _marker_positions(readme)
    if len(positions) > 2:
        raise ReadmeError("too many occurences of marker in README.")
    if not positions:
        raise ReadmeError("Could not find table start position.")
    return TablePosition(pos_start=positions[0], pos_end=positions[-1] + len(MARKER))


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    """Render the markdown benchmark table, wrapped in markers."""
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 |",
        "| :---: | :---: | :---:  |",
    ]
    for timing in timings.data:
        part_1 = timing.part_1 if timing.part_1 is not None else "-"
        part_2 = timing.part_2 if timing.part_2 is not None else "-"
        lines.append(
            f"| [Day {int(timing.day)}]({get_path_for_bin(timing.day)}) "
            f"| `{part_1}` | `{part_2}` |"
        )
    lines.append("")
    lines.append(f"**Total: {total_millis:.2f}ms**")
    lines.append(MARKER)
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """Return ``text`` with its benchmark table replaced by a fresh one."""
    position = locate_table(text)
    table = construct_table("##", timings, total_millis)
    return text[: position.pos_start] + table + text[position.pos_end :]


def update(timings: Timings, path: Union[str, Path] = README_PATH) -> None:
    """Rewrite the benchmark table in the README file at ``path``."""
    readme_path = Path(path)
    try:
        readme = readme_path.read_bytes().decode("utf-8", errors="replace")
    except OSError as exc:
        raise ReadmeError(str(exc)) from exc
    updated = update_content(readme, timings, timings.total_millis())
    try:
        readme_path.write_text(updated, encoding="utf-8")
    except OSError as exc:
        raise ReadmeError(str(exc)) from exc