"""Day 4: finding paper rolls that a forklift can reach."""

from __future__ import annotations

from typing import Optional, Sequence, Set, Tuple

from adventkit.day import Day
from adventkit.runner import run_day

DAY = Day(4)

Coordinate = Tuple[int, int]

_OFFSETS = [
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
]
_MAX_NEIGHBOURS = 4


def _parse_rolls(puzzle_input: str) -> Set[Coordinate]:
    return {
        (x, y)
        for y, line in enumerate(puzzle_input.splitlines())
        for x, char in enumerate(line)
        if char == "@"
    }


def _neighbour_count(rolls: Set[Coordinate], roll: Coordinate) -> int:
    x, y = roll
    return sum((x + dx, y + dy) in rolls for dx, dy in _OFFSETS)


def _accessible(rolls: Set[Coordinate]) -> Set[Coordinate]:
    return {roll for roll in rolls if _neighbour_count(rolls, roll) < _MAX_NEIGHBOURS}


def part_one(puzzle_input: str) -> int:
    """Number of rolls with fewer than four neighbouring rolls."""
    return len(_accessible(_parse_rolls(puzzle_input)))


def part_two(puzzle_input: str) -> int:
    """Number of rolls removed by repeatedly taking every accessible roll."""
    rolls = _parse_rolls(puzzle_input)
    removed = 0
    while True:
        accessible = _accessible(rolls)
        if not accessible:
            return removed
        removed += len(accessible)
        rolls -= accessible


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()