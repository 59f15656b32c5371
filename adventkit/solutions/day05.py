"""Day 5: checking ingredient IDs against fresh ranges."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from adventkit.day import Day
from adventkit.runner import run_day

DAY = Day(5)

_NUMBER = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True, order=True)
class _Range:
    start: int
    end: int

    def __contains__(self, element: int) -> bool:
        return self.start <= element <= self.end

    def overlaps(self, other: "_Range") -> bool:
        """True if either end of ``other`` lies within this range."""
        return other.start in self or other.end in self

    def joined(self, other: "_Range") -> "_Range":
        if not self.overlaps(other):
            return self
        return _Range(min(self.start, other.start), max(self.end, other.end))

    def __len__(self) -> int:
        return self.end - self.start + 1


def _parse_db(puzzle_input: str) -> Optional[Tuple[List[_Range], List[int]]]:
    fresh: List[_Range] = []
    ingredients: List[int] = []
    for line in puzzle_input.splitlines():
        line = line.strip()
        if "-" in line:
            start, _, end = line.partition("-")
            if not (_NUMBER.fullmatch(start) and _NUMBER.fullmatch(end)):
                return None
            fresh.append(_Range(int(start), int(end)))
        elif _NUMBER.fullmatch(line):
            ingredients.append(int(line))
    fresh.sort()
    return fresh, ingredients


def part_one(puzzle_input: str) -> Optional[int]:
    """Number of available ingredients that fall in some fresh range."""
    parsed = _parse_db(puzzle_input)
    if parsed is None:
        return None
    fresh, ingredients = parsed
    return sum(any(ingredient in r for r in fresh) for ingredient in ingredients)


def part_two(puzzle_input: str) -> Optional[int]:
    """Number of distinct IDs covered by the fresh ranges."""
    parsed = _parse_db(puzzle_input)
    if parsed is None:
        return None
    fresh, _ = parsed
    merged: List[_Range] = []
    for fresh_range in fresh:
        new_range = fresh_range
        for other in fresh:
            new_range = new_range.joined(other)
        for position, other in enumerate(merged):
            if new_range.overlaps(other):
                merged[position] = other.joined(new_range)
                break
        else:
            merged.append(new_range)
    return sum(len(r) for r in merged)


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()