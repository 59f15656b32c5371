"""Day 2: summing product IDs made of repeated digit sequences."""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Sequence

from adventkit.day import Day
from adventkit.runner import run_day

DAY = Day(2)

_NUMBER = re.compile(r"\+?[0-9]+")


def _parse_ranges(puzzle_input: str) -> List[range]:
    ranges = []
    for item in puzzle_input.strip().split(","):
        start, sep, end = item.partition("-")
        if sep and _NUMBER.fullmatch(start) and _NUMBER.fullmatch(end):
            ranges.append(range(int(start), int(end) + 1))
    return ranges


def _ids(puzzle_input: str) -> Iterator[int]:
    for id_range in _parse_ranges(puzzle_input):
        yield from id_range


def _is_silly(number: int) -> bool:
    """True if the digits are one sequence repeated exactly twice."""
    digits = str(number)
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def _is_really_silly(number: int) -> bool:
    """True if the digits are one sequence repeated at least twice."""
    digits = str(number)
    length = len(digits)
    return any(
        length % size == 0 and digits == digits[:size] * (length // size)
        for size in range(1, length // 2 + 1)
    )


def part_one(puzzle_input: str) -> int:
    return sum(number for number in _ids(puzzle_input) if _is_silly(number))


def part_two(puzzle_input: str) -> int:
    return sum(number for number in _ids(puzzle_input) if _is_really_silly(number))


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()