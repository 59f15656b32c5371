"""Day 1: counting how often a dial lands on or passes zero."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from adventkit.day import Day
from adventkit.runner import run_day

DAY = Day(1)

SAFE_NUMBERS = 100
START_POSITION = 50

_NUMBER = re.compile(r"[+-]?[0-9]+")


def _parse_turns(puzzle_input: str) -> List[int]:
    """Signed turn amounts: negative to the left, positive to the right."""
    turns = []
    for line in puzzle_input.splitlines():
        line = line.strip()
        direction, number = line[:1], line[1:]
        if not _NUMBER.fullmatch(number):
            continue
        if direction == "L":
            turns.append(-int(number))
        elif direction == "R":
            turns.append(int(number))
    return turns


def part_one(puzzle_input: str) -> int:
    """Number of turns that end with the dial at zero."""
    position = START_POSITION
    zero_positions = 0
    for turn in _parse_turns(puzzle_input):
        position = (position + turn) % SAFE_NUMBERS
        zero_positions += position == 0
    return zero_positions


def part_two(puzzle_input: str) -> int:
    """Number of clicks at which the dial points at zero."""
    position = START_POSITION
    zero_passes = 0
    for turn in _parse_turns(puzzle_input):
        if turn >= 0:
            zero_passes += (position + turn) // SAFE_NUMBERS
        else:
            distance_to_zero = (SAFE_NUMBERS - position) % SAFE_NUMBERS
            zero_passes += (distance_to_zero - turn) // SAFE_NUMBERS
        position = (position + turn) % SAFE_NUMBERS
    return zero_passes


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()