"""Day 3: picking the largest joltage from banks of batteries."""

from __future__ import annotations

from functools import reduce
from typing import List, Optional, Sequence, Tuple

from adventkit.day import Day
from adventkit.runner import run_day

DAY = Day(3)


def _digits(bank: str) -> List[int]:
    return [int(char) for char in bank if "0" <= char <= "9"]


def _max_battery(bank: str) -> Tuple[int, int]:
    """Position and value of the first largest digit in ``bank``."""
    best = 0
    best_index = 0
    for index, battery in enumerate(_digits(bank)):
        if battery > best:
            best, best_index = battery, index
            if best == 9:
                break
    return best_index, best


def _add_joltages(batteries: Sequence[int]) -> int:
    return reduce(lambda total, battery: total * 10 + battery, batteries, 0)


def _max_joltage(bank: str, n_batteries: int) -> List[int]:
    """Choose ``n_batteries`` digits, in order, forming the largest number."""
    chosen: List[int] = []
    index = 0
    while len(chosen) < n_batteries:
        offset, battery = _max_battery(bank[index:])
        index += offset + 1
        bank_remaining = len(bank) - index
        batteries_remaining = n_batteries - (len(chosen) + 1)
        if bank_remaining < batteries_remaining:
            tail = _digits(bank[index - 1 :])
            chosen = _max_joltage(bank[: index - 1], n_batteries - len(tail))
            chosen.extend(tail)
        else:
            chosen.append(battery)
    return chosen


def _total_joltage(puzzle_input: str, n_batteries: int) -> int:
    return sum(
        _add_joltages(_max_joltage(bank, n_batteries))
        for bank in puzzle_input.splitlines()
    )


def part_one(puzzle_input: str) -> int:
    """Total of the largest two-battery joltage of every bank."""
    return _total_joltage(puzzle_input, 2)


def part_two(puzzle_input: str) -> int:
    """Total of the largest twelve-battery joltage of every bank."""
    return _total_joltage(puzzle_input, 12)


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()