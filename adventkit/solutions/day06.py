"""Day 6: solving a worksheet of column-wise arithmetic problems."""

from __future__ import annotations

import math
import re
from typing import List, Optional, Sequence

from adventkit.day import Day
from adventkit.runner import run_day

DAY = Day(6)

_NUMBER = re.compile(r"\+?[0-9]+")
_OPERATIONS = {"+": sum, "*": math.prod}
_IDENTITY = {"+": 0, "*": 1}


def _numbers(line: str) -> List[int]:
    return [int(token) for token in line.split() if _NUMBER.fullmatch(token)]


def part_one(puzzle_input: str) -> Optional[int]:
    """Grand total when each column of numbers is read row by row."""
    lines = puzzle_input.splitlines()
    if len(lines) < 4:
        return None
    operations = [token for token in lines[-1].split() if token in _OPERATIONS]
    rows = [_numbers(line) for line in lines[:3]]
    fourth = _numbers(lines[3]) if len(lines) > 4 else None
    total = 0
    for index, operation in enumerate(operations):
        operands = [row[index] for row in rows]
        operands.append(fourth[index] if fourth is not None else _IDENTITY[operation])
        total += _OPERATIONS[operation](operands)
    return total


def part_two(puzzle_input: str) -> int:
    """Grand total when numbers are read column by column, right to left."""
    lines = puzzle_input.splitlines()
    total = 0
    operands: List[int] = []
    for column in reversed(range(len(lines[0]))):
        operand = 0
        for line in lines:
            char = line[column]
            if "0" <= char <= "9":
                operand = operand * 10 + int(char)
            elif char in _OPERATIONS:
                operands.append(operand)
                total += _OPERATIONS[char](operands)
                operands.clear()
                break
        else:
            if operand > 0:
                operands.append(operand)
    return total


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()