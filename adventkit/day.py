"""Day numbers of advent and helpers for reading puzzle data files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import total_ordering
from pathlib import Path
from typing import Iterator, Optional

FIRST_DAY = 1
LAST_DAY = 25

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"

_SERVER_TIMEZONE = timezone(timedelta(hours=-5))
_DAY_PATTERN = re.compile(r"\+?[0-9]+")


class DayFromStrError(ValueError):
    """Raised when text cannot be parsed into a valid day."""

    def __init__(self, message: str = "expecting a day number between 1 and 25") -> None:
        super().__init__(message)


@total_ordering
@dataclass(frozen=True, eq=False)
class Day:
    """A valid day of advent, an integer from 1 to 25, shown as two digits."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("day must be an integer")
        if not FIRST_DAY <= self.value <= LAST_DAY:
            raise ValueError("invalid day number, expecting a value between 1 and 25")

    def __str__(self) -> str:
        return f"{self.value:02}"

    def __int__(self) -> int:
        return self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def _other_value(self, other: object) -> Optional[int]:
        if isinstance(other, Day):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self.value == value

    def __lt__(self, other: object) -> bool:
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self.value < value


def parse_day(text: str) -> Day:
    """Parse a day number such as ``"8"`` or ``"08"``."""
    if not _DAY_PATTERN.fullmatch(text):
        raise DayFromStrError()
    try:
        return Day(int(text))
    except ValueError as exc:
        raise DayFromStrError() from exc


def all_days() -> Iterator[Day]:
    """Yield every day of advent from the 1st to the 25th."""
    for number in range(FIRST_DAY, LAST_DAY + 1):
        yield Day(number)


def today(now: Optional[datetime] = None) -> Optional[Day]:
    """Return the current day on the puzzle server if it is December 1-25, else None."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(_SERVER_TIMEZONE)
    if local.month == 12 and local.day <= LAST_DAY:
        return Day(local.day)
    return None


def read_file(folder: str, day: Day) -> str:
    """Read ``data/<folder>/<day>.txt`` relative to the working directory."""
    return (Path.cwd() / "data" / folder / f"{day}.txt").read_text(encoding="utf-8")


def read_file_part(folder: str, day: Day, part: int) -> str:
    """Read ``data/<folder>/<day>-<part>.txt`` relative to the working directory."""
    return (Path.cwd() / "data" / folder / f"{day}-{part}.txt").read_text(encoding="utf-8")