"""Benchmark timings per day, stored as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from adventkit.day import Day, DayFromStrError, parse_day

TIMINGS_FILE_PATH = "./data/timings.json"


class TimingsError(ValueError):
    """Raised when stored timings cannot be decoded."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _optional_part(data: dict, key: str) -> Optional[str]:
    if key not in data:
        raise TimingsError(f"Expected timing.{key} to be null or string.")
    value = data[key]
    return value if isinstance(value, str) else None


@dataclass
class Timing:
    """Benchmark times for a single day."""

    day: Day
    part_1: Optional[str] = None
    part_2: Optional[str] = None
    total_nanos: float = 0.0

    def to_json(self) -> dict:
        """Return a JSON-compatible mapping."""
        return {
            "day": str(self.day),
            "total_nanos": float(self.total_nanos),
            "part_1": self.part_1,
            "part_2": self.part_2,
        }

    @classmethod
    def from_json(cls, data: Any) -> "Timing":
        """Build a timing from a decoded JSON object."""
        if not isinstance(data, dict):
            raise TimingsError("Expected timing to be a JSON object.")
        day_text = data.get("day")
        if not isinstance(day_text, str):
            raise TimingsError("Expected timing.day to be a Day struct.")
        try:
            day = parse_day(day_text)
        except DayFromStrError as exc:
            raise TimingsError("Expected timing.day to be a Day struct.") from exc
        part_1 = _optional_part(data, "part_1")
        part_2 = _optional_part(data, "part_2")
        total_nanos = data.get("total_nanos")
        if not _is_number(total_nanos):
            raise TimingsError("Expected timing.total_nanos to be a number.")
        return cls(day=day, part_1=part_1, part_2=part_2, total_nanos=float(total_nanos))


@dataclass
class Timings:
    """Benchmark times for a set of days."""

    data: list = field(default_factory=list)

    def to_json(self) -> dict:
        """Return a JSON-compatible mapping."""
        return {"data": [timing.to_json() for timing in self.data]}

    @classmethod
    def from_json(cls, text: str) -> "Timings":
        """Decode timings from JSON text."""
        try:
            document = json.loads(text)
        except ValueError as exc:
            raise TimingsError("not valid JSON file.") from exc
        if not isinstance(document, dict):
            raise TimingsError("expected JSON document to be an object.")
        if "data" not in document:
            raise TimingsError("expected JSON document to have key `data`.")
        entries = document["data"]
        if not isinstance(entries, list):
            raise TimingsError("expected `json.data` to be an array.")
        return cls(data=[Timing.from_json(entry) for entry in entries])

    def store_file(self, path: Union[str, Path] = TIMINGS_FILE_PATH) -> None:
        """Write the timings to a JSON file."""
        Path(path).write_text(json.dumps(self.to_json()), encoding="utf-8")

    @classmethod
    def read_from_file(cls, path: Union[str, Path] = TIMINGS_FILE_PATH) -> "Timings":
        """Read timings from a JSON file, or return empty timings if that fails."""
        try:
            return cls.from_json(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return cls()

    def merge(self, new: "Timings") -> "Timings":
        """Combine with ``new``, whose entries win for days present in both."""
        data = list(new.data)
        seen = {timing.day for timing in data}
        data.extend(timing for timing in self.data if timing.day not in seen)
        data.sort(key=lambda timing: timing.day)
        return Timings(data=data)

    def total_millis(self) -> float:
        """Sum of all total durations in milliseconds."""
        return sum(timing.total_nanos for timing in self.data) / 1_000_000

    def is_day_complete(self, day: Day) -> bool:
        """True if both parts of ``day`` have a recorded timing."""
        return any(
            timing.day == day and timing.part_1 is not None and timing.part_2 is not None
            for timing in self.data
        )