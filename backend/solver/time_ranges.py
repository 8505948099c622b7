from __future__ import annotations

import re
from dataclasses import dataclass


_HHMM_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


@dataclass(frozen=True)
class TimeRange:
    start: str
    end: str
    start_min: int
    end_min: int

    @property
    def minutes(self) -> int:
        return self.end_min - self.start_min


def to_minutes(value: str) -> int | None:
    """Convert "HH:MM" to minutes since midnight, or None when it doesn't parse."""

    m = _HHMM_RE.match(str(value or ""))
    if m is None:
        return None
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 24 or minutes > 59 or (hours == 24 and minutes):
        return None
    return hours * 60 + minutes


def to_hhmm(minutes: int) -> str:
    h, m = divmod(int(minutes), 60)
    return f"{h:02d}:{m:02d}"


def parse_range(value: str | None) -> TimeRange | None:
    """Parse an "HH:MM-HH:MM" range.

    Returns None for anything that isn't exactly two parseable endpoints.
    Non-positive ranges still parse; callers decide whether to keep them.
    """

    if not value:
        return None
    parts = str(value).split("-")
    if len(parts) != 2:
        return None
    start, end = parts[0].strip(), parts[1].strip()
    if not start or not end:
        return None
    start_min = to_minutes(start)
    end_min = to_minutes(end)
    if start_min is None or end_min is None:
        return None
    return TimeRange(start=start, end=end, start_min=start_min, end_min=end_min)


def slot_key(day: str, start: str, end: str) -> str:
    return f"{day}_{start}_{end}"
