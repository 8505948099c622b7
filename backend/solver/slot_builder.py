from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from schemas.template import WeekTemplate
from solver.block_classifier import is_free
from solver.time_ranges import parse_range, slot_key


DAYS: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


@dataclass(frozen=True)
class Slot:
    day: str
    start: str
    end: str
    start_min: int
    end_min: int
    minutes: int

    @property
    def id(self) -> str:
        return slot_key(self.day, self.start, self.end)


def day_index(day: str) -> int:
    try:
        return DAYS.index(day)
    except ValueError:
        return -1


def build_slots(template: WeekTemplate, overrides: Mapping[str, bool] | None = None) -> list[Slot]:
    """Derive the week's FREE slots, ordered by day then start time.

    Rows whose range doesn't parse, or isn't positive, contribute nothing.
    """

    overrides = overrides or {}
    slots: list[Slot] = []
    for row in template.grid:
        rng = parse_range(f"{row.start}-{row.end}")
        if rng is None or rng.minutes <= 0:
            continue
        days = row.days or {}
        for day in DAYS:
            label = days.get(day)
            forced = bool(overrides.get(slot_key(day, rng.start, rng.end)))
            if not is_free(label, forced_free=forced):
                continue
            slots.append(
                Slot(
                    day=day,
                    start=rng.start,
                    end=rng.end,
                    start_min=rng.start_min,
                    end_min=rng.end_min,
                    minutes=rng.minutes,
                )
            )

    slots.sort(key=lambda s: (day_index(s.day), s.start_min))
    return slots


def cell_is_free(
    template: WeekTemplate,
    overrides: Mapping[str, bool] | None,
    *,
    day: str,
    start: str,
    end: str,
) -> bool:
    """Whether the addressed template cell is currently FREE.

    A cell that isn't in the template, or whose row range is unusable, is not free.
    """

    if day_index(day) < 0:
        return False
    overrides = overrides or {}
    for row in template.grid:
        if row.start != start or row.end != end:
            continue
        rng = parse_range(f"{row.start}-{row.end}")
        if rng is None or rng.minutes <= 0:
            continue
        label = (row.days or {}).get(day)
        return is_free(label, forced_free=bool(overrides.get(slot_key(day, start, end))))
    return False
