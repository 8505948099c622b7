from __future__ import annotations

import itertools
from typing import Callable

from schemas.template import TemplateRow, WeekTemplate
from solver.slot_builder import DAYS


def fixed_days(label: str = "Lunch", **overrides: str | None) -> dict[str, str | None]:
    days: dict[str, str | None] = {d: label for d in DAYS}
    days.update(overrides)
    return days


def row(start: str, end: str, days: dict[str, str | None] | None = None) -> TemplateRow:
    return TemplateRow(start=start, end=end, days=days or {})


def template(*rows: TemplateRow) -> WeekTemplate:
    return WeekTemplate(grid=list(rows))


def sequential_ids(prefix: str = "id") -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


def template_payload() -> dict:
    return {
        "grid": [
            {
                "start": "07:30",
                "end": "08:00",
                "days": {d: "Breakfast" for d in DAYS},
            },
            {
                "start": "08:00",
                "end": "10:00",
                "days": {
                    "Sunday": None,
                    "Monday": "Block A",
                    "Tuesday": "Study Hall",
                    "Wednesday": "Advisory",
                    "Thursday": "Free period",
                    "Friday": "Block C",
                    "Saturday": "",
                },
            },
        ],
        "notes": ["Lights out at 22:30"],
    }
