from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping

from core.ids import new_id as default_new_id
from schemas.placement import Placement
from schemas.template import WeekTemplate
from solver.slot_builder import DAYS, Slot, build_slots
from solver.time_ranges import to_hhmm


logger = logging.getLogger(__name__)

MIN_BLOCK_MINUTES = 15


@dataclass(frozen=True)
class ScheduleOutcome:
    placements: list[Placement]
    requested_minutes: int
    placed_minutes: int

    @property
    def unplaced_minutes(self) -> int:
        return self.requested_minutes - self.placed_minutes


def coerce_minutes(value: Any) -> int:
    """Best-effort conversion of an estimate to whole, non-negative minutes.

    Anything that isn't a finite number (or a numeric string) becomes 0.
    """

    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
    try:
        n = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(n) or n <= 0:
        return 0
    return int(math.floor(n))


def rotated_days(start_day: str) -> list[str]:
    if start_day not in DAYS:
        return list(DAYS)
    i = DAYS.index(start_day)
    return list(DAYS[i:]) + list(DAYS[:i])


def order_slots(slots: list[Slot], start_day: str) -> list[Slot]:
    position = {day: i for i, day in enumerate(rotated_days(start_day))}
    return sorted(slots, key=lambda s: (position[s.day], s.start_min))


def allocate(
    *,
    task_id: str,
    estimated_minutes: Any,
    template: WeekTemplate,
    overrides: Mapping[str, bool] | None,
    week: str,
    start_day: str,
    new_id: Callable[[], str] = default_new_id,
) -> ScheduleOutcome:
    """Greedily pack a task's estimate into the week's free slots.

    First-fit over slots ordered from `start_day` onward. Other tasks'
    placements are not consulted, so two tasks can land in the same slot.
    Slots that would receive less than MIN_BLOCK_MINUTES are skipped, and
    whatever can't be placed is dropped.
    """

    requested = coerce_minutes(estimated_minutes)
    slots = order_slots(build_slots(template, overrides), start_day)

    remaining = requested
    out: list[Placement] = []
    i = 0
    while i < len(slots) and remaining > 0:
        s = slots[i]
        take = min(remaining, s.minutes)
        if take < MIN_BLOCK_MINUTES:
            i += 1
            continue

        end_min = s.start_min + take
        out.append(
            Placement(
                id=new_id(),
                task_id=task_id,
                week=week,
                day=s.day,
                start=to_hhmm(s.start_min),
                end=to_hhmm(end_min),
            )
        )
        remaining -= take

        if take == s.minutes:
            del slots[i]
            continue

        # Shrink to the unused tail; only reachable again within this call.
        slots[i] = replace(s, start=to_hhmm(end_min), start_min=end_min, minutes=s.end_min - end_min)
        i += 1

    placed = requested - remaining
    logger.debug(
        "Allocated task=%s week=%s start_day=%s requested=%d placed=%d blocks=%d",
        task_id,
        week,
        start_day,
        requested,
        placed,
        len(out),
    )
    return ScheduleOutcome(placements=out, requested_minutes=requested, placed_minutes=placed)


def auto_schedule(
    *,
    task_id: str,
    estimated_minutes: Any,
    template: WeekTemplate,
    overrides: Mapping[str, bool] | None,
    week: str,
    start_day: str,
    new_id: Callable[[], str] = default_new_id,
) -> list[Placement]:
    return allocate(
        task_id=task_id,
        estimated_minutes=estimated_minutes,
        template=template,
        overrides=overrides,
        week=week,
        start_day=start_day,
        new_id=new_id,
    ).placements
