from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Mapping

from schemas.placement import MoveTarget, Placement
from schemas.template import WeekTemplate
from solver.slot_builder import cell_is_free
from solver.time_ranges import slot_key


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlacementStore:
    """Scheduled (task, time range) records.

    Immutable: every mutation returns a new store. Identical (week, day, start,
    end) placements are allowed to coexist.
    """

    items: tuple[Placement, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def get(self, placement_id: str) -> Placement | None:
        for p in self.items:
            if p.id == placement_id:
                return p
        return None

    def add(self, placement: Placement) -> "PlacementStore":
        return PlacementStore(items=(placement, *self.items))

    def add_many(self, placements: Iterable[Placement]) -> "PlacementStore":
        return PlacementStore(items=(*placements, *self.items))

    def for_task(self, task_id: str) -> list[Placement]:
        return [p for p in self.items if p.task_id == task_id]

    def for_week(self, week: str) -> list[Placement]:
        return [p for p in self.items if p.week == week]

    def for_task_and_week(self, task_id: str, week: str) -> list[Placement]:
        return [p for p in self.items if p.task_id == task_id and p.week == week]

    def in_cell(self, week: str, day: str, start: str, end: str) -> list[Placement]:
        return [p for p in self.items if p.week == week and p.day == day and p.start == start and p.end == end]

    def remove_by_task(self, task_id: str) -> "PlacementStore":
        return PlacementStore(items=tuple(p for p in self.items if p.task_id != task_id))

    def remove_by_task_and_week(self, task_id: str, week: str) -> "PlacementStore":
        return PlacementStore(items=tuple(p for p in self.items if not (p.task_id == task_id and p.week == week)))

    def remove_by_id(self, placement_id: str) -> "PlacementStore":
        return PlacementStore(items=tuple(p for p in self.items if p.id != placement_id))

    def move(
        self,
        placement_id: str,
        target: MoveTarget,
        *,
        template: WeekTemplate,
        overrides: Mapping[str, bool] | None,
    ) -> tuple["PlacementStore", bool]:
        """Relocate a placement onto another cell.

        `template` and `overrides` belong to the destination week. A move onto a
        cell that isn't FREE, or of an unknown placement, leaves the store as is.
        """

        current = self.get(placement_id)
        if current is None:
            return self, False
        if not cell_is_free(template, overrides, day=target.day, start=target.start, end=target.end):
            logger.info(
                "Rejected move of placement=%s to %s %s",
                placement_id,
                target.week,
                slot_key(target.day, target.start, target.end),
            )
            return self, False

        moved = current.model_copy(
            update={"week": target.week, "day": target.day, "start": target.start, "end": target.end}
        )
        items = tuple(moved if p.id == placement_id else p for p in self.items)
        return PlacementStore(items=items), True

    def grouped_by_slot(self, week: str) -> dict[str, list[Placement]]:
        grouped: dict[str, list[Placement]] = defaultdict(list)
        for p in self.items:
            if p.week != week:
                continue
            grouped[slot_key(p.day, p.start, p.end)].append(p)
        return dict(grouped)
