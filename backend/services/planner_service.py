from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Callable

from core.config import settings
from core.ids import new_id as default_new_id
from schemas.document import PlannerDocument
from schemas.placement import MoveTarget, Placement
from schemas.task import Task, TaskCreate, TaskUpdate
from schemas.template import TemplateSet, WeekTemplate
from services.chunker import generate_chunks
from services.document_io import parse_document, parse_template_document
from services.document_repository import DocumentRepository
from services.errors import (
    PlacementNotFoundError,
    PlacementsExistError,
    SlotNotFreeError,
    SlotOccupiedError,
    TaskNotFoundError,
)
from services.planner_state import PlannerState
from services.week_parity import week_key_for
from solver.greedy_scheduler import allocate
from solver.slot_builder import Slot, build_slots, cell_is_free


logger = logging.getLogger(__name__)

# Planner state is a single document; mutations are load-modify-save.
_WRITE_LOCK = threading.Lock()

_NULLABLE_TASK_FIELDS = frozenset({"due_date", "estimated_min"})


@dataclass(frozen=True)
class AutoScheduleOutcome:
    task_id: str
    week: str
    requested_minutes: int
    placed_minutes: int
    replaced: int
    placements: list[Placement]


class PlannerService:
    def __init__(
        self,
        repo: DocumentRepository,
        *,
        new_id: Callable[[], str] = default_new_id,
        today: Callable[[], date] = date.today,
    ):
        self.repo = repo
        self.new_id = new_id
        self.today = today

    # ----- state -----

    def state(self) -> PlannerState:
        doc = self.repo.load()
        if doc is None:
            return PlannerState(week1_start_sunday=settings.default_week1_start_sunday)
        return PlannerState.from_document(doc)

    def _commit(self, state: PlannerState) -> PlannerState:
        self.repo.save(state.to_document())
        return state

    def _require_task(self, state: PlannerState, task_id: str) -> Task:
        task = state.tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError()
        return task

    # ----- templates -----

    def templates(self) -> TemplateSet:
        return self.state().templates

    def replace_template(self, week: str, template: WeekTemplate) -> TemplateSet:
        with _WRITE_LOCK:
            state = self.state()
            templates = state.templates.model_copy(update={week: template})
            self._commit(replace(state, templates=templates))
        logger.info("Replaced %s template (%d rows)", week, len(template.grid))
        return templates

    def import_templates(self, raw: Any) -> TemplateSet:
        # Parse before taking the lock: a rejected upload must not touch state.
        templates = parse_template_document(raw)
        with _WRITE_LOCK:
            state = self.state()
            self._commit(replace(state, templates=templates))
        logger.info(
            "Imported templates week1=%d rows week2=%d rows",
            len(templates.week1.grid),
            len(templates.week2.grid),
        )
        return templates

    def free_slots(self, week: str) -> list[Slot]:
        state = self.state()
        return build_slots(state.templates.for_week(week), state.overrides.for_week(week))

    # ----- overrides -----

    def overrides(self) -> dict[str, dict[str, bool]]:
        return self.state().overrides.to_dict()

    def toggle_override(self, week: str, key: str) -> dict[str, bool]:
        with _WRITE_LOCK:
            state = self.state()
            overrides = state.overrides.toggle(week, key)
            self._commit(replace(state, overrides=overrides))
        forced = overrides.is_forced_free(week, key)
        logger.info("Override %s %s -> %s", week, key, "forced free" if forced else "cleared")
        return overrides.for_week(week)

    # ----- tasks -----

    def list_tasks(self) -> list[Task]:
        return list(self.state().tasks)

    def create_task(self, draft: TaskCreate) -> Task:
        with _WRITE_LOCK:
            state = self.state()
            tasks, task = state.tasks.add(draft, new_id=self.new_id)
            self._commit(replace(state, tasks=tasks))
        return task

    def update_task(self, task_id: str, patch: TaskUpdate) -> Task:
        # Explicit nulls clear nullable fields; elsewhere they mean "leave as is".
        changes = {
            k: v
            for k, v in patch.model_dump(exclude_unset=True).items()
            if v is not None or k in _NULLABLE_TASK_FIELDS
        }
        with _WRITE_LOCK:
            state = self.state()
            self._require_task(state, task_id)
            tasks, task = state.tasks.update(task_id, changes)
            self._commit(replace(state, tasks=tasks))
        return task

    def delete_task(self, task_id: str) -> int:
        """Delete a task and, with it, every placement that points at it."""

        with _WRITE_LOCK:
            state = self.state()
            self._require_task(state, task_id)
            dropped = len(state.placements.for_task(task_id))
            self._commit(
                replace(
                    state,
                    tasks=state.tasks.remove(task_id),
                    placements=state.placements.remove_by_task(task_id),
                )
            )
        logger.info("Deleted task=%s with %d placement(s)", task_id, dropped)
        return dropped

    def toggle_done(self, task_id: str, *, remove_placements: bool = False) -> Task:
        with _WRITE_LOCK:
            state = self.state()
            task = self._require_task(state, task_id)
            next_status = "todo" if task.status == "done" else "done"
            placements = state.placements
            if next_status == "done" and remove_placements:
                placements = placements.remove_by_task(task_id)
            tasks, task = state.tasks.update(task_id, {"status": next_status})
            self._commit(replace(state, tasks=tasks, placements=placements))
        return task

    # ----- scheduling -----

    def auto_schedule(self, task_id: str, *, week: str, start_day: str, overwrite: bool = False) -> AutoScheduleOutcome:
        """Purge-then-schedule one task into one week.

        Existing placements of the task in `week` are only replaced when
        `overwrite` is set; otherwise PlacementsExistError asks the caller to
        confirm. Done tasks are left alone.
        """

        with _WRITE_LOCK:
            state = self.state()
            task = self._require_task(state, task_id)
            if task.status == "done":
                logger.info("Skipped auto-schedule for done task=%s", task_id)
                return AutoScheduleOutcome(task_id, week, 0, 0, 0, [])

            existing = state.placements.for_task_and_week(task_id, week)
            if existing and not overwrite:
                raise PlacementsExistError(
                    f'"{task.title or "This task"}" already has scheduled time in {week}. Overwrite its placements?'
                )
            placements = state.placements.remove_by_task_and_week(task_id, week)

            result = allocate(
                task_id=task_id,
                estimated_minutes=task.estimated_min,
                template=state.templates.for_week(week),
                overrides=state.overrides.for_week(week),
                week=week,
                start_day=start_day,
                new_id=self.new_id,
            )
            self._commit(replace(state, placements=placements.add_many(result.placements)))

        if result.placed_minutes < result.requested_minutes:
            logger.info(
                "Task=%s: placed %d of %d minutes in %s",
                task_id,
                result.placed_minutes,
                result.requested_minutes,
                week,
            )
        return AutoScheduleOutcome(
            task_id=task_id,
            week=week,
            requested_minutes=result.requested_minutes,
            placed_minutes=result.placed_minutes,
            replaced=len(existing),
            placements=result.placements,
        )

    def quick_add(
        self,
        *,
        week: str,
        day: str,
        start: str,
        end: str,
        draft: TaskCreate,
        allow_shared: bool = False,
    ) -> tuple[Task, Placement]:
        """Create a task and place it on one whole FREE cell."""

        with _WRITE_LOCK:
            state = self.state()
            if not cell_is_free(state.templates.for_week(week), state.overrides.for_week(week), day=day, start=start, end=end):
                raise SlotNotFreeError()
            if state.placements.in_cell(week, day, start, end) and not allow_shared:
                raise SlotOccupiedError("This block already has tasks. Add another here anyway?")

            tasks, task = state.tasks.add(draft, new_id=self.new_id)
            placement = Placement(id=self.new_id(), task_id=task.id, week=week, day=day, start=start, end=end)
            self._commit(replace(state, tasks=tasks, placements=state.placements.add(placement)))
        return task, placement

    # ----- placements -----

    def list_placements(self, week: str | None = None) -> list[Placement]:
        placements = self.state().placements
        if week is None:
            return list(placements)
        return placements.for_week(week)

    def placements_by_slot(self, week: str) -> dict[str, list[Placement]]:
        return self.state().placements.grouped_by_slot(week)

    def move_placement(self, placement_id: str, target: MoveTarget) -> tuple[bool, Placement | None]:
        with _WRITE_LOCK:
            state = self.state()
            placements, moved = state.placements.move(
                placement_id,
                target,
                template=state.templates.for_week(target.week),
                overrides=state.overrides.for_week(target.week),
            )
            if moved:
                self._commit(replace(state, placements=placements))
        return moved, placements.get(placement_id)

    def delete_placement(self, placement_id: str) -> None:
        with _WRITE_LOCK:
            state = self.state()
            if state.placements.get(placement_id) is None:
                raise PlacementNotFoundError()
            self._commit(replace(state, placements=state.placements.remove_by_id(placement_id)))

    # ----- calendar -----

    def current_week(self) -> tuple[str, str, date]:
        anchor = self.state().week1_start_sunday
        today = self.today()
        return week_key_for(anchor, today), anchor, today

    def set_anchor(self, week1_start_sunday: str) -> str:
        with _WRITE_LOCK:
            state = self.state()
            self._commit(replace(state, week1_start_sunday=week1_start_sunday))
        return week1_start_sunday

    # ----- chunker -----

    def preview_chunks(self, *, title: str, due_date: str | None, total_hours: float, kind: str) -> list[Task]:
        return generate_chunks(title=title, due_date=due_date, total_hours=total_hours, kind=kind, new_id=self.new_id)

    def accept_chunks(self, chunks: list[Task]) -> list[Task]:
        """Add edited chunks as new tasks.

        Every chunk gets a fresh id, so accepting the same preview twice adds
        two distinct sets of tasks.
        """

        accepted = [c.model_copy(update={"id": self.new_id(), "status": "todo"}) for c in chunks]
        with _WRITE_LOCK:
            state = self.state()
            self._commit(replace(state, tasks=state.tasks.add_many(accepted)))
        logger.info("Accepted %d chunk(s)", len(accepted))
        return accepted

    # ----- document -----

    def export_document(self) -> PlannerDocument:
        return self.state().to_document()

    def import_document(self, raw: Any) -> PlannerDocument:
        doc = parse_document(raw)
        with _WRITE_LOCK:
            self._commit(PlannerState.from_document(doc))
        logger.info("Imported planner document: %d task(s), %d placement(s)", len(doc.tasks), len(doc.placements))
        return doc
