from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_planner
from schemas.placement import AutoScheduleRequest, AutoScheduleResult
from schemas.task import Task, TaskCreate, TaskUpdate, ToggleDoneRequest
from services.planner_service import PlannerService


router = APIRouter()


@router.get("/", response_model=list[Task])
def list_tasks(planner: PlannerService = Depends(get_planner)) -> list[Task]:
    return planner.list_tasks()


@router.post("/", response_model=Task)
def create_task(payload: TaskCreate, planner: PlannerService = Depends(get_planner)) -> Task:
    return planner.create_task(payload)


@router.patch("/{task_id}", response_model=Task)
def update_task(task_id: str, payload: TaskUpdate, planner: PlannerService = Depends(get_planner)) -> Task:
    return planner.update_task(task_id, payload)


@router.delete("/{task_id}")
def delete_task(task_id: str, planner: PlannerService = Depends(get_planner)) -> dict:
    dropped = planner.delete_task(task_id)
    return {"ok": True, "placements_removed": dropped}


@router.post("/{task_id}/toggle-done", response_model=Task)
def toggle_done(
    task_id: str,
    payload: ToggleDoneRequest | None = None,
    planner: PlannerService = Depends(get_planner),
) -> Task:
    remove = payload.remove_placements if payload is not None else False
    return planner.toggle_done(task_id, remove_placements=remove)


@router.post("/{task_id}/auto-schedule", response_model=AutoScheduleResult)
def auto_schedule(
    task_id: str,
    payload: AutoScheduleRequest,
    planner: PlannerService = Depends(get_planner),
) -> AutoScheduleResult:
    outcome = planner.auto_schedule(task_id, week=payload.week, start_day=payload.start_day, overwrite=payload.overwrite)
    return AutoScheduleResult(
        task_id=outcome.task_id,
        week=outcome.week,
        requested_minutes=outcome.requested_minutes,
        placed_minutes=outcome.placed_minutes,
        replaced=outcome.replaced,
        placements=outcome.placements,
    )
