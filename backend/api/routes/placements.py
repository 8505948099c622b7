from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from api.deps import get_planner
from schemas.placement import MoveResult, MoveTarget, Placement, QuickAddRequest
from schemas.template import WeekKey
from services.planner_service import PlannerService


router = APIRouter()


@router.get("/", response_model=list[Placement])
def list_placements(
    week: WeekKey | None = Query(default=None),
    planner: PlannerService = Depends(get_planner),
) -> list[Placement]:
    return planner.list_placements(week)


@router.get("/by-slot", response_model=dict[str, list[Placement]])
def placements_by_slot(
    week: WeekKey = Query(default="week1"),
    planner: PlannerService = Depends(get_planner),
) -> dict[str, list[Placement]]:
    return planner.placements_by_slot(week)


@router.post("/quick-add")
def quick_add(payload: QuickAddRequest, planner: PlannerService = Depends(get_planner)) -> dict:
    task, placement = planner.quick_add(
        week=payload.week,
        day=payload.day,
        start=payload.start,
        end=payload.end,
        draft=payload.task,
        allow_shared=payload.allow_shared,
    )
    return {
        "task": task.model_dump(by_alias=True, mode="json"),
        "placement": placement.model_dump(by_alias=True, mode="json"),
    }


@router.post("/{placement_id}/move", response_model=MoveResult)
def move_placement(
    placement_id: str,
    payload: MoveTarget,
    planner: PlannerService = Depends(get_planner),
) -> MoveResult:
    moved, placement = planner.move_placement(placement_id, payload)
    return MoveResult(moved=moved, placement=placement)


@router.delete("/{placement_id}")
def delete_placement(placement_id: str, planner: PlannerService = Depends(get_planner)) -> dict:
    planner.delete_placement(placement_id)
    return {"ok": True}
