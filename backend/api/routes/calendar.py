from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_planner
from schemas.document import AnchorUpdate, CurrentWeekOut
from services.planner_service import PlannerService


router = APIRouter()


@router.get("/current-week", response_model=CurrentWeekOut)
def current_week(planner: PlannerService = Depends(get_planner)) -> CurrentWeekOut:
    week, anchor, today = planner.current_week()
    return CurrentWeekOut(week=week, week1_start_sunday=anchor, today=today.isoformat())


@router.put("/anchor", response_model=CurrentWeekOut)
def set_anchor(payload: AnchorUpdate, planner: PlannerService = Depends(get_planner)) -> CurrentWeekOut:
    planner.set_anchor(payload.week1_start_sunday)
    week, anchor, today = planner.current_week()
    return CurrentWeekOut(week=week, week1_start_sunday=anchor, today=today.isoformat())
