from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from api.deps import get_planner
from schemas.template import SlotOut, TemplateSet, WeekKey, WeekTemplate
from services.planner_service import PlannerService


router = APIRouter()


@router.get("/", response_model=TemplateSet)
def get_templates(planner: PlannerService = Depends(get_planner)) -> TemplateSet:
    return planner.templates()


@router.put("/{week}", response_model=TemplateSet)
def replace_template(
    week: WeekKey,
    payload: WeekTemplate,
    planner: PlannerService = Depends(get_planner),
) -> TemplateSet:
    return planner.replace_template(week, payload)


@router.post("/import", response_model=TemplateSet)
def import_templates(
    payload: Any = Body(...),
    planner: PlannerService = Depends(get_planner),
) -> TemplateSet:
    return planner.import_templates(payload)


@router.get("/{week}/slots", response_model=list[SlotOut])
def list_free_slots(week: WeekKey, planner: PlannerService = Depends(get_planner)) -> list[SlotOut]:
    return [
        SlotOut(
            id=s.id,
            day=s.day,
            start=s.start,
            end=s.end,
            start_min=s.start_min,
            end_min=s.end_min,
            minutes=s.minutes,
        )
        for s in planner.free_slots(week)
    ]
