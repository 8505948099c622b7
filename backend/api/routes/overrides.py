from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.deps import get_planner
from schemas.document import FreeOverrides
from schemas.template import WeekKey
from services.planner_service import PlannerService


router = APIRouter()


class ToggleOverrideRequest(BaseModel):
    key: str = Field(min_length=1)


@router.get("/", response_model=FreeOverrides)
def get_overrides(planner: PlannerService = Depends(get_planner)) -> FreeOverrides:
    return FreeOverrides(**planner.overrides())


@router.post("/{week}/toggle", response_model=dict[str, bool])
def toggle_override(
    week: WeekKey,
    payload: ToggleOverrideRequest,
    planner: PlannerService = Depends(get_planner),
) -> dict[str, bool]:
    return planner.toggle_override(week, payload.key)
