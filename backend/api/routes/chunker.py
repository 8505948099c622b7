from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_planner
from schemas.task import ChunkRequest, Task
from services.planner_service import PlannerService


router = APIRouter()


@router.post("/generate", response_model=list[Task])
def generate(payload: ChunkRequest, planner: PlannerService = Depends(get_planner)) -> list[Task]:
    # Preview only; chunks are editable before they are accepted.
    return planner.preview_chunks(
        title=payload.title,
        due_date=payload.due_date,
        total_hours=payload.total_hours,
        kind=payload.kind,
    )


@router.post("/accept", response_model=list[Task])
def accept(payload: list[Task], planner: PlannerService = Depends(get_planner)) -> list[Task]:
    return planner.accept_chunks(payload)
