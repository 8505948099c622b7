from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from api.deps import get_planner
from schemas.document import PlannerDocument
from services.document_io import export_document
from services.planner_service import PlannerService


router = APIRouter()


@router.get("/export")
def export(planner: PlannerService = Depends(get_planner)) -> dict:
    return export_document(planner.export_document())


@router.post("/import", response_model=PlannerDocument)
def import_document(payload: Any = Body(...), planner: PlannerService = Depends(get_planner)) -> PlannerDocument:
    return planner.import_document(payload)
