from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from core.database import get_db
from services.document_repository import DocumentRepository
from services.planner_service import PlannerService


def get_repository(db: Session = Depends(get_db)) -> DocumentRepository:
    return DocumentRepository(db)


def get_planner(repo: DocumentRepository = Depends(get_repository)) -> PlannerService:
    return PlannerService(repo)
