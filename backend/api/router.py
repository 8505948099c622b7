from __future__ import annotations

from fastapi import APIRouter

from api.routes import calendar, chunker, documents, overrides, placements, tasks, templates


api_router = APIRouter()
api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
api_router.include_router(overrides.router, prefix="/overrides", tags=["overrides"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(placements.router, prefix="/placements", tags=["placements"])
api_router.include_router(documents.router, prefix="/document", tags=["document"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
api_router.include_router(chunker.router, prefix="/chunker", tags=["chunker"])
