from __future__ import annotations

import os

# Must be set before core.config is imported anywhere.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient

from core.database import ENGINE, SessionLocal
from models.base import Base
import models  # noqa: F401
from services.document_repository import DocumentRepository
from services.planner_service import PlannerService
from tests.factories import sequential_ids


@pytest.fixture(autouse=True)
def _fresh_schema():
    Base.metadata.drop_all(ENGINE)
    Base.metadata.create_all(ENGINE)
    yield


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def planner(db) -> PlannerService:
    return PlannerService(DocumentRepository(db), new_id=sequential_ids("p"))


@pytest.fixture()
def client() -> TestClient:
    from main import app

    with TestClient(app) as c:
        yield c
