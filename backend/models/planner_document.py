from __future__ import annotations

from sqlalchemy import JSON, Column, DateTime, Integer, Text, UniqueConstraint
from sqlalchemy.sql import func

from models.base import Base


class PlannerDocumentRow(Base):
    __tablename__ = "planner_documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(Text, nullable=False)
    payload = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("key", name="uq_planner_documents_key"),
    )
