from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.config import settings
from models.planner_document import PlannerDocumentRow
from schemas.document import PlannerDocument


logger = logging.getLogger(__name__)


class DocumentRepository:
    """load()/save(doc) over the planner_documents table, one row per key."""

    def __init__(self, db: Session, *, key: str | None = None):
        self.db = db
        self.key = key or settings.document_key

    def _row(self) -> PlannerDocumentRow | None:
        q = select(PlannerDocumentRow).where(PlannerDocumentRow.key == self.key)
        return self.db.execute(q).scalars().first()

    def load(self) -> PlannerDocument | None:
        row = self._row()
        if row is None:
            return None
        return PlannerDocument.model_validate(row.payload)

    def save(self, doc: PlannerDocument) -> None:
        payload = doc.model_dump(by_alias=True, mode="json")
        row = self._row()
        if row is None:
            row = PlannerDocumentRow(key=self.key, payload=payload)
            self.db.add(row)
        else:
            row.payload = payload
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.debug(
            "Saved planner document key=%s tasks=%d placements=%d",
            self.key,
            len(doc.tasks),
            len(doc.placements),
        )
