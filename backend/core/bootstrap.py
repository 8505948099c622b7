from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

from core.database import ENGINE
from models.base import Base
import models  # noqa: F401  (registers tables on Base.metadata)


logger = logging.getLogger(__name__)


def bootstrap_schema(engine: Engine | None = None) -> None:
    """Create the planner tables if they don't exist yet.

    Safe to run on every startup.
    """

    engine = engine or ENGINE
    Base.metadata.create_all(engine)
    logger.debug("Planner schema ensured on %s", engine.url.render_as_string(hide_password=True))
