from __future__ import annotations

import time
from typing import Iterable

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import settings


class DatabaseUnavailableError(RuntimeError):
    """Raised when the database is temporarily unreachable (transient connectivity failure)."""


_RETRY_DELAYS_SECONDS: list[float] = [0.2, 0.5, 1.0]


def _iter_exception_messages(exc: BaseException) -> Iterable[str]:
    seen: set[int] = set()
    cur: BaseException | None = exc
    while cur is not None and id(cur) not in seen:
        seen.add(id(cur))
        msg = str(cur)
        if msg:
            yield msg
        cur = getattr(cur, "__cause__", None) or getattr(cur, "__context__", None)


def is_transient_db_connectivity_error(exc: BaseException) -> bool:
    """Heuristically detect transient DB connectivity failures (DNS/timeouts/refused/locked).

    Constraint/validation/SQL errors are not transient.
    """

    joined = "\n".join(m.lower() for m in _iter_exception_messages(exc))

    markers = (
        # DNS resolution failures
        "getaddrinfo failed",
        "could not translate host name",
        "name or service not known",
        # Connection refused / reset / closed
        "connection refused",
        "actively refused",
        "connection reset",
        "server closed the connection unexpectedly",
        # SQLite writer contention
        "database is locked",
        # Timeouts
        "timeout",
        "timed out",
    )
    return any(m in joined for m in markers)


def get_engine(url: str | None = None) -> Engine:
    url = (url or settings.database_url).strip()

    # Normalize common Postgres URLs to SQLAlchemy's psycopg2 dialect.
    if url.startswith("postgres://"):
        url = "postgresql+psycopg2://" + url.removeprefix("postgres://")
    elif url.startswith("postgresql://"):
        url = "postgresql+psycopg2://" + url.removeprefix("postgresql://")

    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        # Sync endpoints run on a thread pool; one connection may hop threads.
        connect_args: dict[str, object] = {"check_same_thread": False}
        if parsed.database in (None, "", ":memory:"):
            # In-memory databases live per connection, so share a single one.
            return create_engine(url, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(url, connect_args=connect_args)

    # pool_pre_ping helps with stale pooled connections.
    # connect_timeout keeps outages from hanging requests (used by retries and /health).
    return create_engine(url, pool_pre_ping=True, connect_args={"connect_timeout": 3})


ENGINE = get_engine()
SessionLocal = sessionmaker(bind=ENGINE, autoflush=False, autocommit=False)


def get_db():
    last_exc: BaseException | None = None

    # Retry session acquisition by doing an explicit lightweight ping (SELECT 1).
    for attempt in range(len(_RETRY_DELAYS_SECONDS) + 1):
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        except OperationalError as exc:
            last_exc = exc
            db.close()
            if not is_transient_db_connectivity_error(exc) or attempt >= len(_RETRY_DELAYS_SECONDS):
                break
            time.sleep(_RETRY_DELAYS_SECONDS[attempt])
            continue

        # Do NOT wrap `yield db` in the same try/except as the ping.
        # Exceptions raised by the endpoint must propagate normally (e.g., 404/409),
        # rather than being converted into DatabaseUnavailableError (503).
        try:
            yield db
        finally:
            db.close()
        return

    raise DatabaseUnavailableError("Database temporarily unavailable") from last_exc
