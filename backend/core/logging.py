from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from core.config import BACKEND_DIR


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"
LOG_FILENAME = "planner.log"

# Libraries whose INFO output drowns out planner messages.
_QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "httpx")


def resolve_level(environment: str, override: str | None = None) -> int:
    """Pick the root level: an explicit override wins, else INFO in production and DEBUG elsewhere."""

    if override:
        level = logging.getLevelName(override.strip().upper())
        if isinstance(level, int):
            return level
    env = (environment or "development").lower().strip()
    return logging.INFO if env == "production" else logging.DEBUG


def _rotating_file(log_dir: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILENAME,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(*, environment: str, level: str | None = None, log_dir: str | Path | None = None) -> None:
    """Configure process logging once.

    The planner always logs to the console. Production additionally writes a
    rotating file under `log_dir` (default: `<backend>/logs`). Later calls are
    no-ops once the root logger has handlers.
    """

    root = logging.getLogger()
    if root.handlers:
        return

    resolved = resolve_level(environment, level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler()
    console.setLevel(resolved)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]

    if (environment or "").lower().strip() == "production":
        handlers.append(_rotating_file(Path(log_dir) if log_dir else BACKEND_DIR / "logs", resolved, formatter))

    logging.basicConfig(level=resolved, handlers=handlers)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
