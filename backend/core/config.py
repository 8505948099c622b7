from __future__ import annotations

from datetime import date
from pathlib import Path

from pydantic import Field, field_validator
from pydantic.aliases import AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


BACKEND_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=BACKEND_DIR / ".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = Field(
        default=f"sqlite:///{(BACKEND_DIR / 'planner.db').as_posix()}",
        validation_alias=AliasChoices("database_url", "DATABASE_URL"),
    )

    # Runtime
    environment: str = Field(default="development", validation_alias=AliasChoices("environment", "ENVIRONMENT"))
    frontend_origin: str = Field(
        default="http://localhost:5173",
        validation_alias=AliasChoices("frontend_origin", "FRONTEND_ORIGIN"),
    )

    # Logging
    # Overrides the environment-derived level (e.g. "WARNING").
    log_level: str | None = Field(default=None, validation_alias=AliasChoices("log_level", "LOG_LEVEL"))
    log_dir: str | None = Field(default=None, validation_alias=AliasChoices("log_dir", "LOG_DIR"))

    # Planner document
    # Row key of the single persisted planner document.
    document_key: str = Field(default="default", validation_alias=AliasChoices("document_key", "DOCUMENT_KEY"))
    # Anchor Sunday that starts a "week1" of the biweekly cycle.
    default_week1_start_sunday: str = Field(
        default="2026-01-04",
        validation_alias=AliasChoices("default_week1_start_sunday", "DEFAULT_WEEK1_START_SUNDAY"),
    )

    @field_validator("frontend_origin")
    @classmethod
    def _normalize_frontend_origin(cls, v: str) -> str:
        # Starlette CORS expects the Origin to match exactly (no trailing slash).
        return v.strip().rstrip("/")

    @field_validator("document_key")
    @classmethod
    def _normalize_document_key(cls, v: str) -> str:
        v = (v or "").strip()
        return v or "default"

    @field_validator("default_week1_start_sunday")
    @classmethod
    def _validate_week1_start_sunday(cls, v: str) -> str:
        v = (v or "").strip()
        date.fromisoformat(v)
        return v


settings = Settings()
