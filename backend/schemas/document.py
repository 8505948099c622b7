from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.placement import Placement
from schemas.task import Task
from schemas.template import TemplateSet

DEFAULT_WEEK1_START_SUNDAY = "2026-01-04"


def _iso_date(v: str) -> str:
    v = (v or "").strip()
    # Raises ValueError, which pydantic reports as a validation error.
    date.fromisoformat(v)
    return v


class FreeOverrides(BaseModel):
    week1: dict[str, bool] = Field(default_factory=dict)
    week2: dict[str, bool] = Field(default_factory=dict)


class PlannerDocument(BaseModel):
    """The persisted/exported planner document."""

    model_config = ConfigDict(populate_by_name=True)

    templates: TemplateSet = Field(default_factory=TemplateSet)
    tasks: list[Task] = Field(default_factory=list)
    placements: list[Placement] = Field(default_factory=list)
    free_overrides: FreeOverrides = Field(default_factory=FreeOverrides, alias="freeOverrides")
    week1_start_sunday: str = Field(default=DEFAULT_WEEK1_START_SUNDAY, alias="week1StartSunday")

    @field_validator("week1_start_sunday")
    @classmethod
    def _validate_anchor(cls, v: str) -> str:
        return _iso_date(v)


class CurrentWeekOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    week: str
    week1_start_sunday: str = Field(alias="week1StartSunday")
    today: str


class AnchorUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    week1_start_sunday: str = Field(alias="week1StartSunday")

    @field_validator("week1_start_sunday")
    @classmethod
    def _validate_iso_date(cls, v: str) -> str:
        return _iso_date(v)
