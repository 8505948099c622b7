from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


WeekKey = Literal["week1", "week2"]
WEEK_KEYS: tuple[str, ...] = ("week1", "week2")


class TemplateRow(BaseModel):
    # Unknown keys are kept so imported templates round-trip unchanged.
    model_config = ConfigDict(extra="allow")

    start: str = ""
    end: str = ""
    days: dict[str, str | None] = Field(default_factory=dict)

    @field_validator("days", mode="before")
    @classmethod
    def _stringify_labels(cls, v):
        # Hand-edited templates sometimes carry bare numbers as labels.
        if not isinstance(v, dict):
            return v
        return {
            day: str(label) if isinstance(label, (int, float)) and not isinstance(label, bool) else label
            for day, label in v.items()
        }


class WeekTemplate(BaseModel):
    model_config = ConfigDict(extra="allow")

    grid: list[TemplateRow] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


class TemplateSet(BaseModel):
    week1: WeekTemplate = Field(default_factory=WeekTemplate)
    week2: WeekTemplate = Field(default_factory=WeekTemplate)

    def for_week(self, week: str) -> WeekTemplate:
        return self.week2 if week == "week2" else self.week1


class SlotOut(BaseModel):
    id: str
    day: str
    start: str
    end: str
    start_min: int
    end_min: int
    minutes: int
