from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from schemas.task import TaskCreate
from schemas.template import WeekKey


class Placement(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    task_id: str = Field(alias="taskId")
    week: WeekKey = "week1"
    day: str
    start: str
    end: str


class MoveTarget(BaseModel):
    week: WeekKey
    day: str
    start: str
    end: str


class MoveResult(BaseModel):
    moved: bool
    placement: Placement | None = None


class AutoScheduleRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    week: WeekKey = "week1"
    start_day: str = Field(default="Sunday", alias="startDay")
    # Required when the task already has placements in `week`.
    overwrite: bool = False


class AutoScheduleResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    task_id: str = Field(alias="taskId")
    week: WeekKey
    requested_minutes: int = Field(alias="requestedMinutes")
    placed_minutes: int = Field(alias="placedMinutes")
    replaced: int = 0
    placements: list[Placement] = Field(default_factory=list)


class QuickAddRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    week: WeekKey = "week1"
    day: str
    start: str
    end: str
    task: TaskCreate
    # Required when other placements already sit in the same cell.
    allow_shared: bool = Field(default=False, alias="allowShared")
