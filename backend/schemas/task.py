from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


TaskStatus = Literal["todo", "done"]
Priority = Literal["low", "medium", "high"]


class TaskBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    due_date: str | None = Field(default="", alias="dueDate")
    # Kept as given; the scheduler coerces non-numeric values to 0.
    estimated_min: int | float | str | None = Field(default=60, alias="estimatedMin")
    priority: Priority = "medium"


class Task(TaskBase):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    status: TaskStatus = "todo"


class TaskCreate(TaskBase):
    title: str = Field(min_length=1)


class TaskUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    due_date: str | None = Field(default=None, alias="dueDate")
    estimated_min: int | float | str | None = Field(default=None, alias="estimatedMin")
    priority: Priority | None = None
    status: TaskStatus | None = None


class ToggleDoneRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # When marking done: also drop the task's placements.
    remove_placements: bool = Field(default=False, alias="removePlacements")


class ChunkRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    due_date: str | None = Field(default="", alias="dueDate")
    total_hours: float = Field(default=4, gt=0, alias="totalHours")
    kind: str = "essay"
