from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from core.ids import new_id as default_new_id
from schemas.task import Task, TaskCreate


@dataclass(frozen=True)
class TaskStore:
    items: tuple[Task, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def get(self, task_id: str) -> Task | None:
        for t in self.items:
            if t.id == task_id:
                return t
        return None

    def add(self, draft: TaskCreate, *, new_id: Callable[[], str] = default_new_id) -> tuple["TaskStore", Task]:
        task = Task(id=new_id(), status="todo", **draft.model_dump())
        return TaskStore(items=(task, *self.items)), task

    def add_many(self, tasks: list[Task]) -> "TaskStore":
        return TaskStore(items=(*tasks, *self.items))

    def update(self, task_id: str, patch: dict[str, Any]) -> tuple["TaskStore", Task | None]:
        current = self.get(task_id)
        if current is None:
            return self, None
        patch = {k: v for k, v in patch.items() if k != "id"}
        updated = current.model_copy(update=patch)
        return TaskStore(items=tuple(updated if t.id == task_id else t for t in self.items)), updated

    def remove(self, task_id: str) -> "TaskStore":
        return TaskStore(items=tuple(t for t in self.items if t.id != task_id))
