from __future__ import annotations

from dataclasses import dataclass, field

from schemas.document import DEFAULT_WEEK1_START_SUNDAY, FreeOverrides, PlannerDocument
from schemas.template import TemplateSet
from services.override_store import OverrideStore
from services.placement_store import PlacementStore
from services.task_store import TaskStore


@dataclass(frozen=True)
class PlannerState:
    """Whole planner state. Replaced wholesale on every mutation."""

    templates: TemplateSet = field(default_factory=TemplateSet)
    tasks: TaskStore = field(default_factory=TaskStore)
    placements: PlacementStore = field(default_factory=PlacementStore)
    overrides: OverrideStore = field(default_factory=OverrideStore)
    week1_start_sunday: str = DEFAULT_WEEK1_START_SUNDAY

    @classmethod
    def from_document(cls, doc: PlannerDocument) -> "PlannerState":
        return cls(
            templates=doc.templates.model_copy(deep=True),
            tasks=TaskStore(items=tuple(doc.tasks)),
            placements=PlacementStore(items=tuple(doc.placements)),
            overrides=OverrideStore.from_maps(doc.free_overrides.week1, doc.free_overrides.week2),
            week1_start_sunday=doc.week1_start_sunday,
        )

    def to_document(self) -> PlannerDocument:
        return PlannerDocument(
            templates=self.templates.model_copy(deep=True),
            tasks=list(self.tasks.items),
            placements=list(self.placements.items),
            free_overrides=FreeOverrides(**self.overrides.to_dict()),
            week1_start_sunday=self.week1_start_sunday,
        )
