from __future__ import annotations

from typing import Callable

from core.ids import new_id as default_new_id
from schemas.task import Task
from services.errors import ChunkerError


CHUNK_TEMPLATES: dict[str, list[tuple[str, float]]] = {
    "essay": [
        ("Choose topic + gather sources", 0.2),
        ("Outline", 0.12),
        ("Draft part 1", 0.28),
        ("Draft part 2", 0.28),
        ("Edit + citations", 0.1),
        ("Final proof", 0.02),
    ],
    "exam": [
        ("Review notes (unit 1)", 0.25),
        ("Practice problems", 0.35),
        ("Timed past paper", 0.2),
        ("Error review", 0.15),
        ("Final recap", 0.05),
    ],
    "lab": [
        ("Background reading", 0.2),
        ("Plan/Design", 0.15),
        ("Data collection", 0.25),
        ("Analysis", 0.2),
        ("Write-up", 0.18),
        ("Polish + submit", 0.02),
    ],
}

MIN_CHUNK_MINUTES = 15


def _round_half_up(x: float) -> int:
    return int(x + 0.5)


def generate_chunks(
    *,
    title: str,
    due_date: str | None,
    total_hours: float,
    kind: str,
    new_id: Callable[[], str] = default_new_id,
) -> list[Task]:
    tpl = CHUNK_TEMPLATES.get(kind)
    if tpl is None:
        raise ChunkerError(f"Unknown chunk template {kind!r}; expected one of {sorted(CHUNK_TEMPLATES)}")

    total_min = _round_half_up(total_hours * 60)
    return [
        Task(
            id=new_id(),
            title=f"{title}: {chunk_title}",
            due_date=due_date,
            estimated_min=max(MIN_CHUNK_MINUTES, _round_half_up(total_min * pct)),
            priority="medium",
            status="todo",
        )
        for chunk_title, pct in tpl
    ]
