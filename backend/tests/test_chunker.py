import pytest

from services.chunker import CHUNK_TEMPLATES, generate_chunks
from services.errors import ChunkerError
from tests.factories import sequential_ids


def test_essay_chunks_split_by_percentage():
    chunks = generate_chunks(title="History essay", due_date="2026-02-01", total_hours=4, kind="essay", new_id=sequential_ids("c"))
    assert [c.title for c in chunks][:2] == ["History essay: Choose topic + gather sources", "History essay: Outline"]
    # 240 minutes: 20% -> 48, 12% -> 28.8 -> 29, 2% -> 4.8 -> floor of 15
    assert [c.estimated_min for c in chunks] == [48, 29, 67, 67, 24, 15]
    assert {c.status for c in chunks} == {"todo"}
    assert {c.priority for c in chunks} == {"medium"}
    assert {c.due_date for c in chunks} == {"2026-02-01"}
    assert [c.id for c in chunks] == ["c-1", "c-2", "c-3", "c-4", "c-5", "c-6"]


def test_every_template_sums_to_whole():
    for kind, parts in CHUNK_TEMPLATES.items():
        assert sum(pct for _title, pct in parts) == pytest.approx(1.0), kind


def test_unknown_kind_is_rejected():
    with pytest.raises(ChunkerError):
        generate_chunks(title="x", due_date="", total_hours=1, kind="poem")
