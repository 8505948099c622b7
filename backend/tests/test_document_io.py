import json

import pytest

from schemas.document import PlannerDocument
from services.document_io import export_document, parse_document, parse_template_document
from services.errors import DocumentImportError
from services.planner_state import PlannerState
from tests.factories import template_payload


def _document() -> dict:
    return {
        "templates": {"week1": template_payload(), "week2": {"grid": [], "notes": [], "blocks": []}},
        "tasks": [
            {
                "id": "t1",
                "title": "Math homework",
                "dueDate": "2026-01-09",
                "estimatedMin": 90,
                "priority": "high",
                "status": "todo",
            },
            {
                "id": "t2",
                "title": "Read ch. 3",
                "dueDate": "",
                "estimatedMin": "soon",
                "priority": "medium",
                "status": "done",
            },
        ],
        "placements": [
            {"id": "p1", "taskId": "t1", "week": "week1", "day": "Sunday", "start": "08:00", "end": "09:30"},
            {"id": "p2", "taskId": "t1", "week": "week2", "day": "Tuesday", "start": "08:00", "end": "10:00"},
        ],
        "freeOverrides": {"week1": {"Monday_08:00_10:00": True}, "week2": {}},
        "week1StartSunday": "2026-01-04",
    }


def test_export_import_round_trip_is_exact():
    original = _document()
    doc = parse_document(json.dumps(original))
    exported = export_document(PlannerState.from_document(doc).to_document())
    assert exported == original
    assert export_document(parse_document(exported)) == original


def test_parse_accepts_bytes():
    doc = parse_document(json.dumps(_document()).encode("utf-8"))
    assert [t.id for t in doc.tasks] == ["t1", "t2"]


def test_missing_sections_fall_back_to_defaults():
    doc = parse_document({"tasks": []})
    assert doc.templates.week1.grid == []
    assert doc.placements == []
    assert doc.free_overrides.week1 == {}
    assert doc.week1_start_sunday == "2026-01-04"


def test_legacy_flat_overrides_belong_to_week1():
    doc = parse_document({"freeOverrides": {"Sunday_12:00_13:00": True}})
    assert doc.free_overrides.week1 == {"Sunday_12:00_13:00": True}
    assert doc.free_overrides.week2 == {}


def test_legacy_nested_templates_are_unwrapped():
    doc = parse_document({"templates": {"weekStartsOn": "Sunday", "templates": {"week1": template_payload(), "week2": {}}}})
    assert len(doc.templates.week1.grid) == 2


@pytest.mark.parametrize("raw", ["{not json", b"\xff\xfe", "[1, 2]", "42"])
def test_unreadable_documents_are_rejected(raw):
    with pytest.raises(DocumentImportError):
        parse_document(raw)


def test_invalid_shape_is_rejected_with_message():
    with pytest.raises(DocumentImportError) as exc:
        parse_document({"placements": [{"id": "p1"}]})
    assert exc.value.message == "JSON not recognized."


def test_template_document_with_both_weeks_is_used_as_is():
    week2 = {"grid": [{"start": "09:00", "end": "10:00", "days": {"Monday": "Open"}}], "notes": []}
    templates = parse_template_document({"templates": {"week1": template_payload(), "week2": week2}})
    assert templates.week1.notes == ["Lights out at 22:30"]
    assert templates.week2.grid[0].days == {"Monday": "Open"}


def test_template_document_with_one_week_merges_over_defaults():
    templates = parse_template_document({"templates": {"week2": template_payload()}})
    assert templates.week1.grid == []
    assert len(templates.week2.grid) == 2


def test_template_extra_keys_survive():
    templates = parse_template_document({"templates": {"week1": {"grid": [], "blocks": [{"name": "A"}]}}})
    assert templates.week1.model_dump()["blocks"] == [{"name": "A"}]


@pytest.mark.parametrize(
    "raw, message",
    [
        ("nope", "Could not read this JSON."),
        ({"week1": {}}, "JSON not recognized."),
        ({"templates": "week1"}, "JSON not recognized."),
        ({"templates": {"week1": {"grid": "x"}, "week2": {"grid": []}}}, "JSON not recognized."),
    ],
)
def test_template_document_rejections(raw, message):
    with pytest.raises(DocumentImportError) as exc:
        parse_template_document(raw)
    assert exc.value.message == message


def test_planner_document_field_aliases():
    doc = PlannerDocument()
    dumped = doc.model_dump(by_alias=True)
    assert set(dumped) == {"templates", "tasks", "placements", "freeOverrides", "week1StartSunday"}


@pytest.mark.parametrize("anchor", ["not-a-date", "2026-13-01", ""])
def test_malformed_anchor_date_is_rejected(anchor):
    with pytest.raises(DocumentImportError) as exc:
        parse_document({"week1StartSunday": anchor})
    assert exc.value.message == "JSON not recognized."


def test_numeric_template_labels_are_read_as_text():
    week = {"grid": [{"start": "08:00", "end": "09:00", "days": {"Monday": 5, "Tuesday": 2.5, "Friday": None}}]}
    templates = parse_template_document({"templates": {"week1": week}})
    assert templates.week1.grid[0].days == {"Monday": "5", "Tuesday": "2.5", "Friday": None}
