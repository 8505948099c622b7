from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from schemas.document import PlannerDocument
from schemas.template import WEEK_KEYS, TemplateSet, WeekTemplate
from services.errors import DocumentImportError


logger = logging.getLogger(__name__)

MSG_UNREADABLE = "Could not read this JSON."
MSG_NOT_RECOGNIZED = "JSON not recognized."


def _load_json(raw: Any) -> Any:
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentImportError(MSG_UNREADABLE) from exc
    if isinstance(raw, str):
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DocumentImportError(MSG_UNREADABLE) from exc
    return raw


def _unwrap_templates(templates: Any) -> Any:
    # Older exports nested the week map one level deeper:
    # {"weekStartsOn": "Sunday", "templates": {"week1": ..., "week2": ...}}
    if isinstance(templates, dict) and not any(k in templates for k in WEEK_KEYS):
        inner = templates.get("templates")
        if isinstance(inner, dict):
            return inner
    return templates


def _normalize_overrides(overrides: Any) -> Any:
    if not isinstance(overrides, dict):
        return overrides
    if any(k in overrides for k in WEEK_KEYS):
        return {"week1": overrides.get("week1") or {}, "week2": overrides.get("week2") or {}}
    # A flat map predates per-week overrides; it belonged to week 1.
    return {"week1": overrides, "week2": {}}


def export_document(doc: PlannerDocument) -> dict[str, Any]:
    return doc.model_dump(by_alias=True, mode="json")


def parse_document(raw: Any) -> PlannerDocument:
    """Validate a full planner document (as exported).

    Raises DocumentImportError with a user-facing message; callers keep their
    current state when that happens.
    """

    data = _load_json(raw)
    if not isinstance(data, dict):
        raise DocumentImportError(MSG_NOT_RECOGNIZED)

    data = dict(data)
    if "templates" in data:
        data["templates"] = _unwrap_templates(data["templates"])
    if "freeOverrides" in data:
        data["freeOverrides"] = _normalize_overrides(data["freeOverrides"])

    try:
        return PlannerDocument.model_validate(data)
    except ValidationError as exc:
        logger.info("Rejected planner document: %d validation error(s)", exc.error_count())
        raise DocumentImportError(MSG_NOT_RECOGNIZED) from exc


def parse_template_document(raw: Any) -> TemplateSet:
    """Read an uploaded template document.

    Both weeks present: used as-is. Only `templates` present: missing weeks
    fall back to the default (empty) template. Anything else is rejected.
    """

    data = _load_json(raw)
    if not isinstance(data, dict) or not isinstance(data.get("templates"), dict):
        raise DocumentImportError(MSG_NOT_RECOGNIZED)

    templates = _unwrap_templates(data["templates"])
    if not isinstance(templates, dict):
        raise DocumentImportError(MSG_NOT_RECOGNIZED)

    try:
        if templates.get("week1") and templates.get("week2"):
            return TemplateSet.model_validate({"week1": templates["week1"], "week2": templates["week2"]})

        merged = {week: WeekTemplate() for week in WEEK_KEYS}
        for week in WEEK_KEYS:
            if templates.get(week):
                merged[week] = WeekTemplate.model_validate(templates[week])
        return TemplateSet(**merged)
    except ValidationError as exc:
        logger.info("Rejected template document: %d validation error(s)", exc.error_count())
        raise DocumentImportError(MSG_NOT_RECOGNIZED) from exc
