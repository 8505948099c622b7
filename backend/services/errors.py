from __future__ import annotations


class PlannerError(Exception):
    """Base class for planner errors surfaced to API clients."""

    code = "PLANNER_ERROR"
    status_code = 400

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code)
        self.message = message or self.code


class TaskNotFoundError(PlannerError):
    code = "TASK_NOT_FOUND"
    status_code = 404


class PlacementNotFoundError(PlannerError):
    code = "PLACEMENT_NOT_FOUND"
    status_code = 404


class PlacementsExistError(PlannerError):
    """The task already has placements in the target week; overwrite must be confirmed."""

    code = "PLACEMENTS_EXIST"
    status_code = 409


class SlotOccupiedError(PlannerError):
    code = "SLOT_OCCUPIED"
    status_code = 409


class SlotNotFreeError(PlannerError):
    code = "SLOT_NOT_FREE"
    status_code = 409


class DocumentImportError(PlannerError):
    code = "IMPORT_REJECTED"
    status_code = 400


class ChunkerError(PlannerError):
    code = "UNKNOWN_CHUNK_TEMPLATE"
    status_code = 400
