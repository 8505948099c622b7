from models.planner_document import PlannerDocumentRow

__all__ = [
	"PlannerDocumentRow",
]
