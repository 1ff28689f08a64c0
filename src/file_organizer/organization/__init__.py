"""Move planning and execution."""

from .executor import MoveExecutor
from .models import MoveOperation, MovePlan
from .planner import DEFAULT_DESTINATION_DIRNAME, OrganizePlanner

__all__ = [
    "DEFAULT_DESTINATION_DIRNAME",
    "MoveExecutor",
    "MoveOperation",
    "MovePlan",
    "OrganizePlanner",
]
