"""Order lifecycle domain: create-then-fulfill orchestration."""

from .actions import ActionResult, execute_action, is_user_rejection
from .orchestrator import OrderLifecycleOrchestrator
from .record_id import derive_record_id
from .states import SubmissionPhase

__all__ = [
    "ActionResult",
    "OrderLifecycleOrchestrator",
    "SubmissionPhase",
    "derive_record_id",
    "execute_action",
    "is_user_rejection",
]
