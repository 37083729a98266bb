"""Execution of protocol pending actions.

Each pending action is awaited and its outcome folded into an
``ActionResult`` instead of being left to propagate, so the orchestrator
can tell a user rejection from a protocol failure before deciding what
to raise.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..exceptions import UserRejectedActionError

logger = logging.getLogger(__name__)

# EIP-1193 user rejection code and its ethers.js string form
WALLET_REJECTION_CODES = (4001, "4001", "ACTION_REJECTED")

STATUS_COMPLETED = "completed"
STATUS_REJECTED = "rejected"
STATUS_ERROR = "error"


@dataclass
class ActionResult:
    """Outcome of executing one pending action.

    Attributes
    ----------
    action_type : str
        Kind of step that ran ("approval", "create", "exchange")
    status : str
        One of:
        - 'completed': The step returned normally
        - 'rejected': The user declined or dismissed the wallet prompt
        - 'error': The protocol or transport failed
    value : Any
        The step's return value when completed
    error : Optional[BaseException]
        The exception raised by the step when not completed
    """

    action_type: str
    status: str
    value: Any = None
    error: Optional[BaseException] = None

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED


def is_user_rejection(error: BaseException) -> bool:
    """Check whether an exception means the user declined a prompt.

    Parameters
    ----------
    error : BaseException
        Exception raised by a pending action

    Returns
    -------
    bool
        True for ``UserRejectedActionError`` and for wallet errors carrying
        a rejection ``code``
    """
    if isinstance(error, UserRejectedActionError):
        return True
    return getattr(error, "code", None) in WALLET_REJECTION_CODES


async def execute_action(action) -> ActionResult:
    """Await one pending action and classify its outcome.

    Parameters
    ----------
    action : PendingAction
        The step to execute

    Returns
    -------
    ActionResult
        Completed with the step's value, rejected, or error
    """
    action_type = getattr(action, "action_type", "action")
    logger.debug(f"Executing {action_type} action")

    try:
        value = await action.perform()
    except Exception as e:
        if is_user_rejection(e):
            logger.warning(f"User rejected {action_type} action: {e}")
            return ActionResult(action_type, STATUS_REJECTED, error=e)

        logger.error(
            f"{action_type} action failed: {type(e).__name__}: {str(e)}"
        )
        return ActionResult(action_type, STATUS_ERROR, error=e)

    return ActionResult(action_type, STATUS_COMPLETED, value=value)
