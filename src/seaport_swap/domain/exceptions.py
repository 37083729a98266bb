"""Exception hierarchy for order building and submission.

Every failure raised by the swap domain derives from ``SwapError`` and
carries a machine-readable ``error_code`` from ``ErrorCodes`` so the API
layer can report it without inspecting exception types.
"""

from typing import Optional

from ..constants.errors import ErrorCodes, ErrorMessages


class SwapError(Exception):
    """Base class for all swap domain errors.

    Parameters
    ----------
    message : str
        Human-readable description of the failure
    error_code : str
        Machine-readable code from ``ErrorCodes``
    """

    error_code = ErrorCodes.INTERNAL_ERROR

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code


class NoAccountError(SwapError):
    """Submission attempted without a connected account address."""

    error_code = ErrorCodes.NO_ACCOUNT

    def __init__(self, message: str = ErrorMessages.NO_ACCOUNT):
        super().__init__(message)


class UserRejectedActionError(SwapError):
    """A pending action was declined or dismissed in the wallet.

    Parameters
    ----------
    action_type : str
        The kind of action that was rejected (e.g. "approval", "create",
        "exchange")
    message : Optional[str]
        Override for the default rejection message

    Notes
    -----
    Fatal to the submission it occurred in. No record is produced and
    nothing is retried; the user re-triggers submission from scratch.
    """

    error_code = ErrorCodes.USER_REJECTED

    def __init__(self, action_type: str, message: Optional[str] = None):
        super().__init__(message or ErrorMessages.format_rejected(action_type))
        self.action_type = action_type


class NetworkOrProtocolError(SwapError):
    """The exchange protocol or its transport failed on its own.

    The underlying exception is chained as ``__cause__`` by the raiser.
    """

    error_code = ErrorCodes.PROTOCOL_ERROR

    def __init__(self, message: str, action_type: Optional[str] = None):
        super().__init__(message)
        self.action_type = action_type


class PersistenceError(SwapError):
    """Storing an order record failed.

    Never propagates out of the persistence client: it is logged and
    swallowed because the on-chain side has already completed.
    """

    error_code = ErrorCodes.PERSISTENCE_FAILED


class CurrencyModeConflictError(SwapError):
    """An item was added whose kind conflicts with the currency mode."""

    error_code = ErrorCodes.CURRENCY_MODE_CONFLICT


class SubmissionInProgressError(SwapError):
    """A submission was triggered while another one is still pending."""

    error_code = ErrorCodes.SUBMISSION_IN_PROGRESS
