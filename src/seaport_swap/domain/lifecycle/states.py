"""Submission lifecycle phases."""

from enum import Enum


class SubmissionPhase(str, Enum):
    """Phase of one create-then-fulfill submission.

    Attributes
    ----------
    IDLE : str
        No submission has started
    CREATING : str
        Creation actions (approvals, signature) are being executed
    CREATED : str
        A signed order is available
    FULFILLING : str
        Fulfillment actions are being executed
    DONE : str
        Fulfillment was dispatched and the record handed to storage
    FAILED : str
        A step was rejected or failed; nothing was persisted

    Notes
    -----
    Allowed transitions::

        IDLE -> CREATING -> CREATED -> FULFILLING -> DONE
        any of the first four -> FAILED

    A new submission always starts again from IDLE.
    """

    IDLE = "idle"
    CREATING = "creating"
    CREATED = "created"
    FULFILLING = "fulfilling"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (SubmissionPhase.DONE, SubmissionPhase.FAILED)
