"""What a run does when one operation fails."""

from enum import Enum


class FaultPolicy(str, Enum):
    """CONTINUE records the failure and runs the next operation.
    ABORT records the failure and skips every remaining operation.
    """

    CONTINUE = "continue"
    ABORT = "abort"
