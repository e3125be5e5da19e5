"""
Stepper States - Session State Definitions

Type definitions for the stepper's session state machine.
Used by the stepper itself and by the control surface that reports it.
"""

from dataclasses import dataclass
from enum import Enum, auto


class StepperState(Enum):
    """
    IDLE -> RUNNING on begin(); RUNNING -> IDLE on end().
    While RUNNING the session is either waiting on a suspension point or
    executing the algorithm between two of them.
    """

    IDLE = auto()  # No run in progress; commands may be submitted.
    RUNNING = auto()  # A run owns the stepper; new runs are refused.


@dataclass
class StepperStatus:
    """
    Read-only view of the stepper for the control surface.

    `waiting` tells the UI whether the "Next" control has anything to resolve.
    """

    state: StepperState
    waiting: bool
    skipping: bool
    suspension_count: int

    @property
    def running(self) -> bool:
        return self.state is StepperState.RUNNING
