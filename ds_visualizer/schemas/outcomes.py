"""
Schemas - Command Outcome

This module defines the structured result every StructureEngine.execute()
call returns. The dispatcher never receives an exception for a user error;
it receives one of these instead.
"""
from enum import Enum
from typing import List, Optional, Union
from pydantic import BaseModel, Field

from ..domain.models import StructureKind

class OutcomeStatus(str, Enum):
    """
    OK: The command ran to completion.
    FAILED: The command was understood but could not be applied (empty structure, missing value, bad operands).
    REJECTED: The command was never started (unknown verb or another run still active).
    """
    OK = "OK"
    FAILED = "FAILED"
    REJECTED = "REJECTED"

class CommandOutcome(BaseModel):
    """
    What a single command run produced.
    """
    structure: StructureKind = Field(
        ...,
        description="The structure the command was addressed to."
    )
    verb: str = Field(
        ...,
        description="The verb as received, lower-cased."
    )
    args: List[int] = Field(
        default_factory=list,
        description="The integer operands as received."
    )
    status: OutcomeStatus = Field(
        ...,
        description="Whether the run completed, failed, or was rejected."
    )
    result: Optional[Union[int, List[int]]] = Field(
        None,
        description="The reported value (peek/remove) or visit order (traversals)."
    )
    error_kind: Optional[str] = Field(
        None,
        description="Exception class name when status is not OK, e.g. 'EmptyContainerError'."
    )
    message: Optional[str] = Field(
        None,
        description="The console text logged for a failure."
    )

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.OK
