"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..schemas.layout import CanvasLayout
from ..schemas.outcomes import CommandOutcome
from ..state.models import Frame, Severity


class CommandRequest(BaseModel):
    verb: str
    args: List[int] = Field(default_factory=list)
    skip: bool = False


class CommandResponse(BaseModel):
    status: str  # "RUNNING" for paced runs, else the outcome status
    outcome: Optional[CommandOutcome] = None


class StepperRead(BaseModel):
    state: str
    running: bool
    waiting: bool
    skipping: bool
    suspension_count: int
    last_outcome: Optional[CommandOutcome] = None  # outcome of the most recent finished run


class LogRead(BaseModel):
    message: str
    severity: Severity
    time: str


class StructureRead(BaseModel):
    structure: str
    frame: Frame
    layout: Optional[CanvasLayout] = None
    logs: List[LogRead]
    stepper: StepperRead


class SyntaxRead(BaseModel):
    structure: str
    title: str
    commands: List[str]
