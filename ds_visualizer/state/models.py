"""
State Layer - Runtime Data Models

This module defines what an observer can see while an algorithm runs:
the status snapshot ("what is happening now"), the highlight on the drawn
structure, console log entries, and the Frame that bundles all of them at
each suspension point.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Literal

from pydantic import BaseModel, Field, model_validator

from ..config import settings
from ..domain.models import StructureKind


class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class HighlightTone(str, Enum):
    """
    Why a node is highlighted. The renderer maps tones to colors:
    compare -> orange, insert/swap -> blue, found -> green, remove -> red.
    """
    COMPARE = "compare"
    INSERT = "insert"
    SWAP = "swap"
    FOUND = "found"
    REMOVE = "remove"


class Highlight(BaseModel):
    ids: List[str] = Field(default_factory=list)
    tone: HighlightTone = HighlightTone.COMPARE


class StatusSnapshot(BaseModel):
    """
    The "Output View": a label plus either one value or a list of values
    with an optional active position.
    """
    label: str
    kind: Literal["single", "array"]
    value: Optional[int] = None
    items: List[int] = Field(default_factory=list)
    active_index: int = -1

    @model_validator(mode="after")
    def _check_payload(self) -> "StatusSnapshot":
        if self.kind == "single" and self.value is None:
            raise ValueError("single status requires a value")
        if self.kind == "array" and not -1 <= self.active_index < len(self.items):
            raise ValueError(f"active_index {self.active_index} out of range")
        return self

    @classmethod
    def single(cls, label: str, value: int) -> "StatusSnapshot":
        return cls(label=label, kind="single", value=value)

    @classmethod
    def array(cls, label: str, items: List[int], active_index: int = -1) -> "StatusSnapshot":
        return cls(label=label, kind="array", items=list(items), active_index=active_index)


class LogEntry(BaseModel):
    message: str
    severity: Severity = Severity.INFO
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def time_label(self) -> str:
        return self.timestamp.strftime(settings.LOG_TIME_FORMAT)


class TreeNodeSnapshot(BaseModel):
    """
    One tree node as handed to the layout. Children are referenced by id.
    `index` is set for heap nodes (their array position).
    """
    id: str
    value: int
    index: Optional[int] = None
    left: Optional[str] = None
    right: Optional[str] = None


class TreeSnapshot(BaseModel):
    """
    Flat view of a whole tree: every node once, in pre-order, plus the root id.
    Flat so that serialization depth does not grow with the tree height.
    """
    root: str
    nodes: List[TreeNodeSnapshot]

    def by_id(self) -> Dict[str, TreeNodeSnapshot]:
        return {node.id: node for node in self.nodes}

    def node(self, node_id: str) -> Optional[TreeNodeSnapshot]:
        return next((n for n in self.nodes if n.id == node_id), None)

    @property
    def root_node(self) -> TreeNodeSnapshot:
        return self.node(self.root)


class Frame(BaseModel):
    """
    Everything observable at one point of a run.
    `items` carries array-backed content (queue, heap); `tree` carries the
    tree view (BST, heap).
    """
    sequence: int
    structure: StructureKind
    items: List[int] = Field(default_factory=list)
    tree: Optional[TreeSnapshot] = None
    highlight: Highlight = Field(default_factory=Highlight)
    status: Optional[StatusSnapshot] = None
