"""
Data Structure Visualizer

A step-synchronized algorithm execution engine: queue, binary search tree
and max-heap algorithms run one observable step at a time, paced by a
cooperative Stepper, with a deterministic tree layout for the renderer.
"""

from ds_visualizer.domain import (
    CommandSpec,
    StructureDefinition,
    StructureKind,
)
from ds_visualizer.state import (
    Frame,
    Highlight,
    HighlightTone,
    LogEntry,
    Severity,
    StatusSnapshot,
    TreeNodeSnapshot,
    TreeSnapshot,
)
from ds_visualizer.schemas import CommandOutcome, OutcomeStatus, TreeLayout
from ds_visualizer.execution import Stepper, StructureEngine
from ds_visualizer.structures import BSTEngine, HeapEngine, QueueEngine
from ds_visualizer.layout import fit_canvas, layout_tree

__all__ = [
    # Domain Layer
    "CommandSpec",
    "StructureDefinition",
    "StructureKind",
    # State Layer
    "Frame",
    "Highlight",
    "HighlightTone",
    "LogEntry",
    "Severity",
    "StatusSnapshot",
    "TreeNodeSnapshot",
    "TreeSnapshot",
    # Schemas
    "CommandOutcome",
    "OutcomeStatus",
    "TreeLayout",
    # Execution Layer
    "Stepper",
    "StructureEngine",
    # Structures
    "BSTEngine",
    "HeapEngine",
    "QueueEngine",
    # Layout
    "fit_canvas",
    "layout_tree",
]
