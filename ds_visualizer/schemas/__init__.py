"""
Schemas - Structured Output Models

Defines the Pydantic models the core hands to its collaborators: command
outcomes for the dispatcher and tree layouts for the renderer.
"""

from ds_visualizer.schemas.layout import CanvasLayout, LayoutLink, LayoutNode, TreeLayout
from ds_visualizer.schemas.outcomes import CommandOutcome, OutcomeStatus

__all__ = [
    "CanvasLayout",
    "CommandOutcome",
    "LayoutLink",
    "LayoutNode",
    "OutcomeStatus",
    "TreeLayout",
]
