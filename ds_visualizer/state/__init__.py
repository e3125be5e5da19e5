"""
State Layer - Runtime Data Models

Defines the observable runtime view of a run: status snapshots,
highlights, console log entries and per-step frames.
"""

from ds_visualizer.state.models import (
    Frame,
    Highlight,
    HighlightTone,
    LogEntry,
    Severity,
    StatusSnapshot,
    TreeNodeSnapshot,
    TreeSnapshot,
)

__all__ = [
    "Frame",
    "Highlight",
    "HighlightTone",
    "LogEntry",
    "Severity",
    "StatusSnapshot",
    "TreeNodeSnapshot",
    "TreeSnapshot",
]
