"""
Domain Layer - Static Data Models

Defines the static command vocabulary: the structures the visualizer
hosts and the verbs each one accepts.
"""

from ds_visualizer.domain.models import (
    CommandSpec,
    StructureDefinition,
    StructureKind,
)

__all__ = [
    "CommandSpec",
    "StructureDefinition",
    "StructureKind",
]
