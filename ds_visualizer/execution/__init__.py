"""
Execution Layer - Step-Synchronized Command Execution

Defines the Stepper (cooperative suspension controller) and the
StructureEngine base that wraps every command in a stepper session.
"""

from ds_visualizer.execution.stepper import Stepper
from ds_visualizer.execution.engine import StructureEngine


__all__ = [
    "Stepper",
    "StructureEngine",
]
