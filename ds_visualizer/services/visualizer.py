"""
Visualizer Service - Application Orchestration Layer

This service is the entry point for all command operations. It owns the
three structure engines, wires them to a single shared Stepper (so exactly
one run is active process-wide), starts runs, forwards the step controls,
and assembles the view the renderer needs (frame, layout, console log).
"""

import asyncio
import logging
from typing import Dict, List, Optional

from ..domain.models import StructureDefinition, StructureKind
from ..execution.engine import StructureEngine
from ..execution.schemas.state_machine import StepperStatus
from ..execution.stepper import Stepper
from ..layout.tree_layout import fit_canvas, layout_tree
from ..schemas.layout import CanvasLayout
from ..schemas.outcomes import CommandOutcome
from ..state.models import Frame, LogEntry
from ..structures.bst import BSTEngine
from ..structures.heap import HeapEngine
from ..structures.queue import QueueEngine
from .exceptions import StepperBusyError, UnknownStructureError

logger = logging.getLogger(__name__)


class VisualizerService:
    def __init__(self, engines: Dict[StructureKind, StructureEngine], stepper: Stepper):
        self.engines = engines
        self.stepper = stepper
        self._active: Optional[asyncio.Task] = None
        self.last_outcome: Optional[CommandOutcome] = None

    @classmethod
    def create(cls) -> "VisualizerService":
        """Build the three engines around one shared stepper."""
        stepper = Stepper()
        engines = {
            StructureKind.QUEUE: QueueEngine(stepper),
            StructureKind.BST: BSTEngine(stepper),
            StructureKind.HEAP: HeapEngine(stepper),
        }
        return cls(engines=engines, stepper=stepper)

    def engine(self, structure) -> StructureEngine:
        try:
            return self.engines[StructureKind(structure)]
        except (KeyError, ValueError):
            raise UnknownStructureError(f"Unknown structure: {structure}")

    @property
    def busy(self) -> bool:
        """True from the moment a run is started until its session has ended."""
        return self.stepper.is_running or (self._active is not None and not self._active.done())

    # ==========================================================================
    # Runs
    # ==========================================================================

    async def run(self, structure, verb: str, args: List[int], skip: bool = False) -> CommandOutcome:
        """Run a command and wait for it to finish (paced by the stepper unless `skip`)."""
        engine = self.engine(structure)
        self._refuse_if_busy()
        outcome = await engine.execute(verb, args, skip=skip)
        self.last_outcome = outcome
        return outcome

    def start(self, structure, verb: str, args: List[int]) -> asyncio.Task:
        """
        Start a paced run in the background and return immediately.
        The caller drives it with advance()/skip_to_end().
        """
        engine = self.engine(structure)
        self._refuse_if_busy()
        logger.info(f"Starting paced run {engine.kind.value}.{verb} {args}")

        task = asyncio.create_task(engine.execute(verb, args))
        task.add_done_callback(self._record_outcome)
        self._active = task
        return task

    # ==========================================================================
    # Step Controls
    # ==========================================================================

    def advance(self) -> StepperStatus:
        self.stepper.advance()
        return self.stepper.status()

    def skip_to_end(self) -> StepperStatus:
        self.stepper.skip_to_end()
        return self.stepper.status()

    def stepper_status(self) -> StepperStatus:
        return self.stepper.status()

    # ==========================================================================
    # Views
    # ==========================================================================

    def frame(self, structure) -> Frame:
        return self.engine(structure).frame

    def layout(self, structure) -> Optional[CanvasLayout]:
        frame = self.frame(structure)
        if frame.tree is None:
            return None
        return fit_canvas(layout_tree(frame.tree))

    def logs(self, structure) -> List[LogEntry]:
        return list(self.engine(structure).logs)

    def clear_logs(self, structure):
        self.engine(structure).clear_logs()

    def definition(self, structure) -> StructureDefinition:
        return self.engine(structure).definition

    def syntax(self, structure) -> List[str]:
        return self.definition(structure).syntax

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _refuse_if_busy(self):
        if self.busy:
            raise StepperBusyError("A run is already in progress")

    def _record_outcome(self, task: asyncio.Task):
        if task.cancelled():
            logger.warning("Paced run was cancelled")
            return
        if task.exception() is not None:
            logger.error(f"Paced run failed: {task.exception()}")
            return
        self.last_outcome = task.result()
