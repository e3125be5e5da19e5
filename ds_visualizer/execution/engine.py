"""
Engine - Step-Synchronized Command Execution

A StructureEngine owns one data structure and runs commands against it one
step at a time. It is the deterministic "Manager" around each algorithm:
-----------------------------------------------

1. Validate the verb and its operands against the structure's vocabulary
   (before anything is mutated).
2. Begin a Stepper session.
3. Run the algorithm coroutine. The algorithm updates the observable view
   (highlight + status snapshot) and calls `await self.step()`, which
   publishes a Frame and parks on a suspension point.
4. Translate user-facing failures into console log entries.
5. Always end the Stepper session, whatever happened, so the command
   surface is never left disabled.

Subclasses implement one coroutine per verb (named after the verb) plus
`_structure_view()`, which describes the structure for the renderer.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, List, Optional, Union

from ..config import settings
from ..domain.models import StructureDefinition, StructureKind
from ..schemas.outcomes import CommandOutcome, OutcomeStatus
from ..services.exceptions import (
    InvalidArgumentError,
    StepperBusyError,
    UnknownCommandError,
    VisualizerError,
)
from ..state.models import Frame, Highlight, HighlightTone, LogEntry, Severity, StatusSnapshot
from .stepper import Stepper

logger = logging.getLogger(__name__)

EngineEvent = Union[Frame, LogEntry]
Listener = Callable[[EngineEvent], None]


class StructureEngine(ABC):
    definition: ClassVar[StructureDefinition]

    def __init__(self, stepper: Optional[Stepper] = None):
        self.stepper = stepper or Stepper()
        self.logs: List[LogEntry] = []
        self._listeners: List[Listener] = []
        self._status: Optional[StatusSnapshot] = None
        self._highlight = Highlight()
        self._sequence = 0
        self._frame = self._build_frame()

    @property
    def kind(self) -> StructureKind:
        return self.definition.kind

    @property
    def frame(self) -> Frame:
        """The most recently published frame."""
        return self._frame

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    @abstractmethod
    def size(self) -> int:
        ...

    async def execute(
        self, verb: str, args: Optional[List[int]] = None, skip: bool = False
    ) -> CommandOutcome:
        """
        The command surface. Never raises for user errors; the returned
        CommandOutcome says what happened.

        With `skip=True` the run starts in skip mode: every step is still
        emitted, but none of them pauses.
        """
        args = list(args or [])
        verb = verb.strip().lower()

        # 1. Refuse concurrent runs before touching anything
        if self.stepper.is_running:
            error = StepperBusyError("A run is already in progress")
            logger.warning(f"Rejected '{verb}' on {self.kind.value}: run in progress")
            return self._outcome(verb, args, OutcomeStatus.REJECTED, error=error)

        # 2. Resolve the verb
        spec = self.definition.lookup(verb)
        if spec is None:
            error = UnknownCommandError(f"Unknown: {verb}")
            self.log(str(error), Severity.ERROR)
            return self._outcome(verb, args, OutcomeStatus.REJECTED, error=error)

        # 3. Run inside a stepper session
        self.stepper.begin()
        if skip:
            self.stepper.skip_to_end()
        self._status = None
        self._highlight = Highlight()
        logger.info(f"Running {self.kind.value}.{verb} {args}")
        try:
            if not spec.accepts(len(args)):
                raise InvalidArgumentError(f"Usage: {spec.usage}")

            handler = getattr(self, spec.verb)
            operands = spec.operands(args)
            if spec.varargs:
                result = await handler(operands)
            else:
                result = await handler(*operands)
            return self._outcome(verb, args, OutcomeStatus.OK, result=result)

        except VisualizerError as e:
            self.log(str(e), Severity.ERROR)
            return self._outcome(verb, args, OutcomeStatus.FAILED, error=e)

        except Exception:
            logger.exception(f"{self.kind.value}.{verb} crashed")
            self.log("Error", Severity.ERROR)
            raise

        finally:
            # 4. Tear down: release the stepper, clear the transient view
            self.stepper.end()
            self._status = None
            self._highlight = Highlight()
            self._publish(self._build_frame())

    # ==========================================================================
    # Observable View (used by the algorithms)
    # ==========================================================================

    def set_status(self, status: Optional[StatusSnapshot]):
        self._status = status

    def highlight(self, ids: List[str], tone: HighlightTone = HighlightTone.COMPARE):
        self._highlight = Highlight(ids=list(ids), tone=tone)

    def clear_highlight(self):
        self._highlight = Highlight()

    def emit(self) -> Frame:
        """Publish the current view without pausing."""
        frame = self._build_frame()
        self._publish(frame)
        return frame

    async def step(self):
        """
        Publish the current view, then wait on a suspension point.

        A frame is only built when somebody can see it: a subscriber, or a
        run that actually parks on this step. Skipped and unpaced runs
        without subscribers go straight to the closing frame.
        """
        if self._listeners or self.stepper.pauses:
            self.emit()
        await self.stepper.request_suspension()

    def log(self, message: str, severity: Severity = Severity.INFO) -> LogEntry:
        entry = LogEntry(message=message, severity=severity)
        self.logs.append(entry)
        limit = settings.LOG_HISTORY_LIMIT
        if limit and len(self.logs) > limit:
            del self.logs[: len(self.logs) - limit]
        self._notify(entry)
        return entry

    def clear_logs(self):
        self.logs.clear()

    # ==========================================================================
    # Subscribers
    # ==========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a push-stream consumer. Frames and log entries arrive in
        exactly the order the engine emits them. Returns an unsubscribe hook.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ==========================================================================
    # Structure Hooks
    # ==========================================================================

    @abstractmethod
    def _structure_view(self) -> dict:
        """Return the Frame fields describing the structure (items and/or tree)."""
        ...

    # ==========================================================================
    # Standard Helpers
    # ==========================================================================

    def _build_frame(self) -> Frame:
        return Frame(
            sequence=self._sequence,
            structure=self.kind,
            highlight=self._highlight,
            status=self._status,
            **self._structure_view(),
        )

    def _publish(self, frame: Frame):
        self._sequence += 1
        frame.sequence = self._sequence
        self._frame = frame
        self._notify(frame)

    def _notify(self, event: EngineEvent):
        for listener in list(self._listeners):
            listener(event)

    def _outcome(
        self,
        verb: str,
        args: List[int],
        status: OutcomeStatus,
        result=None,
        error: Optional[VisualizerError] = None,
    ) -> CommandOutcome:
        return CommandOutcome(
            structure=self.kind,
            verb=verb,
            args=args,
            status=status,
            result=result,
            error_kind=error.kind if error else None,
            message=str(error) if error else None,
        )
