"""
Stepper - Cooperative Suspension Controller

The Stepper turns an otherwise-instant algorithm into a sequence of
user-paced steps. Engines call `await stepper.request_suspension()` between
algorithmic steps; the run then stays parked until the control surface calls
`advance()` (one step) or `skip_to_end()` (collapse every remaining pause).
-----------------------------------------------

Only one suspension can be pending at a time: the run is a single coroutine,
and it cannot request a new suspension before the previous one resolved.
`end()` always force-resolves a pending suspension so a run can never hang
after its session was torn down.
"""

import asyncio
import logging
from typing import Optional

from ..services.exceptions import StepperBusyError
from .schemas.state_machine import StepperState, StepperStatus

logger = logging.getLogger(__name__)


class Stepper:
    def __init__(self):
        self._state = StepperState.IDLE
        self._waiting = False
        self._skipping = False
        self._pending: Optional[asyncio.Future] = None
        self._suspension_count = 0

    # ==========================================================================
    # Session Lifecycle
    # ==========================================================================

    def begin(self):
        """Idle -> Running. Refuses to start while another run is active."""
        if self._state is StepperState.RUNNING:
            raise StepperBusyError("A run is already in progress")
        self._state = StepperState.RUNNING
        self._skipping = False
        self._waiting = False
        self._suspension_count = 0
        logger.debug("Stepper session started")

    def end(self):
        """Running -> Idle. Releases any run still parked on a suspension point."""
        self._resolve_pending()
        self._state = StepperState.IDLE
        self._skipping = False
        self._waiting = False
        logger.debug(f"Stepper session ended after {self._suspension_count} suspension(s)")

    # ==========================================================================
    # Suspension Points (called by engines)
    # ==========================================================================

    async def request_suspension(self):
        """
        Park the calling run until advance(), skip_to_end() or end().

        Returns immediately outside of a session (direct engine calls that
        nobody is pacing). While skipping it only yields to the event loop,
        so a long skipped run never starves other tasks.
        """
        self._suspension_count += 1
        if self._state is not StepperState.RUNNING:
            return
        if self._skipping:
            await asyncio.sleep(0)
            return

        loop = asyncio.get_running_loop()
        self._pending = loop.create_future()
        self._waiting = True
        try:
            await self._pending
        finally:
            self._waiting = False
            self._pending = None

    # ==========================================================================
    # Controls (called by the UI)
    # ==========================================================================

    def advance(self):
        """Resolve exactly one pending suspension. No-op if nothing is pending."""
        self._resolve_pending()

    def skip_to_end(self):
        """Let the rest of the run execute without pausing."""
        if self._state is not StepperState.RUNNING:
            return
        self._skipping = True
        self._resolve_pending()

    # ==========================================================================
    # Introspection
    # ==========================================================================

    @property
    def state(self) -> StepperState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is StepperState.RUNNING

    @property
    def pauses(self) -> bool:
        """True when the next suspension will actually park the run."""
        return self._state is StepperState.RUNNING and not self._skipping

    @property
    def waiting(self) -> bool:
        return self._waiting

    @property
    def skipping(self) -> bool:
        return self._skipping

    @property
    def suspension_count(self) -> int:
        return self._suspension_count

    def status(self) -> StepperStatus:
        return StepperStatus(
            state=self._state,
            waiting=self._waiting,
            skipping=self._skipping,
            suspension_count=self._suspension_count,
        )

    def _resolve_pending(self):
        if self._pending is not None and not self._pending.done():
            self._pending.set_result(None)
            self._waiting = False
