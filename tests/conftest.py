"""Shared fixtures: engines and helpers that drive runs to completion.

Coroutines are driven with asyncio.run so the suite needs no async plugin.
"""

from __future__ import annotations

import asyncio

import pytest

from ds_visualizer.state.models import Frame, LogEntry
from ds_visualizer.structures import BSTEngine, HeapEngine, QueueEngine


async def _paced(engine, verb, args):
    """Run a command, pressing "Next" every time the run is parked."""
    task = asyncio.create_task(engine.execute(verb, list(args)))
    presses = 0
    while not task.done():
        await asyncio.sleep(0)
        if engine.stepper.waiting:
            engine.stepper.advance()
            presses += 1
    return await task, presses


class Recorder:
    """Subscribes to an engine and keeps frames and log entries in arrival order."""

    def __init__(self, engine):
        self.events = []
        engine.subscribe(self.events.append)

    @property
    def frames(self) -> list[Frame]:
        return [e for e in self.events if isinstance(e, Frame)]

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.events if isinstance(e, LogEntry)]


@pytest.fixture
def skip_run():
    """skip_run(engine, verb, *args) -> CommandOutcome, with no pauses at all."""

    def _run(engine, verb, *args):
        return asyncio.run(engine.execute(verb, list(args), skip=True))

    return _run


@pytest.fixture
def paced_run():
    """paced_run(engine, verb, *args) -> (CommandOutcome, number of advance() presses)."""

    def _run(engine, verb, *args):
        return asyncio.run(_paced(engine, verb, args))

    return _run


@pytest.fixture
def recorder():
    return Recorder


@pytest.fixture
def queue():
    return QueueEngine()


@pytest.fixture
def bst():
    return BSTEngine()


@pytest.fixture
def heap():
    return HeapEngine()
