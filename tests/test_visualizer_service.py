from __future__ import annotations

import asyncio

import pytest

from ds_visualizer.domain.models import StructureKind
from ds_visualizer.schemas.outcomes import OutcomeStatus
from ds_visualizer.services.exceptions import StepperBusyError, UnknownStructureError
from ds_visualizer.services.visualizer import VisualizerService


@pytest.fixture
def service():
    return VisualizerService.create()


def test_engines_share_one_stepper(service):
    steppers = {id(engine.stepper) for engine in service.engines.values()}
    assert steppers == {id(service.stepper)}


def test_engine_lookup(service):
    assert service.engine("bst").kind is StructureKind.BST
    assert service.engine(StructureKind.HEAP).kind is StructureKind.HEAP
    with pytest.raises(UnknownStructureError):
        service.engine("stack")


def test_run_with_skip_records_outcome(service):
    outcome = asyncio.run(service.run("queue", "enqueue", [1, 2], skip=True))
    assert outcome.ok
    assert service.last_outcome == outcome
    assert service.frame("queue").items == [1, 2]


def test_paced_run_is_driven_by_controls(service):
    async def scenario():
        task = service.start("heap", "insert", [7, 9])
        await asyncio.sleep(0)
        assert service.busy
        assert service.stepper_status().waiting

        with pytest.raises(StepperBusyError):
            service.start("queue", "dequeue", [])
        with pytest.raises(StepperBusyError):
            await service.run("bst", "insert", [1], skip=True)

        status = service.advance()
        assert status.running
        service.skip_to_end()
        await task
        await asyncio.sleep(0)

    asyncio.run(scenario())
    assert not service.busy
    assert service.last_outcome.status is OutcomeStatus.OK
    assert service.last_outcome.result == [9, 7]


def test_layout_only_for_tree_structures(service):
    asyncio.run(service.run("queue", "enqueue", [1], skip=True))
    asyncio.run(service.run("bst", "insert", [2, 1, 3], skip=True))

    assert service.layout("queue") is None
    canvas = service.layout("bst")
    assert len(canvas.layout.nodes) == 3
    assert canvas.canvas_width >= 600


def test_logs_and_syntax(service):
    asyncio.run(service.run("bst", "peek_min", [], skip=True))
    assert [e.message for e in service.logs("bst")] == ["Tree empty"]

    service.clear_logs("bst")
    assert service.logs("bst") == []
    assert "remove [value]" in service.syntax("bst")
    assert service.syntax("queue")[0] == "enqueue [values]..."
    assert service.definition("heap").title == "Max Heap"
