from __future__ import annotations

import asyncio

import pytest

from ds_visualizer.schemas.outcomes import OutcomeStatus
from ds_visualizer.services.exceptions import EmptyContainerError, InvalidArgumentError
from ds_visualizer.state.models import HighlightTone, Severity


def test_fifo_order(queue, skip_run):
    skip_run(queue, "enqueue", 1, 2, 3)
    removed = [skip_run(queue, "dequeue").result for _ in range(3)]
    assert removed == [1, 2, 3]
    assert queue.items == []


def test_enqueue_highlights_each_new_tail(queue, skip_run, recorder):
    rec = recorder(queue)
    skip_run(queue, "enqueue", 7, 8)

    steps = [f for f in rec.frames if f.highlight.ids]
    assert [f.highlight.ids for f in steps] == [["queue-0"], ["queue-1"]]
    assert all(f.highlight.tone is HighlightTone.INSERT for f in steps)
    assert [f.items for f in steps] == [[7], [7, 8]]
    assert [f.status.active_index for f in steps] == [0, 1]
    assert rec.messages == ["Enqueued: 7", "Enqueued: 8"]


def test_enqueue_without_values_is_invalid(queue, skip_run):
    outcome = skip_run(queue, "enqueue")
    assert outcome.status is OutcomeStatus.FAILED
    assert outcome.error_kind == "InvalidArgumentError"
    assert queue.logs[-1].message == "Usage: enqueue [values]..."
    assert queue.logs[-1].severity is Severity.ERROR

    with pytest.raises(InvalidArgumentError):
        asyncio.run(queue.enqueue([]))


def test_dequeue_on_empty_queue_logs_error(queue, skip_run):
    outcome = skip_run(queue, "dequeue")
    assert outcome.status is OutcomeStatus.FAILED
    assert outcome.error_kind == "EmptyContainerError"
    assert queue.logs[-1].severity is Severity.ERROR
    assert queue.items == []
    assert not queue.stepper.is_running


def test_dequeue_pauses_before_and_after_removal(queue, skip_run, paced_run, recorder):
    skip_run(queue, "enqueue", 4, 5)
    rec = recorder(queue)
    outcome, presses = paced_run(queue, "dequeue")

    assert outcome.result == 4
    assert presses == 2
    first, second = rec.frames[0], rec.frames[1]
    assert first.items == [4, 5]
    assert first.highlight.tone is HighlightTone.REMOVE
    assert second.items == [5]
    assert second.status.label == "Dequeued"
    assert second.status.value == 4


def test_peek_front_and_rear_do_not_mutate(queue, skip_run):
    skip_run(queue, "enqueue", 10, 20, 30)

    front = skip_run(queue, "peek_front")
    rear = skip_run(queue, "peek_rear")

    assert (front.result, rear.result) == (10, 30)
    assert queue.items == [10, 20, 30]
    assert [e.message for e in queue.logs[-2:]] == ["Front: 10", "Rear: 30"]


@pytest.mark.parametrize("verb", ["peek_front", "peek_rear"])
def test_peek_on_empty_queue_fails(queue, skip_run, verb):
    outcome = skip_run(queue, verb)
    assert outcome.error_kind == "EmptyContainerError"

    with pytest.raises(EmptyContainerError):
        asyncio.run(getattr(queue, verb)())


def test_clear_is_immediate(queue, skip_run, paced_run):
    skip_run(queue, "enqueue", 1, 2)
    outcome, presses = paced_run(queue, "clear")
    assert outcome.ok
    assert presses == 0
    assert queue.items == []
