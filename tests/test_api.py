from __future__ import annotations

import time

import pytest
from fastapi.testclient import TestClient

from ds_visualizer.app.dependencies import get_visualizer_service
from ds_visualizer.app.main import app
from ds_visualizer.services.visualizer import VisualizerService


@pytest.fixture
def client():
    service = VisualizerService.create()
    app.dependency_overrides[get_visualizer_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def skip_until_done(client, structure, attempts=200):
    """Keep pressing "skip" until the paced run has ended; return the structure view."""
    for _ in range(attempts):
        client.post("/stepper/skip")
        view = client.get(f"/structures/{structure}").json()
        if view["logs"] and client.get("/stepper").json()["state"] == "IDLE":
            return client.get(f"/structures/{structure}").json()
        time.sleep(0.01)
    raise AssertionError("run did not finish")


def test_skip_command_returns_outcome(client):
    response = client.post("/structures/bst/commands", json={"verb": "insert", "args": [5, 3, 8], "skip": True})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["outcome"]["result"] == [3, 5, 8]


def test_structure_view_has_frame_layout_and_logs(client):
    client.post("/structures/bst/commands", json={"verb": "insert", "args": [2, 1], "skip": True})
    body = client.get("/structures/bst").json()

    assert body["structure"] == "bst"
    tree = body["frame"]["tree"]
    assert tree["root"] == tree["nodes"][0]["id"]
    assert [n["value"] for n in tree["nodes"]] == [2, 1]
    assert len(body["layout"]["layout"]["nodes"]) == 2
    assert body["logs"][-1]["message"] == "Inserted: 2, 1"
    assert body["logs"][-1]["severity"] == "success"
    assert body["stepper"]["state"] == "IDLE"


def test_queue_has_no_layout(client):
    client.post("/structures/queue/commands", json={"verb": "enqueue", "args": [4], "skip": True})
    body = client.get("/structures/queue").json()
    assert body["frame"]["items"] == [4]
    assert body["layout"] is None


def test_failed_and_rejected_commands(client):
    failed = client.post("/structures/heap/commands", json={"verb": "remove_max", "skip": True}).json()
    assert failed["status"] == "FAILED"
    assert failed["outcome"]["error_kind"] == "EmptyContainerError"

    rejected = client.post("/structures/heap/commands", json={"verb": "explode", "skip": True}).json()
    assert rejected["status"] == "REJECTED"
    assert rejected["outcome"]["message"] == "Unknown: explode"


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/structures/stack"),
        ("get", "/structures/stack/syntax"),
        ("delete", "/structures/stack/logs"),
    ],
)
def test_unknown_structure_is_404(client, method, path):
    assert getattr(client, method)(path).status_code == 404


def test_unknown_structure_command_is_404(client):
    response = client.post("/structures/stack/commands", json={"verb": "push", "args": [1], "skip": True})
    assert response.status_code == 404


def test_syntax(client):
    body = client.get("/structures/heap/syntax").json()
    assert body["structure"] == "heap"
    assert body["title"] == "Max Heap"
    assert "create [values]..." in body["commands"]


def test_clear_logs(client):
    client.post("/structures/queue/commands", json={"verb": "dequeue", "skip": True})
    assert client.get("/structures/queue").json()["logs"]

    assert client.delete("/structures/queue/logs").status_code == 204
    assert client.get("/structures/queue").json()["logs"] == []


def test_paced_run_blocks_others_until_skipped(client):
    started = client.post("/structures/queue/commands", json={"verb": "enqueue", "args": [1, 2, 3]})
    assert started.status_code == 202
    assert started.json()["status"] == "RUNNING"

    busy = client.post("/structures/bst/commands", json={"verb": "insert", "args": [1], "skip": True})
    assert busy.status_code == 409

    view = skip_until_done(client, "queue")
    assert view["frame"]["items"] == [1, 2, 3]
    assert [e["message"] for e in view["logs"]] == ["Enqueued: 1", "Enqueued: 2", "Enqueued: 3"]

    stepper = client.get("/stepper").json()
    for _ in range(200):
        if stepper["last_outcome"] is not None:
            break
        time.sleep(0.01)
        stepper = client.get("/stepper").json()
    assert stepper["running"] is False
    assert stepper["last_outcome"]["verb"] == "enqueue"
    assert stepper["last_outcome"]["result"] == [1, 2, 3]


def test_sorted_insert_chain_renders(client):
    values = list(range(300))
    response = client.post("/structures/bst/commands", json={"verb": "insert", "args": values, "skip": True})
    assert response.json()["status"] == "OK"

    response = client.get("/structures/bst")
    assert response.status_code == 200
    body = response.json()
    assert len(body["frame"]["tree"]["nodes"]) == 300
    assert len(body["layout"]["layout"]["nodes"]) == 300
    assert body["stepper"]["last_outcome"]["result"] == values
