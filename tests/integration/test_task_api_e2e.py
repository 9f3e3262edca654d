"""Integration tests — full app (middleware, health, task routes) over the in-memory service."""

import pytest
from fastapi.testclient import TestClient

from todo_api.core.domain.task import Task
from todo_api.infrastructure.configuration.main_settings import Settings
from todo_api.infrastructure.entrypoints.api.app_factory import create_app
from todo_api.infrastructure.fakes.fake_task_service import FakeTaskService


@pytest.fixture
def app_client(settings: Settings) -> TestClient:
    with TestClient(create_app(settings)) as client:
        yield client


def test_create_read_update_roundtrip(app_client: TestClient):
    created = app_client.post("/tasks", json={"description": "new task"})
    assert created.status_code == 201
    task = created.json()["task"]
    assert task["description"] == "new task"
    assert task["id"]

    read = app_client.get(f"/tasks/{task['id']}")
    assert read.status_code == 200
    assert read.json() == {"task": task}

    updated = app_client.put(f"/tasks/{task['id']}", json={"description": "done task"})
    assert updated.status_code == 200
    assert updated.json() == {}

    reread = app_client.get(f"/tasks/{task['id']}")
    assert reread.json() == {"task": {"id": task["id"], "description": "done task"}}


def test_unknown_task_reports_find_failed(app_client: TestClient):
    response = app_client.get("/tasks/aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee")

    assert response.status_code == 500
    assert response.json() == {"error": "find failed"}


def test_update_unknown_task_reports_update_failed(app_client: TestClient):
    response = app_client.put("/tasks/missing", json={"description": "x"})

    assert response.status_code == 500
    assert response.json() == {"error": "update failed"}


def test_blank_description_rejected_by_service(app_client: TestClient):
    response = app_client.post("/tasks", json={})

    assert response.status_code == 500
    assert response.json() == {"error": "create failed"}


def test_malformed_body_never_reaches_service(app_client: TestClient):
    response = app_client.post(
        "/tasks", content=b'{"invalid":"json', headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "invalid request"}


def test_health_and_metrics(app_client: TestClient):
    health = app_client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "ok"

    app_client.post("/tasks", json={"description": "counted"})
    metrics = app_client.get("/metrics")
    assert metrics.status_code == 200
    assert "todo_api_task_requests_total" in metrics.text


def test_responses_carry_correlation_id(app_client: TestClient):
    response = app_client.get("/health", headers={"X-Correlation-ID": "trace-me"})

    assert response.headers["x-correlation-id"] == "trace-me"


def test_api_prefix_and_injected_service(settings: Settings):
    fake = FakeTaskService()
    fake.create_returns(Task(id="1-2-3", description="new task"))
    prefixed = settings.model_copy(update={"api_prefix": "/api/v1"})

    with TestClient(create_app(prefixed, task_service=fake)) as client:
        response = client.post("/api/v1/tasks", json={"description": "new task"})
        unprefixed = client.post("/tasks", json={"description": "new task"})

    assert response.status_code == 201
    assert response.json() == {"task": {"id": "1-2-3", "description": "new task"}}
    assert unprefixed.status_code == 404
    assert fake.create_calls == ["new task"]


class _EmptyTaskService(FakeTaskService):
    def __len__(self) -> int:
        return 0


def test_injected_service_is_used_even_when_falsy(settings: Settings):
    fake = _EmptyTaskService()
    fake.read_returns(Task(id="a-b-c", description="existing task"))

    with TestClient(create_app(settings, task_service=fake)) as client:
        response = client.get("/tasks/a-b-c")

    assert response.status_code == 200
    assert fake.read_calls == ["a-b-c"]
