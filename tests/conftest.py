import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from todo_api.infrastructure.configuration.main_settings import Settings
from todo_api.infrastructure.entrypoints.api.task_handler import TaskHandler
from todo_api.infrastructure.fakes.fake_task_service import FakeTaskService


@pytest.fixture
def fake_service() -> FakeTaskService:
    return FakeTaskService()


@pytest.fixture
def client(fake_service: FakeTaskService) -> TestClient:
    """Bare app: only the task routes, wired to the scripted service."""
    router = APIRouter()
    TaskHandler(fake_service).register(router)
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_name="TestTodoAPI",
        app_env="test",
        log_level="WARNING",
    )
