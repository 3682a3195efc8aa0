import pytest
from fastapi.testclient import TestClient

from task_manager.config import Settings
from task_manager.main import create_app
from task_manager.services.task_service import TaskService
from task_manager.storage.task_store import TaskStore


@pytest.fixture
def store() -> TaskStore:
    store = TaskStore()
    store.seed()
    return store


@pytest.fixture
def service(store: TaskStore) -> TaskService:
    return TaskService(store)


@pytest.fixture
def client(store: TaskStore):
    app = create_app(config=Settings(port=3000, public_url=""), store=store)
    with TestClient(app) as test_client:
        yield test_client
