import pytest
from fastapi.testclient import TestClient

from todo_api.main import create_app
from todo_api.repositories import InMemoryTodoStore
from todo_api.settings import Settings


@pytest.fixture
def store():
    return InMemoryTodoStore()


@pytest.fixture
def client(store):
    # Empty store so ids start at 1 in every test
    app = create_app(Settings(seed_sample_todos=False), store=store)
    return TestClient(app)


@pytest.fixture
def seeded_client():
    return TestClient(create_app(Settings(seed_sample_todos=True)))
