# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from client.api import TasksClient
from client.board import TaskBoard
from main import app
from tasks import repository as tasks_repository

from .fakes import FakeTaskRepository

REPOSITORY_FUNCTIONS = ("insert_task", "list_tasks", "get_task", "update_task", "delete_task")


@pytest.fixture()
def repo(monkeypatch: pytest.MonkeyPatch) -> FakeTaskRepository:
    """
    Swap the SQL repository for an in-memory one.

    The service looks functions up on the module at call time, so patching
    module attributes is enough.
    """
    fake = FakeTaskRepository()
    for name in REPOSITORY_FUNCTIONS:
        monkeypatch.setattr(tasks_repository, name, getattr(fake, name))
    return fake


@pytest.fixture()
def http(repo: FakeTaskRepository) -> TestClient:
    # Not used as a context manager: the lifespan (DB pool, migrations) stays off.
    return TestClient(app)


@pytest.fixture()
def tasks_client(http: TestClient) -> TasksClient:
    return TasksClient(http=http)


@pytest.fixture()
def board(tasks_client: TasksClient) -> TaskBoard:
    return TaskBoard(tasks_client)
