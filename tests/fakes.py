# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tasks.repository import TaskNotFoundError


@dataclass
class FakeTaskRepository:
    """
    In-memory stand-in for `tasks.repository`.

    Reversed insertion order plays the role of `ORDER BY created_at DESC`.
    """

    rows: dict[str, dict[str, Any]] = field(default_factory=dict)
    list_calls: int = 0

    async def insert_task(self, *, task_id: str, text: str) -> dict:
        row = {"id": task_id, "text": text, "completed": False}
        self.rows[task_id] = row
        return dict(row)

    async def list_tasks(self) -> list[dict]:
        self.list_calls += 1
        return [dict(row) for row in reversed(self.rows.values())]

    async def get_task(self, task_id: str) -> dict | None:
        row = self.rows.get(task_id)
        return dict(row) if row is not None else None

    async def update_task(
        self,
        task_id: str,
        *,
        text: str | None = None,
        completed: bool | None = None,
    ) -> dict:
        row = self.rows.get(task_id)
        if row is None:
            raise TaskNotFoundError(task_id)
        if text is not None:
            row["text"] = text
        if completed is not None:
            row["completed"] = completed
        return dict(row)

    async def delete_task(self, task_id: str) -> dict:
        row = self.rows.pop(task_id, None)
        if row is None:
            raise TaskNotFoundError(task_id)
        return row


class FakeDb:
    """
    Records calls made through `core.db` helpers and replays canned rows.
    """

    def __init__(self, *, one: dict | None = None, many: list[dict] | None = None) -> None:
        self.one = one
        self.many = many or []
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []

    async def fetch_one(self, sql: str, *args: Any) -> dict | None:
        self.calls.append(("fetch_one", sql, args))
        return self.one

    async def fetch_all(self, sql: str, *args: Any) -> list[dict]:
        self.calls.append(("fetch_all", sql, args))
        return self.many

    async def execute(self, sql: str, *args: Any) -> None:
        self.calls.append(("execute", sql, args))
