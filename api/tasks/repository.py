"""
Task persistence (raw SQL).
"""

from __future__ import annotations

from core import db


class TaskNotFoundError(LookupError):
    """
    No row matched the task id of an UPDATE/DELETE.
    """

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


async def insert_task(*, task_id: str, text: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO tasks (id, text, completed)
        VALUES ($1, $2, false)
        RETURNING id, text, completed
        """,
        task_id,
        text,
    )
    if row is None:
        raise RuntimeError("Failed to insert task.")
    return row


async def list_tasks() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, text, completed
        FROM tasks
        ORDER BY created_at DESC, id DESC
        """
    )


async def get_task(task_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, text, completed
        FROM tasks
        WHERE id = $1
        """,
        task_id,
    )


async def update_task(
    task_id: str,
    *,
    text: str | None = None,
    completed: bool | None = None,
) -> dict:
    """
    Write only the supplied fields. None means "leave as is".
    """
    row = await db.fetch_one(
        """
        UPDATE tasks
        SET text = COALESCE($2, text),
            completed = COALESCE($3, completed)
        WHERE id = $1
        RETURNING id, text, completed
        """,
        task_id,
        text,
        completed,
    )
    if row is None:
        raise TaskNotFoundError(task_id)
    return row


async def delete_task(task_id: str) -> dict:
    row = await db.fetch_one(
        """
        DELETE FROM tasks
        WHERE id = $1
        RETURNING id, text, completed
        """,
        task_id,
    )
    if row is None:
        raise TaskNotFoundError(task_id)
    return row
