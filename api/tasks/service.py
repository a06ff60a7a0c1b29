"""
Task business logic.

One repository call per operation. Update and delete do
not check existence first; `repository.TaskNotFoundError` propagates to the
app-level handler in `main.py`.
"""

from __future__ import annotations

import logging
import uuid

from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)


def new_task_id() -> str:
    return str(uuid.uuid4())


def _to_task_response(row: dict) -> schemas.TaskResponse:
    return schemas.TaskResponse(
        id=str(row["id"]),
        text=str(row["text"]),
        completed=bool(row["completed"]),
    )


async def create_task(payload: schemas.CreateTaskRequest) -> schemas.TaskResponse:
    row = await repository.insert_task(task_id=new_task_id(), text=payload.text)
    logger.info("task_created id=%s", row["id"])
    return _to_task_response(row)


async def list_tasks() -> list[schemas.TaskResponse]:
    rows = await repository.list_tasks()
    return [_to_task_response(row) for row in rows]


async def get_task(task_id: str) -> schemas.TaskResponse:
    row = await repository.get_task(task_id)
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found.",
        )
    return _to_task_response(row)


async def update_task(task_id: str, payload: schemas.UpdateTaskRequest) -> schemas.TaskResponse:
    changes = payload.model_dump(exclude_unset=True)
    row = await repository.update_task(
        task_id,
        text=changes.get("text"),
        completed=changes.get("completed"),
    )
    logger.info("task_updated id=%s fields=%s", task_id, ",".join(sorted(changes)) or "-")
    return _to_task_response(row)


async def delete_task(task_id: str) -> schemas.TaskResponse:
    row = await repository.delete_task(task_id)
    logger.info("task_deleted id=%s", task_id)
    return _to_task_response(row)
