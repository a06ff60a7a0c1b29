"""
Task API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter()


@router.post(
    "/tasks",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.TaskResponse,
)
async def create_task(request: schemas.CreateTaskRequest) -> schemas.TaskResponse:
    return await service.create_task(request)


@router.get("/tasks", response_model=list[schemas.TaskResponse])
async def list_tasks() -> list[schemas.TaskResponse]:
    return await service.list_tasks()


@router.get("/tasks/{task_id}", response_model=schemas.TaskResponse)
async def get_task(task_id: str) -> schemas.TaskResponse:
    return await service.get_task(task_id)


@router.post("/tasks/{task_id}", response_model=schemas.TaskResponse)
async def update_task(
    task_id: str,
    request: schemas.UpdateTaskRequest,
) -> schemas.TaskResponse:
    """
    Partial update: only the fields present in the body are written.

    The body must be a JSON object; `{}` is a no-op.
    """
    return await service.update_task(task_id, request)


@router.delete("/tasks/{task_id}", response_model=schemas.TaskResponse)
async def delete_task(task_id: str) -> schemas.TaskResponse:
    """
    Hard delete. Returns the record as it was before removal.
    """
    return await service.delete_task(task_id)
