"""
Pydantic schemas for task endpoints.

Request bodies are strict: unknown fields are rejected and values are not
coerced between types.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class CreateTaskRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    text: str


class UpdateTaskRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    text: str | None = None
    completed: bool | None = None

    @field_validator("text", "completed")
    @classmethod
    def _not_null(cls, value):
        # Omitting a field is fine; sending null is not.
        if value is None:
            raise ValueError("must not be null")
        return value


class TaskResponse(BaseModel):
    id: str
    text: str
    completed: bool
