"""
HTTP client for the task API.

Endpoints used:
- GET    /tasks        -> [task, ...]
- POST   /tasks        -> task (201)
- GET    /tasks/{id}   -> task
- POST   /tasks/{id}   -> task
- DELETE /tasks/{id}   -> task
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

import httpx

DEFAULT_API_URL = "http://localhost:3000"


# API failures are explicit and separable from transport errors.
class TasksApiError(RuntimeError):
    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


@dataclass(frozen=True)
class Task:
    id: str
    text: str
    completed: bool

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Task:
        return cls(
            id=str(data["id"]),
            text=str(data["text"]),
            completed=bool(data["completed"]),
        )


def api_base_url() -> str:
    return os.environ.get("TASKS_API_URL", DEFAULT_API_URL).strip() or DEFAULT_API_URL


def _error_detail(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text[:300]
    if isinstance(data, dict) and isinstance(data.get("detail"), str):
        return data["detail"]
    return resp.text[:300]


class TasksClient:
    """
    Synchronous wrapper over the task endpoints.

    Pass `http` to reuse an existing httpx.Client (tests hand in FastAPI's
    TestClient); otherwise one is created for `base_url` and owned here.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http: httpx.Client | None = None,
        timeout_s: float = 10.0,
    ) -> None:
        self._owns_http = http is None
        if http is None:
            http = httpx.Client(base_url=(base_url or api_base_url()).rstrip("/"), timeout=timeout_s)
        self._http = http

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> TasksClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, method: str, path: str, *, json: dict | None = None) -> Any:
        resp = self._http.request(method, path, json=json)
        if resp.status_code >= 400:
            raise TasksApiError(resp.status_code, _error_detail(resp))
        return resp.json()

    def list_tasks(self) -> list[Task]:
        data = self._request("GET", "/tasks")
        return [Task.from_json(item) for item in data]

    def get_task(self, task_id: str) -> Task:
        return Task.from_json(self._request("GET", f"/tasks/{task_id}"))

    def create_task(self, text: str) -> Task:
        return Task.from_json(self._request("POST", "/tasks", json={"text": text}))

    def update_task(
        self,
        task_id: str,
        *,
        text: str | None = None,
        completed: bool | None = None,
    ) -> Task:
        body: dict[str, Any] = {}
        if text is not None:
            body["text"] = text
        if completed is not None:
            body["completed"] = completed
        return Task.from_json(self._request("POST", f"/tasks/{task_id}", json=body))

    def delete_task(self, task_id: str) -> Task:
        return Task.from_json(self._request("DELETE", f"/tasks/{task_id}"))
