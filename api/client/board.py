"""
Presentational task board.

The board never edits its cached list in place: each action sends its
request and then replaces the list with a fresh `GET /tasks`.
"""

from __future__ import annotations

from .api import Task, TasksClient

HEADER = "ToDo"
SEPARATOR = "-" * 40


class TaskBoard:
    def __init__(self, client: TasksClient) -> None:
        self.client = client
        self.tasks: list[Task] = []
        self.text = ""

    def refresh(self) -> list[Task]:
        self.tasks = self.client.list_tasks()
        return self.tasks

    def set_text(self, text: str) -> None:
        self.text = text

    def submit(self) -> Task:
        created = self.client.create_task(self.text)
        self.text = ""
        self.refresh()
        return created

    def toggle_completed(self, task_id: str, completed: bool) -> Task:
        updated = self.client.update_task(task_id, completed=completed)
        self.refresh()
        return updated

    def edit_text(self, task_id: str, text: str) -> Task:
        updated = self.client.update_task(task_id, text=text)
        self.refresh()
        return updated

    def delete(self, task_id: str) -> Task:
        deleted = self.client.delete_task(task_id)
        self.refresh()
        return deleted

    def task_at(self, row: int) -> Task:
        """
        Task shown on 1-based screen row `row`.
        """
        if row < 1 or row > len(self.tasks):
            raise IndexError(f"No task on row {row}.")
        return self.tasks[row - 1]

    def render(self) -> str:
        lines = [HEADER, f"> {self.text}", SEPARATOR]
        if not self.tasks:
            lines.append("(no tasks)")
        for row, task in enumerate(self.tasks, start=1):
            mark = "x" if task.completed else " "
            lines.append(f"{row:>3}. [{mark}] {task.text}")
        return "\n".join(lines)
