"""
Interactive terminal loop for the task board.

Rows are addressed by the number shown on screen, not by task id.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from .api import TasksApiError, TasksClient
from .board import TaskBoard

logger = logging.getLogger(__name__)

HELP = """commands:
  add <text>        create a task
  done <n>          mark row n completed
  undo <n>          mark row n not completed
  edit <n> <text>   replace the text of row n
  rm <n>            delete row n
  refresh           reload the list
  help              show this help
  quit              exit"""


def _row(arg: str) -> int:
    try:
        return int(arg)
    except ValueError:
        raise ValueError(f"Row must be a number, got {arg!r}.") from None


def handle_command(
    board: TaskBoard,
    line: str,
    *,
    write: Callable[[str], None] = print,
) -> bool:
    """
    Apply one command line to the board. Returns False when the session should end.
    """
    command, _, rest = line.strip().partition(" ")
    command = command.lower()
    rest = rest.strip()

    if command in {"quit", "exit", "q"}:
        return False
    if command == "":
        return True
    if command == "help":
        write(HELP)
    elif command == "refresh":
        board.refresh()
    elif command == "add":
        if not rest:
            raise ValueError("Usage: add <text>")
        board.set_text(rest)
        board.submit()
    elif command in {"done", "undo"}:
        task = board.task_at(_row(rest))
        board.toggle_completed(task.id, command == "done")
    elif command == "edit":
        row_arg, _, text = rest.partition(" ")
        if not text.strip():
            raise ValueError("Usage: edit <n> <text>")
        task = board.task_at(_row(row_arg))
        board.edit_text(task.id, text.strip())
    elif command == "rm":
        task = board.task_at(_row(rest))
        board.delete(task.id)
    else:
        raise ValueError(f"Unknown command {command!r}. Type 'help'.")
    return True


def run(
    board: TaskBoard,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    try:
        board.refresh()
    except (TasksApiError, httpx.HTTPError) as exc:
        write(f"error: {exc}")

    while True:
        write(board.render())
        try:
            line = read_line("> ")
        except (EOFError, KeyboardInterrupt):
            write("")
            return
        try:
            if not handle_command(board, line, write=write):
                return
        except (ValueError, IndexError) as exc:
            write(f"error: {exc}")
        except (TasksApiError, httpx.HTTPError) as exc:
            logger.debug("request_failed line=%r", line, exc_info=True)
            write(f"error: {exc}")


def main() -> None:
    with TasksClient() as client:
        run(TaskBoard(client))


if __name__ == "__main__":
    main()
