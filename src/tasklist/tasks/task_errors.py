# src/tasklist/tasks/task_errors.py

from __future__ import annotations

EMPTY_TEXT_MESSAGE = "Please enter todo name"


class TaskStoreError(Exception):
    """Base class for recoverable TaskStore errors. The store is unchanged when raised."""


class EmptyTextError(TaskStoreError, ValueError):
    def __init__(self, message: str = EMPTY_TEXT_MESSAGE) -> None:
        super().__init__(message)


class TaskNotFoundError(TaskStoreError, LookupError):
    def __init__(self, task_id: object) -> None:
        super().__init__(f"task not found: id={task_id!r}")
        self.task_id = task_id
