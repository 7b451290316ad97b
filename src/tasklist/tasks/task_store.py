# src/tasklist/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from .task_errors import EmptyTextError, TaskNotFoundError
from .task_models import FilterMode, Task

logger = logging.getLogger(__name__)

SeedItem = str | tuple[str, bool]


class TaskStore:
    """
    In-memory task store.

    Owns the ordered task collection:
    - insertion order is display order
    - ids come from a per-store counter and are never reused, even after delete
    - Task values are frozen; update/toggle swap in a new value at the same position

    Every operation is all-or-nothing: when an error is raised the collection
    is left untouched.

    Thread-safety:
    - none; callers serialise mutations (see AppState.lock)
    """

    def __init__(self, seed: Iterable[SeedItem] | None = None) -> None:
        self._tasks: list[Task] = []
        self._ids = itertools.count(1)
        for item in seed or ():
            text, done = (item, False) if isinstance(item, str) else item
            task = self.create(text)
            if done:
                self.toggle(task.id)
        logger.info("TaskStore ready total=%s", len(self._tasks))

    # ---- low-level helpers ----

    @staticmethod
    def _validate_text(text: str) -> None:
        if not text or not text.strip():
            raise EmptyTextError()

    def _index_of(self, task_id: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        raise TaskNotFoundError(task_id)

    # ---- read API ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return any(t.id == task_id for t in self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.snapshot())

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: int) -> Task:
        return self._tasks[self._index_of(task_id)]

    def view(
        self,
        filter_mode: FilterMode | str = FilterMode.ALL,
        search_query: str = "",
    ) -> list[Task]:
        """
        Tasks matching the completion filter and the case-insensitive search,
        in collection order. An empty list is a normal result.
        """
        mode = FilterMode.parse(filter_mode)
        query = search_query or ""
        return [t for t in self._tasks if t.matches(mode, query)]

    # ---- mutations ----

    def create(self, text: str) -> Task:
        self._validate_text(text)
        task = Task(id=next(self._ids), text=text, done=False)
        self._tasks.append(task)
        logger.debug("Task added id=%s total=%s", task.id, len(self._tasks))
        return task

    def update(self, task_id: int, text: str) -> Task:
        """
        Rename a task, keeping its id, done flag and position.

        Text identical to the stored value (untrimmed comparison) is a no-op
        that returns the stored task as is.
        """
        self._validate_text(text)
        i = self._index_of(task_id)
        current = self._tasks[i]
        if text == current.text:
            logger.debug("Task update skipped id=%s (unchanged text)", task_id)
            return current

        updated = replace(current, text=text)
        self._tasks[i] = updated
        logger.debug("Task updated id=%s", task_id)
        return updated

    def toggle(self, task_id: int) -> Task:
        i = self._index_of(task_id)
        toggled = replace(self._tasks[i], done=not self._tasks[i].done)
        self._tasks[i] = toggled
        logger.debug("Task toggled id=%s done=%s", task_id, toggled.done)
        return toggled

    def remove(self, task_id: int) -> bool:
        """
        Delete a task. Returns False (and changes nothing) when the id is
        unknown, so repeating a delete is harmless.
        """
        try:
            i = self._index_of(task_id)
        except TaskNotFoundError:
            logger.debug("Task remove skipped id=%s (not found)", task_id)
            return False

        del self._tasks[i]
        logger.debug("Task removed id=%s total=%s", task_id, len(self._tasks))
        return True
