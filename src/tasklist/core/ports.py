# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front-end.

Commands and connectors depend on this Protocol instead of TaskStore itself,
so tests can hand in a fake and other hosts can wrap the store.
"""

from typing import Any, Protocol


class TaskRepo(Protocol):
    # Queries
    def view(self, filter_mode: Any = ..., search_query: str = "") -> list[Any]: ...
    def get(self, task_id: int) -> Any: ...
    def snapshot(self) -> tuple[Any, ...]: ...
    def __len__(self) -> int: ...

    # Mutations
    def create(self, text: str) -> Any: ...
    def update(self, task_id: int, text: str) -> Any: ...
    def toggle(self, task_id: int) -> Any: ...
    def remove(self, task_id: int) -> bool: ...
