# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FilterMode(StrEnum):
    """
    Completion-based view filter.

    Values match the filter keys of the original UI ("all", "done", "progress").
    """

    ALL = "all"
    DONE = "done"
    IN_PROGRESS = "progress"

    @classmethod
    def parse(cls, raw: str | FilterMode | None) -> FilterMode:
        if raw is None:
            return cls.ALL
        if isinstance(raw, FilterMode):
            return raw
        key = raw.strip().lower()
        if not key:
            return cls.ALL
        alias = _FILTER_ALIASES.get(key)
        if alias is not None:
            return alias
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown filter mode: {raw!r}") from None


_FILTER_ALIASES: dict[str, FilterMode] = {
    "in-progress": FilterMode.IN_PROGRESS,
    "in_progress": FilterMode.IN_PROGRESS,
    "inprogress": FilterMode.IN_PROGRESS,
    "active": FilterMode.IN_PROGRESS,
    "completed": FilterMode.DONE,
}


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    done: bool = False

    def matches(self, filter_mode: FilterMode, search_query: str) -> bool:
        if filter_mode is FilterMode.DONE and not self.done:
            return False
        if filter_mode is FilterMode.IN_PROGRESS and self.done:
            return False
        return search_query.lower() in self.text.lower()


# (text, done) pairs the app starts with when demo seeding is enabled.
DEFAULT_SEED: tuple[tuple[str, bool], ...] = (
    ("Go to supermarket", False),
    ("Do my homework", True),
    ("Play game", False),
    ("Read novel", False),
)
