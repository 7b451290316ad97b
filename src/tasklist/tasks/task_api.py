# src/tasklist/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.state import AppState
from .task_errors import EMPTY_TEXT_MESSAGE, EmptyTextError, TaskNotFoundError
from .task_models import FilterMode, Task

logger = logging.getLogger(__name__)

NO_RESULTS_TEXT = "No search found"


def _empty_text_message(state: AppState) -> str:
    return str(getattr(state.settings, "empty_text_message", "") or EMPTY_TEXT_MESSAGE)


def visible_tasks(state: AppState) -> list[Task]:
    """Current view: the store filtered by the caller-held filter mode and search query."""
    return state.task_store.view(state.view.filter_mode, state.view.search_query)


def set_filter(state: AppState, raw: str | FilterMode) -> FilterMode:
    state.view.filter_mode = FilterMode.parse(raw)
    return state.view.filter_mode


def set_search(state: AppState, query: str) -> None:
    state.view.search_query = query


def submit_create(state: AppState, text: str) -> Task | None:
    """
    Create a task from user input.

    On empty input the error message is put on the view state, the draft is
    kept for correction and None is returned.
    """
    try:
        task = state.task_store.create(text)
    except EmptyTextError:
        state.view.draft = text
        state.view.error = _empty_text_message(state)
        return None

    state.view.draft = ""
    state.view.error = ""
    return task


def begin_edit(state: AppState, task_id: int) -> Task:
    """Stage a task for editing: remember its id and prefill the draft with its text."""
    task = state.task_store.get(task_id)
    state.view.selected_id = task.id
    state.view.draft = task.text
    state.view.error = ""
    return task


def submit_edit(state: AppState, text: str) -> Task | None:
    """
    Save the staged edit.

    Raises TaskNotFoundError when nothing is staged or the staged task is gone;
    the selection is dropped in the latter case.
    """
    task_id = state.view.selected_id
    if task_id is None:
        raise TaskNotFoundError(None)

    try:
        task = state.task_store.update(task_id, text)
    except EmptyTextError:
        state.view.draft = text
        state.view.error = _empty_text_message(state)
        return None
    except TaskNotFoundError:
        logger.info("Staged task vanished before save id=%s", task_id)
        clear_selection(state)
        raise

    clear_selection(state)
    return task


def confirm_remove(state: AppState, task_id: int) -> bool:
    removed = state.task_store.remove(task_id)
    if state.view.selected_id == task_id:
        clear_selection(state)
    return removed


def clear_selection(state: AppState) -> None:
    state.view.selected_id = None
    state.view.draft = ""
    state.view.error = ""


def render_tasks(tasks: Iterable[Task]) -> str:
    lines = [f"[{'x' if t.done else ' '}] {t.id}  {t.text}" for t in tasks]
    if not lines:
        return NO_RESULTS_TEXT
    return "\n".join(lines)
