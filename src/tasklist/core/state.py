# src/tasklist/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..tasks.task_models import FilterMode
from .ports import TaskRepo


@dataclass
class ViewState:
    """
    Presentation-side state. The store never sees it; it is passed into
    TaskStore.view() on every render.
    """

    filter_mode: FilterMode = FilterMode.ALL
    search_query: str = ""

    # Task staged for edit/delete (by id, never by reference).
    selected_id: int | None = None
    draft: str = ""
    error: str = ""


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskRepo
    view: ViewState = field(default_factory=ViewState)

    # Held around each command so a multi-threaded host runs one mutation at a time.
    lock: threading.RLock = field(default_factory=threading.RLock)
