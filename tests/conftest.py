# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="INFO",
        data_dir=tmp_path,
        log_to_file=False,
        seed_demo=False,
        seed_tasks=(),
        empty_text_message="Please enter todo name",
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore(
        [
            ("Go to supermarket", False),
            ("Do my homework", True),
            ("Play game", False),
        ]
    )


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
