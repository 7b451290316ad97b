# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the initial task set (explicit seed, demo seed, or empty),
- wires a fresh TaskStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_models import DEFAULT_SEED
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def initial_seed(settings) -> tuple[tuple[str, bool], ...]:
    """Explicit TASKLIST_SEED_TASKS wins; otherwise the demo seed when enabled."""
    seed = tuple(getattr(settings, "seed_tasks", ()) or ())
    if seed:
        return seed
    if getattr(settings, "seed_demo", True):
        return DEFAULT_SEED
    return ()


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    seed = initial_seed(settings)
    logger.debug("Seeding %d task(s)", len(seed))

    return AppState(settings=settings, task_store=TaskStore(seed))
