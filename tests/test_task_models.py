# tests/test_task_models.py

from __future__ import annotations

import pytest

from tasklist.tasks.task_models import DEFAULT_SEED, FilterMode, Task


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("all", FilterMode.ALL),
        ("  DONE ", FilterMode.DONE),
        ("progress", FilterMode.IN_PROGRESS),
        ("in-progress", FilterMode.IN_PROGRESS),
        ("active", FilterMode.IN_PROGRESS),
        ("completed", FilterMode.DONE),
        ("", FilterMode.ALL),
        (None, FilterMode.ALL),
        (FilterMode.DONE, FilterMode.DONE),
    ],
)
def test_filter_mode_parse(raw, expected) -> None:
    assert FilterMode.parse(raw) is expected


def test_filter_mode_parse_unknown() -> None:
    with pytest.raises(ValueError):
        FilterMode.parse("someday")


def test_task_matches_short_circuits_on_completion() -> None:
    open_task = Task(id=1, text="Play game")
    done_task = Task(id=2, text="Play game", done=True)

    assert open_task.matches(FilterMode.ALL, "")
    assert not open_task.matches(FilterMode.DONE, "")
    assert open_task.matches(FilterMode.IN_PROGRESS, "GAME")
    assert not done_task.matches(FilterMode.IN_PROGRESS, "")
    assert not done_task.matches(FilterMode.DONE, "chess")


def test_default_seed_matches_demo_data() -> None:
    assert [text for text, _ in DEFAULT_SEED] == [
        "Go to supermarket",
        "Do my homework",
        "Play game",
        "Read novel",
    ]
    assert [done for _, done in DEFAULT_SEED] == [False, True, False, False]
