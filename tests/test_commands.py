# tests/test_commands.py

from __future__ import annotations

from tasklist.cli.commands import CommandRegistry, registry
from tasklist.core.state import AppState
from tasklist.tasks.task_models import FilterMode


def test_command_registry_routes_2_and_3_params(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"h2": [], "h3": []}

    def h2(state, args):
        called["h2"].append(args)
        return "h2"

    def h3(state, args, raw):
        called["h3"].append(raw)
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "/a x y") == "h2"
    assert reg.handle(state, "/BEE keep  two spaces") == "h3"
    assert called["h2"] == [["x", "y"]]
    assert called["h3"] == ["keep  two spaces"]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_commands(state: AppState) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("add", "edit", "save", "rm", "toggle", "filter", "search", "list"):
        assert f"/{name} " in text


def test_list_and_empty_view(state: AppState) -> None:
    assert registry.handle(state, "/ls") == (
        "[ ] 1  Go to supermarket\n[x] 2  Do my homework\n[ ] 3  Play game"
    )
    assert registry.handle(state, "/search z") == "No search found"


def test_add(state: AppState) -> None:
    assert registry.handle(state, "/add Read  novel") == "Added 4: Read  novel"
    assert registry.handle(state, "/add   ") == "Please enter todo name"
    assert len(state.task_store) == 4


def test_edit_in_one_step_and_noop(state: AppState) -> None:
    assert registry.handle(state, "/edit 3 Play chess") == "Saved 3: Play chess"
    assert registry.handle(state, "/edit 3 Play chess") == "Saved 3: Play chess"
    assert state.task_store.get(3).text == "Play chess"


def test_edit_then_save(state: AppState) -> None:
    reply = registry.handle(state, "/edit 1") or ""
    assert reply.startswith("Editing 1: Go to supermarket")
    assert state.view.selected_id == 1

    assert registry.handle(state, "/save") == "Please enter todo name"
    assert state.view.selected_id == 1

    assert registry.handle(state, "/save Go to market") == "Saved 1: Go to market"
    assert registry.handle(state, "/save again") == "Nothing to save. Use /edit <id> first."


def test_edit_errors(state: AppState) -> None:
    assert registry.handle(state, "/edit") == "Usage: /edit <id> [new text]"
    assert registry.handle(state, "/edit abc") == "Usage: /edit <id> [new text]"
    assert registry.handle(state, "/edit 99 x") == "No task with id 99."


def test_remove(state: AppState) -> None:
    assert registry.handle(state, "/rm 2") == "Removed 2."
    assert registry.handle(state, "/del 2") == "No task with id 2."
    assert registry.handle(state, "/rm") == "Usage: /rm <id>"
    assert len(state.task_store) == 2


def test_toggle(state: AppState) -> None:
    assert registry.handle(state, "/toggle 1") == "1 is now done."
    assert registry.handle(state, "/t 1") == "1 is now in progress."
    assert registry.handle(state, "/t 42") == "No task with id 42."


def test_filter_and_search(state: AppState) -> None:
    assert registry.handle(state, "/filter done") == "[x] 2  Do my homework"
    assert state.view.filter_mode is FilterMode.DONE

    assert registry.handle(state, "/filter later") == "Usage: /filter all|done|progress"
    assert state.view.filter_mode is FilterMode.DONE

    registry.handle(state, "/filter progress")
    assert registry.handle(state, "/search go") == "[ ] 1  Go to supermarket"

    registry.handle(state, "/search")
    assert state.view.search_query == ""
    assert "Filter is progress" in (registry.handle(state, "/filter") or "")


def test_status(state: AppState) -> None:
    text = registry.handle(state, "/status") or ""
    assert "Tasks: 3 (1 done, 2 in progress)" in text
    assert "Filter: all" in text


def test_tab_separated_arguments(state: AppState) -> None:
    assert registry.handle(state, "/add\tRead novel") == "Added 4: Read novel"
    assert registry.handle(state, "/edit 3\tPlay chess") == "Saved 3: Play chess"
    assert state.task_store.get(3).text == "Play chess"


def test_edit_with_trailing_whitespace_only_stages(state: AppState) -> None:
    reply = registry.handle(state, "/edit 3  ") or ""
    assert reply.startswith("Editing 3: Play game")
    assert state.view.selected_id == 3
    assert state.task_store.get(3).text == "Play game"
