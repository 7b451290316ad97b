# src/tasklist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_errors import TaskNotFoundError

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Handlers taking a third parameter also get the raw argument string,
        so task text keeps its inner spacing.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(None, 1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        raw = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        args = raw.split()
        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, raw)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def _after_id(raw: str) -> str:
    """Text following the first token of the raw argument string; any whitespace separates."""
    parts = raw.strip().split(None, 1)
    return parts[1] if len(parts) > 1 else ""


def _render_view(state: AppState) -> str:
    return task_api.render_tasks(task_api.visible_tasks(state))


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return _render_view(state)


def cmd_add(state: AppState, args: list[str], raw: str) -> str:
    task = task_api.submit_create(state, raw.strip())
    if task is None:
        return state.view.error
    logger.info("Task created id=%s", task.id)
    return f"Added {task.id}: {task.text}"


def cmd_edit(state: AppState, args: list[str], raw: str) -> str:
    """
    /edit <id>         -> stage the task and show its current text
    /edit <id> <text>  -> stage and save in one step
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id> [new text]"

    try:
        current = task_api.begin_edit(state, task_id)
    except TaskNotFoundError:
        return f"No task with id {task_id}."

    text = _after_id(raw)
    if not text:
        return f"Editing {current.id}: {current.text}\nUse /save <new text> to apply."
    return cmd_save(state, [], text)


def cmd_save(state: AppState, args: list[str], raw: str) -> str:
    if state.view.selected_id is None:
        return "Nothing to save. Use /edit <id> first."

    try:
        task = task_api.submit_edit(state, raw.strip())
    except TaskNotFoundError as e:
        return f"No task with id {e.task_id}."
    if task is None:
        return state.view.error
    return f"Saved {task.id}: {task.text}"


def cmd_remove(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    if not task_api.confirm_remove(state, task_id):
        return f"No task with id {task_id}."
    logger.info("Task removed id=%s", task_id)
    return f"Removed {task_id}."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /toggle <id>"
    try:
        task = state.task_store.toggle(task_id)
    except TaskNotFoundError:
        return f"No task with id {task_id}."
    return f"{task.id} is now {'done' if task.done else 'in progress'}."


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter           -> show current filter
    /filter all|done|progress
    """
    if not args:
        return f"Filter is {state.view.filter_mode.value}. Use /filter all|done|progress."
    try:
        task_api.set_filter(state, args[0])
    except ValueError:
        return "Usage: /filter all|done|progress"
    return _render_view(state)


def cmd_search(state: AppState, args: list[str], raw: str) -> str:
    task_api.set_search(state, raw.strip())
    return _render_view(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    total = len(state.task_store)
    done = len(state.task_store.view("done"))
    search = state.view.search_query or "(none)"
    selected = state.view.selected_id if state.view.selected_id is not None else "(none)"
    return (
        "Status:\n"
        f"  Tasks: {total} ({done} done, {total - done} in progress)\n"
        f"  Filter: {state.view.filter_mode.value}\n"
        f"  Search: {search}\n"
        f"  Editing: {selected}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks for the current filter/search.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Create a task: /add <text>.")
registry.register("edit", cmd_edit, help_text="Rename a task: /edit <id> [new text].")
registry.register("save", cmd_save, help_text="Save the staged edit: /save <new text>.")
registry.register("rm", cmd_remove, help_text="Delete a task: /rm <id>.", aliases=["del"])
registry.register("toggle", cmd_toggle, help_text="Flip done/in progress: /toggle <id>.", aliases=["t"])
registry.register("filter", cmd_filter, help_text="Filter: /filter all | done | progress.")
registry.register("search", cmd_search, help_text="Search text (empty clears): /search [query].")
registry.register("status", cmd_status, help_text="Show counts and current filter/search.")
