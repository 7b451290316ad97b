# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks import task_api

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _dispatch(state: AppState, user_input: str) -> str:
    # Plain text is shorthand for /add.
    line = user_input if user_input.startswith("/") else f"/add {user_input}"
    reply = command_registry.handle(state, line)
    return reply if reply is not None else ""


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "tasklist"))
    logger.info("Console connector started (tasks=%s).", len(state.task_store))
    _print_ts(f"[{app_name.upper()}] Type a task to add it. Use /help for commands. Use /exit to quit.")
    print(task_api.render_tasks(task_api.visible_tasks(state)))

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            with state.lock:
                reply = _dispatch(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            print(reply)

    logger.info("Console connector finished.")
