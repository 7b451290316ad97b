# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Settings are injectable: bootstrap and tests may pass their own object.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_seed(name: str) -> tuple[tuple[str, bool], ...]:
    """
    Parse "Buy milk; +Call mom" into (text, done) pairs.
    A leading "+" marks the task as done; blank entries are skipped.
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return ()
    out: list[tuple[str, bool]] = []
    for part in raw.split(";"):
        text = part.strip()
        done = text.startswith("+")
        if done:
            text = text[1:].strip()
        if text:
            out.append((text, done))
    return tuple(out)


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path
    log_to_file: bool

    # ---- Initial data ----
    seed_demo: bool
    seed_tasks: tuple[tuple[str, bool], ...]

    # ---- Messages ----
    empty_text_message: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklist").strip() or "tasklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist"))
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        seed_demo = _env_bool(_k("SEED_DEMO"), True)
        seed_tasks = _env_seed(_k("SEED_TASKS"))

        empty_text_message = (
            _env(_k("EMPTY_TEXT_MESSAGE"), "Please enter todo name").strip()
            or "Please enter todo name"
        )

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            log_to_file=log_to_file,
            seed_demo=seed_demo,
            seed_tasks=seed_tasks,
            empty_text_message=empty_text_message,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
