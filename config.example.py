# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_DATA_DIR": "Directory for tasklist.log (default: .local/tasklist).",
    "TASKLIST_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/tasklist.log (true/false).",
    # Initial data (tasks live in memory only and are gone on exit)
    "TASKLIST_SEED_DEMO": "Start with the four demo tasks (true/false, default: true).",
    "TASKLIST_SEED_TASKS": (
        "';'-separated initial tasks, '+' prefix marks done, e.g. 'Buy milk; +Call mom'. "
        "Overrides the demo seed."
    ),
    # Messages
    "TASKLIST_EMPTY_TEXT_MESSAGE": "Shown when a task name is empty (default: Please enter todo name).",
}
