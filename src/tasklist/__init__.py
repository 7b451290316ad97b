"""In-memory task-list manager: a small state engine plus a console front-end."""

__version__ = "0.1.0"
