"""
Task subsystem.

Components:
- task_models.py: data structures (Task, FilterMode, default seed)
- task_errors.py: error taxonomy raised by the store
- task_store.py: in-memory store + mutation/query operations
- task_api.py: caller-side helpers (staged edits, error messages, rendering)
"""
