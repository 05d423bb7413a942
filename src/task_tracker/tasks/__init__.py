"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskPayload, TaskStatus)
- task_errors.py: domain errors (NotFound, NotAuthorized, ...)
- task_store.py: SQLite-backed ordered map id -> Task
- task_api.py: the task operations and the by-name operation table
"""
