"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_store.py: JSON-file storage (load/save whole collection)
- task_api.py: command operations built on load + mutate + save
"""
