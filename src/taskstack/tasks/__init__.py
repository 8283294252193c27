"""
Task subsystem.

Components:
- task_models.py: data structures (Task, result types)
- task_store.py: in-memory ordered storage keyed by id
- task_api.py: store mutation + history recording, used by the shell
"""
