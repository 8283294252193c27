"""
taskstack: an interactive, in-memory task manager with undo.

Components:
- tasks/: Task model, in-memory TaskStore, task_api (the operations the shell calls)
- history/: Action records and the ActionHistory undo stack
- cli/, connectors/: slash-command registry, console REPL and entrypoint
"""

__version__ = "0.1.0"
