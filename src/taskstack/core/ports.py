# src/taskstack/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

ActionHistory replays undo against a Protocol instead of the concrete
TaskStore, so the undo dispatch can be tested with a fake store.
"""

from typing import Protocol


class UndoTarget(Protocol):
    """Store primitives that undo needs. Each returns False when the task is gone."""

    def remove_by_id(self, task_id: int) -> bool: ...
    def set_completed(self, task_id: int, completed: bool) -> bool: ...
    def reinsert_task(self, task_id: int, description: str, completed: bool) -> None: ...
