# src/taskstack/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace

from .task_models import (
    CompleteOutcome,
    CompleteResult,
    RemoveOutcome,
    RemoveResult,
    Task,
)

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Tasks live in a dict keyed by id; dict insertion order is the display order.
    Removal keeps the relative order of the remaining tasks and re-inserted
    tasks go to the tail.

    Invariants:
    - ids are unique within the store
    - next_id is strictly greater than every id ever issued or re-inserted

    Every read returns copies, so callers can never mutate stored tasks.
    Not thread-safe on its own; callers serialize access (see AppState.lock).
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        logger.debug("TaskStore ready")

    # ---- read API ----

    @property
    def next_id(self) -> int:
        return self._next_id

    def count_tasks(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[Task]:
        """Snapshots of all tasks in display order ([] means "no tasks")."""
        return [replace(t) for t in self._tasks.values()]

    def get_task(self, task_id: int) -> Task | None:
        task = self._tasks.get(task_id)
        return replace(task) if task is not None else None

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    # ---- normal mutations ----

    def add_task(self, description: str) -> int:
        task_id = self._next_id
        self._next_id += 1
        self._tasks[task_id] = Task(id=task_id, description=description, completed=False)
        logger.debug("Task added id=%s description=%r", task_id, description)
        return task_id

    def complete_task(self, task_id: int) -> CompleteResult:
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("complete_task: id=%s not found", task_id)
            return CompleteResult(task_id=task_id, outcome=CompleteOutcome.NOT_FOUND)

        if task.completed:
            logger.debug("complete_task: id=%s already completed", task_id)
            return CompleteResult(
                task_id=task_id,
                outcome=CompleteOutcome.ALREADY_COMPLETED,
                previous_completed=True,
            )

        previous = task.completed
        task.completed = True
        logger.debug("Task completed id=%s", task_id)
        return CompleteResult(
            task_id=task_id,
            outcome=CompleteOutcome.SUCCESS,
            previous_completed=previous,
        )

    def remove_task(self, task_id: int) -> RemoveResult:
        task = self._tasks.pop(task_id, None)
        if task is None:
            logger.debug("remove_task: id=%s not found", task_id)
            return RemoveResult(task_id=task_id, outcome=RemoveOutcome.NOT_FOUND)

        logger.debug("Task removed id=%s description=%r", task_id, task.description)
        return RemoveResult(task_id=task_id, outcome=RemoveOutcome.SUCCESS, removed=task)

    # ---- undo-only helpers ----

    def remove_by_id(self, task_id: int) -> bool:
        """Undo of an add: same removal as remove_task, snapshot discarded."""
        return self.remove_task(task_id).succeeded

    def set_completed(self, task_id: int, completed: bool) -> bool:
        """
        Undo of a completion: write the flag directly.

        Bypasses complete_task validation, which only ever moves False -> True.
        """
        task = self._tasks.get(task_id)
        if task is None:
            return False
        task.completed = completed
        logger.debug("Task id=%s completed set to %s", task_id, completed)
        return True

    def reinsert_task(self, task_id: int, description: str, completed: bool) -> None:
        """
        Undo of a removal: append a task that keeps its original id.

        The task goes to the tail, not back to its former position.
        """
        if task_id in self._tasks:
            raise ValueError(f"task id {task_id} is already present")

        self._tasks[task_id] = Task(id=task_id, description=description, completed=completed)
        if task_id >= self._next_id:
            self._next_id = task_id + 1
        logger.debug("Task re-inserted id=%s next_id=%s", task_id, self._next_id)

    def clear(self) -> None:
        """Drop every task. next_id is kept so ids are never reused."""
        self._tasks.clear()
