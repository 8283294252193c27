# src/taskstack/tasks/task_api.py

"""
The operations the shell calls.

Each mutating call runs the store mutation and, only when it succeeded,
records the inverse in the history. Both steps happen under state.lock.
"""

from __future__ import annotations

import logging

from ..core.state import AppState
from ..history.action_models import AddedAction, CompletedAction, RemovedAction, UndoResult
from .task_models import CompleteResult, RemoveResult, Task

logger = logging.getLogger(__name__)


def add_task(state: AppState, description: str) -> int:
    with state.lock:
        # Record the id add_task returned, never one derived from next_id.
        task_id = state.task_store.add_task(description)
        state.history.push(AddedAction(task_id=task_id))
    logger.info("Added task id=%s", task_id)
    return task_id


def list_tasks(state: AppState) -> list[Task]:
    with state.lock:
        return state.task_store.list_tasks()


def complete_task(state: AppState, task_id: int) -> CompleteResult:
    with state.lock:
        result = state.task_store.complete_task(task_id)
        if result.succeeded:
            state.history.push(
                CompletedAction(task_id=task_id, previous_completed=bool(result.previous_completed))
            )
    logger.info("complete_task id=%s -> %s", task_id, result.outcome)
    return result


def remove_task(state: AppState, task_id: int) -> RemoveResult:
    with state.lock:
        result = state.task_store.remove_task(task_id)
        if result.succeeded and result.removed is not None:
            removed = result.removed
            state.history.push(
                RemovedAction(
                    task_id=removed.id,
                    description=removed.description,
                    previous_completed=removed.completed,
                )
            )
    logger.info("remove_task id=%s -> %s", task_id, result.outcome)
    return result


def undo(state: AppState) -> UndoResult:
    with state.lock:
        return state.history.undo(state.task_store)
