# src/taskstack/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it reads settings once and wires a
fresh TaskStore and ActionHistory into AppState. Nothing is loaded from or
saved to disk; every run starts empty.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..history.action_history import ActionHistory
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    limit = int(getattr(settings, "history_limit", 0) or 0)
    history = ActionHistory(max_depth=limit if limit > 0 else None)

    state = AppState(settings=settings, task_store=TaskStore(), history=history)
    logger.debug("AppState created (history max_depth=%s)", history.max_depth)
    return state


def shutdown_state(state: AppState) -> None:
    """Discard all tasks and history; nothing survives the process."""
    with state.lock:
        tasks = state.task_store.count_tasks()
        actions = len(state.history)
        state.task_store.clear()
        state.history.clear()
    logger.info("Discarded %d tasks and %d undo entries.", tasks, actions)
