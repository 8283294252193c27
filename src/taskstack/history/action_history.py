# src/taskstack/history/action_history.py

from __future__ import annotations

import logging

from ..core.ports import UndoTarget
from .action_models import (
    Action,
    AddedAction,
    CompletedAction,
    RemovedAction,
    UndoOutcome,
    UndoResult,
)

logger = logging.getLogger(__name__)


class ActionHistory:
    """
    LIFO record of reversible store mutations.

    Unbounded unless max_depth is given; when the cap is exceeded the oldest
    entry is dropped. There is no redo: an undone action is gone.
    """

    def __init__(self, max_depth: int | None = None) -> None:
        if max_depth is not None and max_depth <= 0:
            raise ValueError("max_depth must be positive or None")
        self._stack: list[Action] = []
        self._max_depth = max_depth

    @property
    def max_depth(self) -> int | None:
        return self._max_depth

    def __len__(self) -> int:
        return len(self._stack)

    def is_empty(self) -> bool:
        return len(self._stack) == 0

    def push(self, action: Action) -> None:
        self._stack.append(action)
        if self._max_depth is not None and len(self._stack) > self._max_depth:
            dropped = self._stack.pop(0)
            logger.debug("History full (max_depth=%s), dropped oldest: %s", self._max_depth, dropped)

    def pop(self) -> Action | None:
        return self._stack.pop() if self._stack else None

    def peek(self) -> Action | None:
        return self._stack[-1] if self._stack else None

    def clear(self) -> None:
        self._stack.clear()

    # ---- undo ----

    def undo(self, store: UndoTarget) -> UndoResult:
        """
        Pop the most recent action and replay its inverse against `store`.

        The action is consumed even when its target task is gone.
        """
        action = self.pop()
        if action is None:
            logger.info("Undo requested with empty history.")
            return UndoResult(outcome=UndoOutcome.NOTHING_TO_UNDO, message="Nothing to undo.")

        if isinstance(action, AddedAction):
            found = store.remove_by_id(action.task_id)
            ok_message = f"Undone: task {action.task_id} removed (it had been added)."
        elif isinstance(action, CompletedAction):
            found = store.set_completed(action.task_id, action.previous_completed)
            state = "completed" if action.previous_completed else "pending"
            ok_message = f"Undone: task {action.task_id} reverted to {state}."
        elif isinstance(action, RemovedAction):
            store.reinsert_task(action.task_id, action.description, action.previous_completed)
            found = True
            ok_message = f"Undone: task '{action.description}' (ID: {action.task_id}) added back."
        else:
            raise TypeError(f"Unsupported action: {action!r}")

        if not found:
            logger.warning("Undo of %s: task %s no longer exists.", action.describe(), action.task_id)
            return UndoResult(
                outcome=UndoOutcome.TARGET_MISSING,
                message=f"Could not undo {action.describe()}: task {action.task_id} not found.",
                action=action,
            )

        logger.info("Undid %s", action.describe())
        return UndoResult(outcome=UndoOutcome.UNDONE, message=ok_message, action=action)
