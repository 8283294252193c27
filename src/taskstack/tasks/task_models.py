# src/taskstack/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    @property
    def status_mark(self) -> str:
        return "X" if self.completed else " "


class CompleteOutcome(StrEnum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ALREADY_COMPLETED = "already_completed"


class RemoveOutcome(StrEnum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class CompleteResult:
    """
    Result of TaskStore.complete_task.

    previous_completed is the flag as it was before the call; it is only
    meaningful on SUCCESS (and then always False).
    """

    task_id: int
    outcome: CompleteOutcome
    previous_completed: bool | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is CompleteOutcome.SUCCESS


@dataclass(frozen=True, slots=True)
class RemoveResult:
    """Result of TaskStore.remove_task; `removed` is a snapshot of the unlinked task."""

    task_id: int
    outcome: RemoveOutcome
    removed: Task | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is RemoveOutcome.SUCCESS
