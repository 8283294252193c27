# src/taskstack/history/action_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class ActionKind(StrEnum):
    ADDED = "added"
    COMPLETED = "completed"
    REMOVED = "removed"


@dataclass(frozen=True, slots=True)
class Action:
    """One reversible store mutation. Carries exactly what is needed to invert it."""

    task_id: int
    kind: ClassVar[ActionKind]

    def describe(self) -> str:
        return f"{self.kind} task {self.task_id}"


@dataclass(frozen=True, slots=True)
class AddedAction(Action):
    kind: ClassVar[ActionKind] = ActionKind.ADDED

    def describe(self) -> str:
        return f"add of task {self.task_id}"


@dataclass(frozen=True, slots=True)
class CompletedAction(Action):
    previous_completed: bool = False
    kind: ClassVar[ActionKind] = ActionKind.COMPLETED

    def describe(self) -> str:
        return f"completion of task {self.task_id}"


@dataclass(frozen=True, slots=True)
class RemovedAction(Action):
    description: str = ""
    previous_completed: bool = False
    kind: ClassVar[ActionKind] = ActionKind.REMOVED

    def describe(self) -> str:
        return f"removal of task {self.task_id} ('{self.description}')"


class UndoOutcome(StrEnum):
    UNDONE = "undone"
    NOTHING_TO_UNDO = "nothing_to_undo"
    TARGET_MISSING = "target_missing"


@dataclass(frozen=True, slots=True)
class UndoResult:
    outcome: UndoOutcome
    message: str
    action: Action | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is UndoOutcome.UNDONE
