# tests/test_action_history.py

from __future__ import annotations

import logging

import pytest

from taskstack.history.action_history import ActionHistory
from taskstack.history.action_models import (
    ActionKind,
    AddedAction,
    CompletedAction,
    RemovedAction,
    UndoOutcome,
)

from .fakes import FakeUndoTarget


def test_push_pop_is_lifo() -> None:
    history = ActionHistory()
    assert history.is_empty()
    assert history.pop() is None

    first = AddedAction(task_id=1)
    second = CompletedAction(task_id=1, previous_completed=False)
    history.push(first)
    history.push(second)

    assert len(history) == 2
    assert history.peek() is second
    assert history.pop() is second
    assert history.pop() is first
    assert history.is_empty()


def test_actions_are_immutable_and_tagged() -> None:
    action = RemovedAction(task_id=3, description="x", previous_completed=True)
    assert action.kind is ActionKind.REMOVED
    assert AddedAction(task_id=1).kind is ActionKind.ADDED
    assert CompletedAction(task_id=1).kind is ActionKind.COMPLETED

    with pytest.raises(AttributeError):
        action.task_id = 4  # type: ignore[misc]


def test_max_depth_drops_oldest() -> None:
    history = ActionHistory(max_depth=2)
    history.push(AddedAction(task_id=1))
    history.push(AddedAction(task_id=2))
    history.push(AddedAction(task_id=3))

    assert len(history) == 2
    assert history.pop() == AddedAction(task_id=3)
    assert history.pop() == AddedAction(task_id=2)
    assert history.pop() is None


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ActionHistory(max_depth=0)


def test_undo_empty_history_is_nothing_to_undo() -> None:
    target = FakeUndoTarget()
    result = ActionHistory().undo(target)

    assert result.outcome is UndoOutcome.NOTHING_TO_UNDO
    assert result.action is None
    assert target.calls == []


def test_undo_dispatches_by_kind() -> None:
    target = FakeUndoTarget(present={1, 2})
    history = ActionHistory()
    history.push(AddedAction(task_id=1))
    history.push(CompletedAction(task_id=2, previous_completed=False))
    history.push(RemovedAction(task_id=5, description="gone", previous_completed=True))

    results = [history.undo(target) for _ in range(3)]

    assert [r.outcome for r in results] == [UndoOutcome.UNDONE] * 3
    assert target.calls == [
        ("reinsert_task", 5, "gone", True),
        ("set_completed", 2, False),
        ("remove_by_id", 1),
    ]
    assert "added back" in results[0].message
    assert "pending" in results[1].message
    assert history.is_empty()


def test_undo_missing_target_consumes_action(caplog: pytest.LogCaptureFixture) -> None:
    target = FakeUndoTarget(present=set())
    history = ActionHistory()
    history.push(CompletedAction(task_id=7, previous_completed=False))
    history.push(AddedAction(task_id=8))

    with caplog.at_level(logging.WARNING, logger="taskstack.history.action_history"):
        first = history.undo(target)
        second = history.undo(target)

    assert first.outcome is UndoOutcome.TARGET_MISSING
    assert first.action == AddedAction(task_id=8)
    assert second.outcome is UndoOutcome.TARGET_MISSING
    assert history.is_empty()
    assert "no longer exists" in caplog.text

    assert history.undo(target).outcome is UndoOutcome.NOTHING_TO_UNDO
