# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskstack.core.state import AppState
from taskstack.history.action_history import ActionHistory
from taskstack.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    A SimpleNamespace keeps unit tests independent from the process environment.
    """
    return SimpleNamespace(
        app_name="taskstack-test",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        history_limit=0,
        max_description_length=255,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with a real (in-memory) store and an unbounded history."""
    return AppState(settings=settings, task_store=TaskStore(), history=ActionHistory())
