# src/taskstack/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..history.action_history import ActionHistory
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings in the app, a SimpleNamespace in tests).
    settings: Any

    task_store: TaskStore
    history: ActionHistory

    # Serializes mutate-then-record and pop-then-replay sequences.
    lock: threading.RLock = field(default_factory=threading.RLock)
