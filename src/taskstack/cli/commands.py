# src/taskstack/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..history.action_models import UndoOutcome
from ..tasks import task_api
from ..tasks.task_models import CompleteOutcome, Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit (also /quit).")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    raw = args[0].rstrip(".")
    try:
        task_id = int(raw)
    except ValueError:
        return None
    return task_id if task_id > 0 else None


def format_task(task: Task) -> str:
    return f"ID: {task.id} | [{task.status_mark}] | {task.description}"


def format_task_list(tasks: list[Task]) -> str:
    if not tasks:
        return "No tasks in the list."
    lines = ["--- Tasks ---"]
    lines.extend(format_task(t) for t in tasks)
    lines.append("-------------")
    return "\n".join(lines)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    description = " ".join(args).strip()
    if not description:
        return "Usage: /add <description>"

    max_len = int(getattr(state.settings, "max_description_length", 255))
    if len(description) > max_len:
        return f"Description too long ({len(description)} > {max_len} characters)."

    task_id = task_api.add_task(state, description)
    return f"Task '{description}' (ID: {task_id}) added."


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_task_list(task_api.list_tasks(state))


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return f"Invalid id: {' '.join(args) or '(none)'}. Usage: /done <id>"

    result = task_api.complete_task(state, task_id)
    if result.outcome is CompleteOutcome.SUCCESS:
        return f"Task {task_id} marked as completed."
    if result.outcome is CompleteOutcome.ALREADY_COMPLETED:
        return f"Task {task_id} is already completed."
    return f"Task with ID {task_id} not found."


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return f"Invalid id: {' '.join(args) or '(none)'}. Usage: /rm <id>"

    result = task_api.remove_task(state, task_id)
    if result.removed is None:
        return f"Task with ID {task_id} not found."
    return f"Task {task_id} ('{result.removed.description}') removed."


def cmd_undo(state: AppState, args: list[str]) -> str:
    result = task_api.undo(state)
    if result.outcome is UndoOutcome.TARGET_MISSING:
        return f"Undo failed: {result.message}"
    return result.message


def cmd_status(state: AppState, args: list[str]) -> str:
    history = state.history
    limit = history.max_depth
    return (
        "Status:\n"
        f"  Tasks: {state.task_store.count_tasks()}\n"
        f"  Next id: {state.task_store.next_id}\n"
        f"  Undo history: {len(history)} (limit: {limit if limit is not None else 'none'})"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <description>.", aliases=["a", "new"])
registry.register("list", cmd_list, help_text="List tasks in insertion order.", aliases=["ls", "l"])
registry.register(
    "done", cmd_done, help_text="Mark a task as completed: /done <id>.", aliases=["complete", "c"]
)
registry.register("rm", cmd_rm, help_text="Remove a task: /rm <id>.", aliases=["remove", "del"])
registry.register("undo", cmd_undo, help_text="Undo the last add/done/rm.", aliases=["u", "z"])
registry.register("status", cmd_status, help_text="Show task count, next id and undo depth.")
