# src/taskstack/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def run_console_loop(
    state: AppState,
    *,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """
    Read commands until /exit, EOF or Ctrl+C.

    input_fn/output_fn are injectable so the loop can be driven by tests.
    """
    logger.info("Console connector started.")
    app_name = str(getattr(state.settings, "app_name", "taskstack"))

    def emit(text: str) -> None:
        output_fn(f"[{_ts_local()}] {text}")

    emit(f"[{app_name}] Type a command. Use /help for commands. Use /exit to quit.")

    while True:
        try:
            user_input = input_fn(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output_fn("")
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed for input %r.", user_input)
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Not a command. Use /help to list available commands (e.g. /add Buy milk)."

        emit(reply)

    logger.info("Console connector finished.")
