# src/taskstack/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKSTACK"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Undo history ----
    # 0 means unbounded.
    history_limit: int

    # ---- Input validation (console) ----
    max_description_length: int

    @property
    def history_max_depth(self) -> int | None:
        return self.history_limit if self.history_limit > 0 else None

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskstack").strip() or "taskstack"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/taskstack"))
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        history_limit = max(0, _env_int(_k("HISTORY_LIMIT"), 0))

        max_description_length = _env_int(_k("MAX_DESCRIPTION_LENGTH"), 255)
        if max_description_length <= 0:
            max_description_length = 255

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            log_to_file=log_to_file,
            history_limit=history_limit,
            max_description_length=max_description_length,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
