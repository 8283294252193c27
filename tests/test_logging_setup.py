# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from taskstack.logging_setup import _ConsoleNoiseFilter, setup_logging


def _installed_by_setup(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.FileHandler) or any(
        isinstance(f, _ConsoleNoiseFilter) for f in handler.filters
    )


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    """Drop and close the handlers setup_logging installed; pytest manages its own."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if _installed_by_setup(h):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("taskstack.tasks.task_store", logging.DEBUG))
    assert f.filter(_record("taskstack", logging.INFO))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging: None) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)
    assert log_file == tmp_path / "logs" / "taskstack.log"

    logging.getLogger("taskstack.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello file" in log_file.read_text("utf-8")


def test_setup_logging_without_file(restore_root_logging: None) -> None:
    assert setup_logging(log_dir=None) is None
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)
