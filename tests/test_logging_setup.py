# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_list.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_file_handler_gets_debug_records(restore_root_logging, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "todo.log"
    setup_logging(console_level=logging.ERROR, log_file=log_file)

    logging.getLogger("todo_list.tasks.task_store").debug("hello from store")
    for h in restore_root_logging.handlers:
        h.flush()

    assert "hello from store" in log_file.read_text("utf-8")


def test_console_filter_hides_third_party_noise(restore_root_logging) -> None:
    setup_logging(console_level=logging.INFO)
    (console,) = restore_root_logging.handlers
    assert console.level == logging.INFO

    ours = logging.LogRecord("todo_list.cli", logging.INFO, __file__, 1, "x", None, None)
    theirs = logging.LogRecord("urllib3", logging.WARNING, __file__, 1, "x", None, None)
    assert console.filter(ours)
    assert not console.filter(theirs)
