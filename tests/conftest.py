# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from todo_list.config import Settings
from todo_list.tasks.task_store import TaskList


@pytest.fixture()
def todo_path(tmp_path: Path) -> Path:
    """Storage file inside a per-test directory (not created yet)."""
    return tmp_path / ".todo"


@pytest.fixture()
def today() -> date:
    return date(2024, 6, 15)


@pytest.fixture()
def settings() -> Settings:
    """
    Explicit settings so tests never depend on the caller's environment
    (NO_COLOR, TODO_LOG_LEVEL, a stray .env, ...).
    """
    return Settings(log_level="WARNING", log_file=None, color="never")


@pytest.fixture()
def abc_list(todo_path: Path) -> TaskList:
    task_list = TaskList(todo_path)
    task_list.add("A")
    task_list.add("B")
    task_list.add("C")
    return task_list
