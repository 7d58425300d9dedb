# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_list.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ("TODO_LOG_LEVEL", "TODO_LOG_FILE", "TODO_COLOR", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.log_level == "WARNING"
    assert s.log_file is None
    assert s.color == "auto"
    assert s.use_color(True)
    assert not s.use_color(False)


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_FILE", str(tmp_path / "todo.log"))
    monkeypatch.setenv("TODO_COLOR", "always")
    s = Settings.from_env()
    assert s.log_level == "DEBUG"
    assert s.log_file == tmp_path / "todo.log"
    assert s.use_color(False)


def test_unknown_color_mode_falls_back_to_auto(monkeypatch) -> None:
    monkeypatch.setenv("TODO_COLOR", "rainbow")
    assert Settings.from_env().color == "auto"


def test_no_color_wins(monkeypatch) -> None:
    monkeypatch.setenv("TODO_COLOR", "always")
    monkeypatch.setenv("NO_COLOR", "")
    s = Settings.from_env()
    assert s.color == "never"
    assert not s.use_color(True)


def test_force_color(monkeypatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert Settings.from_env().use_color(False)
