# src/todo_list/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace
from datetime import date
from pathlib import Path

from ..errors import StorageError, TaskIndexError
from .task_models import NO_DUE_DATE, Task, format_due_date, parse_due_date

logger = logging.getLogger(__name__)

STORAGE_FILENAME = ".todo"


def default_storage_path() -> Path:
    """One list per directory: `.todo` in the current working directory."""
    return Path.cwd() / STORAGE_FILENAME


def parse_line(line: str) -> tuple[date, str] | None:
    """
    Parse one storage line into (due_date, name).

    Format is "DUE_DATE,NAME", split on the first comma only so names may
    contain commas. A line without a comma is a name with no date.
    Returns None for blank lines.
    """
    text = line.strip()
    if not text:
        return None
    date_text, sep, name = text.partition(",")
    if not sep:
        return NO_DUE_DATE, text
    return parse_due_date(date_text), name


def format_line(task: Task) -> str:
    return f"{format_due_date(task.due_date)},{task.name}"


class TaskList:
    """
    Ordered task list persisted to a flat text file.

    Tasks are owned by the list. After every public mutation the `order`
    fields are exactly 1..N in list position.
    """

    def __init__(self, storage_path: str | Path, tasks: list[Task] | None = None) -> None:
        self.storage_path = Path(storage_path)
        self._tasks: list[Task] = list(tasks or [])
        self._renumber()

    # ---- persistence ----

    @classmethod
    def load(cls, path: str | Path) -> TaskList:
        """Load from `path`. A missing file yields an empty list."""
        path = Path(path)
        if not path.exists():
            logger.debug("No task file at %s, starting empty.", path)
            return cls(path)

        try:
            content = path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(path, exc) from exc

        tasks: list[Task] = []
        for line in content.splitlines():
            parsed = parse_line(line)
            if parsed is None:
                continue
            due, name = parsed
            tasks.append(Task(name=name, due_date=due))

        task_list = cls(path, tasks)
        logger.info("Loaded %d tasks from %s", len(task_list), path)
        return task_list

    def save(self) -> None:
        """Overwrite the storage file with the current tasks."""
        content = "".join(f"{format_line(t)}\n" for t in self._tasks)
        try:
            self.storage_path.write_text(content, "utf-8")
        except OSError as exc:
            raise StorageError(self.storage_path, exc) from exc
        logger.info("Saved %d tasks to %s", len(self._tasks), self.storage_path)

    # ---- mutations ----

    def add(self, name: str, due_date: date = NO_DUE_DATE) -> Task:
        task = Task(name=name, due_date=due_date, order=len(self._tasks) + 1)
        self._tasks.append(task)
        logger.debug("Added task order=%d name=%r", task.order, name)
        return task

    def remove(self, index: int) -> Task:
        """Remove the task at zero-based `index`."""
        self._check_index(index)
        task = self._tasks.pop(index)
        self._renumber()
        logger.debug("Removed task index=%d name=%r", index, task.name)
        return task

    def reorder(self, from_index: int, to_index: int) -> Task:
        """
        Move a task (zero-based indices).

        The task is removed first and then inserted at `to_index` of the
        shortened list, so [A, B, C] with (0, 2) becomes [B, C, A].
        """
        self._check_index(from_index)
        self._check_index(to_index)
        task = self._tasks.pop(from_index)
        self._tasks.insert(to_index, task)
        self._renumber()
        logger.debug("Moved task %r from index %d to %d", task.name, from_index, to_index)
        return task

    # ---- queries ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def sorted_by_date(self) -> list[Task]:
        """Tasks by due date; ties (and undated tasks) keep list order."""
        return sorted(self._tasks, key=Task.sort_key)

    def overdue(self, today: date | None = None) -> list[Task]:
        if today is None:
            today = date.today()
        return [t for t in self._tasks if t.is_overdue(today)]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    # ---- internals ----

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index + 1, len(self._tasks))

    def _renumber(self) -> None:
        self._tasks = [
            t if t.order == pos else replace(t, order=pos)
            for pos, t in enumerate(self._tasks, start=1)
        ]
