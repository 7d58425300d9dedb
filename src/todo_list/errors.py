# src/todo_list/errors.py

"""Exception types raised by the task store and the command dispatcher.

Only cli/main.py turns these into exit codes.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for errors reported to the user."""


class UsageError(TodoError):
    """Missing/invalid command arguments or an unknown command."""


class TaskIndexError(TodoError, IndexError):
    """A task position outside the current list."""

    def __init__(self, position: int, size: int) -> None:
        self.position = position
        self.size = size
        if size == 0:
            msg = f"position {position} is out of range (the list is empty)"
        else:
            msg = f"position {position} is out of range (valid: 1-{size})"
        super().__init__(msg)


class StorageError(TodoError):
    """Reading or writing the task file failed."""

    def __init__(self, path: str | Path, cause: OSError | UnicodeDecodeError) -> None:
        self.path = Path(path)
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"cannot access {self.path}: {reason}")
