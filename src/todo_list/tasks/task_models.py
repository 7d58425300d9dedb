# src/todo_list/tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"

# "No due date". Sorts after every real date.
NO_DUE_DATE = date.max


def parse_due_date(text: str | None) -> date:
    """
    Parse YYYY-MM-DD.

    Empty or malformed text maps to NO_DUE_DATE instead of failing.
    """
    raw = (text or "").strip()
    if not raw:
        return NO_DUE_DATE
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        logger.debug("Unparseable due date %r, treating as undated.", raw)
        return NO_DUE_DATE


def format_due_date(due: date) -> str:
    if due == NO_DUE_DATE:
        return ""
    return due.strftime(DATE_FORMAT)


@dataclass(frozen=True, slots=True)
class Task:
    name: str
    due_date: date = NO_DUE_DATE
    # 1-based position, assigned by TaskList.
    order: int = 0

    @property
    def has_due_date(self) -> bool:
        return self.due_date != NO_DUE_DATE

    def is_overdue(self, today: date | None = None) -> bool:
        """Due today or earlier. Undated tasks are never overdue."""
        if not self.has_due_date:
            return False
        if today is None:
            today = date.today()
        return self.due_date <= today

    def sort_key(self) -> tuple[date, int]:
        return (self.due_date, self.order)
