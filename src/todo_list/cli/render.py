# src/todo_list/cli/render.py

"""Plain-text rendering of tasks for the terminal.

Color is opt-in per call; the caller decides from settings and whether
stdout is a TTY.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from ..tasks.task_models import Task, format_due_date

RESET = "\033[0m"
RED = "\033[31m"

EMPTY_TEXT = "No tasks."


def color(text: str, *styles: str, enabled: bool = True) -> str:
    if not enabled or not styles:
        return text
    return "".join(styles) + text + RESET


def format_task(task: Task, *, today: date, use_color: bool = False) -> str:
    due = format_due_date(task.due_date)
    line = f"{task.order:>3}. {due:10}  {task.name}"
    if task.is_overdue(today):
        return color(f"{line} (overdue)", RED, enabled=use_color)
    return line


def render_tasks(
    tasks: Iterable[Task],
    *,
    today: date | None = None,
    use_color: bool = False,
    show_overdue_count: bool = False,
) -> str:
    if today is None:
        today = date.today()

    tasks = list(tasks)
    lines = [format_task(t, today=today, use_color=use_color) for t in tasks]
    if not lines:
        return EMPTY_TEXT

    if show_overdue_count:
        n_overdue = sum(1 for t in tasks if t.is_overdue(today))
        if n_overdue:
            lines.append(f"{n_overdue} overdue")
    return "\n".join(lines)
