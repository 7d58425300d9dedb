# src/todo_list/cli/main.py

"""
CLI entrypoint.

One run: load `.todo` from the working directory, dispatch a single
command, save only if the command mutated the list. This is the only
place that turns errors into exit codes.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ..config import Settings, get_settings
from ..errors import StorageError, TodoError
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskList, default_storage_path
from .commands import CommandContext, CommandRegistry, registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


def run(
    argv: Sequence[str],
    *,
    storage_path: str | Path | None = None,
    settings: Settings | None = None,
    cmd_registry: CommandRegistry | None = None,
) -> int:
    """Execute one command and return the process exit code."""
    if settings is None:
        settings = get_settings()
    if cmd_registry is None:
        cmd_registry = registry
    path = Path(storage_path) if storage_path is not None else default_storage_path()

    try:
        task_list = TaskList.load(path)
        ctx = CommandContext(task_list=task_list, use_color=settings.use_color(sys.stdout.isatty()))
        result = cmd_registry.dispatch(ctx, argv)
        if result.modified:
            task_list.save()
    except StorageError as exc:
        logger.debug("Storage failure on %s", exc.path, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except TodoError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("", file=sys.stderr)
        print(cmd_registry.build_usage(), file=sys.stderr)
        return EXIT_ERROR
    except Exception:
        logger.exception("Unexpected failure running %r", list(argv))
        return EXIT_ERROR

    if result.output:
        print(result.output)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(console_level=console_level, log_file=settings.log_file)

    if argv is None:
        argv = sys.argv[1:]
    return run(argv, settings=settings)


if __name__ == "__main__":
    sys.exit(main())
