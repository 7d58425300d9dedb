# src/todo_list/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import date

from ..errors import UsageError
from ..tasks.task_models import parse_due_date
from ..tasks.task_store import TaskList
from .render import render_tasks

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "list"
PROG = "todo"


@dataclass(slots=True)
class CommandContext:
    """What a handler needs besides its arguments."""

    task_list: TaskList
    today: date = field(default_factory=date.today)
    use_color: bool = False


CommandHandler = Callable[[CommandContext, list[str]], str]


@dataclass(slots=True)
class CommandResult:
    command: str
    output: str
    # True only when a mutating command completed; the caller saves then.
    modified: bool


@dataclass(frozen=True, slots=True)
class _Command:
    name: str
    handler: CommandHandler
    help_text: str
    usage: str
    mutating: bool


class CommandRegistry:
    """Maps command names (and aliases) onto handlers."""

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}
        self._handlers: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        usage: str | None = None,
        aliases: Sequence[str] = (),
        mutating: bool = False,
    ) -> None:
        key = name.lower()
        cmd = _Command(
            name=key,
            handler=handler,
            help_text=help_text,
            usage=usage or key,
            mutating=mutating,
        )
        self._commands[key] = cmd
        self._handlers[key] = cmd
        for alias in aliases:
            self._handlers[alias.lower()] = cmd

    def is_mutating(self, name: str) -> bool:
        cmd = self._handlers.get(name.lower())
        return cmd is not None and cmd.mutating

    def dispatch(self, ctx: CommandContext, argv: Sequence[str]) -> CommandResult:
        """
        Run one command.

        `argv` excludes the program name; an empty argv runs the default
        command. Errors from handlers propagate to the caller.
        """
        name = argv[0] if argv else DEFAULT_COMMAND
        args = list(argv[1:])

        cmd = self._handlers.get(name.lower())
        if cmd is None:
            raise UsageError(f"unrecognized command: {name}")

        logger.debug("Dispatching %s args=%r", cmd.name, args)
        output = cmd.handler(ctx, args)
        return CommandResult(command=cmd.name, output=output, modified=cmd.mutating)

    def build_usage(self) -> str:
        lines = [
            "Usage:",
            f"  {PROG} [COMMAND [ARGUMENT]...]",
            "",
            "Commands:",
        ]
        for cmd in self._commands.values():
            lines.append(f"  {cmd.usage}")
            lines.append(f"    {cmd.help_text}")
            lines.append("")
        return "\n".join(lines).rstrip("\n")


registry = CommandRegistry()


def parse_position(raw: str, what: str = "POSITION") -> int:
    """Convert a user-facing 1-based position into a zero-based index."""
    # plain ASCII digits only: int() would also take "+2", " 2 ", "1_0"
    if not (raw.isascii() and raw.isdigit()):
        raise UsageError(f"{what} must be a positive integer, got {raw!r}")
    value = int(raw)
    if value < 1:
        raise UsageError(f"{what} must be a positive integer, got {raw!r}")
    return value - 1


def _expect_args(command: str, args: list[str], minimum: int, maximum: int) -> None:
    if len(args) < minimum:
        raise UsageError(f"{command}: missing argument")
    if len(args) > maximum:
        raise UsageError(f"{command}: too many arguments")


def cmd_list(ctx: CommandContext, args: list[str]) -> str:
    _expect_args("list", args, 0, 0)
    return render_tasks(
        ctx.task_list,
        today=ctx.today,
        use_color=ctx.use_color,
        show_overdue_count=True,
    )


def cmd_date(ctx: CommandContext, args: list[str]) -> str:
    _expect_args("date", args, 0, 0)
    return render_tasks(ctx.task_list.sorted_by_date(), today=ctx.today, use_color=ctx.use_color)


def cmd_add(ctx: CommandContext, args: list[str]) -> str:
    """
    add NAME           -> append an undated task
    add NAME DUE_DATE  -> append with a due date (unparseable dates mean no date)
    """
    _expect_args("add", args, 1, 2)
    name = args[0]
    # one task per line in the file
    if name.splitlines() not in ([], [name]):
        raise UsageError("add: TASK must be a single line")
    due = parse_due_date(args[1] if len(args) > 1 else "")
    task = ctx.task_list.add(name, due)
    return f"Added task {task.order}: {task.name}"


def cmd_remove(ctx: CommandContext, args: list[str]) -> str:
    _expect_args("remove", args, 1, 1)
    index = parse_position(args[0])
    task = ctx.task_list.remove(index)
    return f"Removed task {index + 1}: {task.name}"


def cmd_move(ctx: CommandContext, args: list[str]) -> str:
    _expect_args("move", args, 2, 2)
    from_index = parse_position(args[0], "FROM_POSITION")
    to_index = parse_position(args[1], "TO_POSITION")
    task = ctx.task_list.reorder(from_index, to_index)
    return f"Moved task {from_index + 1} to {to_index + 1}: {task.name}"


def cmd_help(ctx: CommandContext, args: list[str]) -> str:
    _expect_args("help", args, 0, 0)
    return registry.build_usage()


registry.register("list", cmd_list, help_text="print current TODO list (default command)")
registry.register("date", cmd_date, help_text="print TODO list sorted by due date")
registry.register(
    "add",
    cmd_add,
    help_text="add a new task to the end, optionally due on DUE_DATE (YYYY-MM-DD)",
    usage="add TASK [DUE_DATE]",
    mutating=True,
)
registry.register(
    "remove",
    cmd_remove,
    help_text="remove task at POSITION",
    usage="remove POSITION",
    mutating=True,
)
registry.register(
    "move",
    cmd_move,
    help_text="move task from one position to another",
    usage="move FROM_POSITION TO_POSITION",
    mutating=True,
)
registry.register("help", cmd_help, help_text="show this help", aliases=["--help", "-h"])
