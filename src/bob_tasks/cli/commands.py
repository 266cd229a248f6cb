# src/bob_tasks/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..connectors.console_reporter import format_task
from ..core.state import AppState
from ..tasks.task_codec import TaskCodecError, encode_task
from ..tasks.task_models import Deadline, Event, Task, ToDo

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console loop (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_option(args: list[str], option: str) -> tuple[str, str] | None:
    """Split "desc words /opt value words" into ("desc words", "value words")."""
    if option not in args:
        return None
    i = args.index(option)
    return " ".join(args[:i]).strip(), " ".join(args[i + 1 :]).strip()


def _task_index(state: AppState, args: list[str]) -> int | None:
    """Parse a 1-based task number into a list index (None when invalid)."""
    if len(args) != 1:
        return None
    try:
        n = int(args[0])
    except ValueError:
        return None
    if not 1 <= n <= len(state.tasks):
        return None
    return n - 1


def _add(state: AppState, task: Task) -> str:
    try:
        encode_task(task)
    except TaskCodecError as e:
        return f"Cannot store this task: {e}"
    state.tasks.append(task)
    state.store.append(task)
    logger.debug("Task added kind=%s total=%d", task.kind.name, len(state.tasks))
    return (
        "Got it. I've added this task:\n"
        f"  {format_task(task)}\n"
        f"Now you have {len(state.tasks)} tasks in the list."
    )


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    if not state.tasks:
        return "Your task list is empty."
    lines = ["Here are the tasks in your list:"]
    for i, task in enumerate(state.tasks, start=1):
        lines.append(f"{i}. {format_task(task)}")
    return "\n".join(lines)


def cmd_todo(state: AppState, args: list[str]) -> str:
    description = " ".join(args).strip()
    if not description:
        return "Usage: /todo DESCRIPTION"
    return _add(state, ToDo(description))


def cmd_deadline(state: AppState, args: list[str]) -> str:
    """
    /deadline submit report /by 2024-03-01
    """
    split = _split_option(args, "/by")
    if split is None or not all(split):
        return "Usage: /deadline DESCRIPTION /by DATE"
    description, by = split
    return _add(state, Deadline(description, by))


def cmd_event(state: AppState, args: list[str]) -> str:
    """
    /event standup /from 09:00 /to 09:15
    """
    head = _split_option(args, "/from")
    if head is None:
        return "Usage: /event DESCRIPTION /from START /to END"
    description, rest = head
    times = _split_option(rest.split(), "/to")
    if not description or times is None or not all(times):
        return "Usage: /event DESCRIPTION /from START /to END"
    start, end = times
    return _add(state, Event(description, start, end))


def cmd_mark(state: AppState, args: list[str]) -> str:
    i = _task_index(state, args)
    if i is None:
        return f"Usage: /mark N (1..{len(state.tasks)})"
    task = state.tasks[i]
    task.mark_done()
    state.store.save(state.tasks)
    return f"Nice! I've marked this task as done:\n  {format_task(task)}"


def cmd_unmark(state: AppState, args: list[str]) -> str:
    i = _task_index(state, args)
    if i is None:
        return f"Usage: /unmark N (1..{len(state.tasks)})"
    task = state.tasks[i]
    task.mark_undone()
    state.store.save(state.tasks)
    return f"OK, I've marked this task as not done yet:\n  {format_task(task)}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    i = _task_index(state, args)
    if i is None:
        return f"Usage: /delete N (1..{len(state.tasks)})"
    task = state.tasks.pop(i)
    state.store.save(state.tasks)
    return (
        "Noted. I've removed this task:\n"
        f"  {format_task(task)}\n"
        f"Now you have {len(state.tasks)} tasks in the list."
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("todo", cmd_todo, help_text="Add a to-do: /todo DESCRIPTION.")
registry.register("deadline", cmd_deadline, help_text="Add a deadline: /deadline DESCRIPTION /by DATE.")
registry.register("event", cmd_event, help_text="Add an event: /event DESCRIPTION /from START /to END.")
registry.register("mark", cmd_mark, help_text="Mark task N as done.")
registry.register("unmark", cmd_unmark, help_text="Mark task N as not done.")
registry.register("delete", cmd_delete, help_text="Remove task N.", aliases=["rm"])
