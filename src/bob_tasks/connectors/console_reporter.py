# src/bob_tasks/connectors/console_reporter.py

from __future__ import annotations

import sys
from typing import TextIO

from ..core.ports import CreationKind
from ..tasks.task_models import Deadline, Event, Task

DONE_ICON = "X"
NOT_DONE_ICON = " "


def status_icon(task: Task) -> str:
    return DONE_ICON if task.done else NOT_DONE_ICON


def format_task(task: Task) -> str:
    """Render a task for the console, e.g. "[D][X] submit report (by: 2024-03-01)"."""
    text = f"[{task.kind.value}][{status_icon(task)}] {task.description}"
    if isinstance(task, Deadline):
        text += f" (by: {task.by})"
    elif isinstance(task, Event):
        text += f" (from: {task.start} to: {task.end})"
    return text


class ConsoleReporter:
    """Reporter that prints user-facing diagnostics to a text stream (stdout by default)."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout

    def _print(self, text: str) -> None:
        print(text, file=self._out, flush=True)

    def creating(self, kind: CreationKind, attempting: bool) -> None:
        if attempting:
            self._print(f"Creating a new {kind} to store your tasks...")
        else:
            self._print(f"Failed to create the {kind}.")

    def parse_error(self, line_number: int, message: str) -> None:
        self._print(f"Error parsing line {line_number}: {message}")

    def file_not_found(self, message: str) -> None:
        self._print(f"File not found: {message}")

    def save_error(self, message: str) -> None:
        self._print(f"Error saving tasks: {message}")

    def append_error(self, message: str) -> None:
        self._print(f"Error appending task: {message}")
