# tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..core.ports import CreationKind, Reporter
from .task_codec import TaskCodecError, decode_task, encode_task, is_blank
from .task_models import Task

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\n"
ENCODING = "utf-8"


class TaskStore:
    """
    Plain-text task store (one encoded task per line).

    Failure policy:
    - nothing is raised to the caller; IO and decode problems go to the Reporter
    - a bad line is reported with its 1-based number and skipped
    - blank lines are skipped silently (they still count for numbering)

    Each method opens and closes its own file handle; no state is kept between calls.
    """

    def __init__(self, path: str | Path, reporter: Reporter) -> None:
        self._path = Path(path)
        self._reporter = reporter

    @property
    def path(self) -> Path:
        return self._path

    # ---- materialization ----

    def _ensure_parent_dir(self) -> None:
        parent = self._path.parent
        if parent.exists():
            return
        self._reporter.creating(CreationKind.FOLDER, True)
        try:
            parent.mkdir(parents=True, exist_ok=True)
            logger.info("Created tasks folder %s", parent)
        except OSError:
            logger.warning("Failed to create tasks folder %s", parent, exc_info=True)
            self._reporter.creating(CreationKind.FOLDER, False)

    def _ensure_file(self) -> None:
        if self._path.exists():
            return
        self._reporter.creating(CreationKind.FILE, True)
        try:
            self._path.touch(exist_ok=True)
            logger.info("Created tasks file %s", self._path)
        except OSError:
            logger.warning("Failed to create tasks file %s", self._path, exc_info=True)
            self._reporter.creating(CreationKind.FILE, False)

    # ---- public API ----

    def load(self) -> list[Task]:
        """
        Read every task from disk.

        Creates the folder/file when missing. Always returns a list
        (possibly empty, or partial if some lines were bad).
        """
        self._ensure_parent_dir()
        self._ensure_file()

        tasks: list[Task] = []
        bad_lines = 0
        try:
            with self._path.open("rb") as f:
                for line_number, raw in enumerate(f, start=1):
                    try:
                        line = raw.decode(ENCODING).rstrip("\r\n")
                        if is_blank(line):
                            continue
                        tasks.append(decode_task(line))
                    except (TaskCodecError, UnicodeDecodeError) as e:
                        bad_lines += 1
                        logger.debug("Skipping line %d of %s: %s", line_number, self._path, e)
                        self._reporter.parse_error(line_number, str(e))
        except OSError as e:
            logger.warning("Cannot read tasks file %s: %s", self._path, e)
            self._reporter.file_not_found(str(e))

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, bad_lines)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """
        Rewrite the whole file with `tasks`, in order.

        Every task is encoded before the file is opened, so a task that
        cannot be stored leaves the previous contents untouched.
        """
        try:
            lines = [encode_task(t) + LINE_TERMINATOR for t in tasks]
        except TaskCodecError as e:
            logger.warning("Refusing to save tasks to %s: %s", self._path, e)
            self._reporter.save_error(str(e))
            return

        try:
            with self._path.open("w", encoding=ENCODING, newline="") as f:
                f.writelines(lines)
        except OSError as e:
            logger.warning("Failed to save tasks to %s: %s", self._path, e)
            self._reporter.save_error(str(e))
            return

        logger.debug("Saved %d tasks to %s", len(lines), self._path)

    def append(self, task: Task) -> None:
        """Add one task at the end of the file."""
        try:
            line = encode_task(task) + LINE_TERMINATOR
        except TaskCodecError as e:
            logger.warning("Refusing to append task to %s: %s", self._path, e)
            self._reporter.append_error(str(e))
            return

        try:
            with self._path.open("a", encoding=ENCODING, newline="") as f:
                f.write(line)
        except OSError as e:
            logger.warning("Failed to append task to %s: %s", self._path, e)
            self._reporter.append_error(str(e))
            return

        logger.debug("Appended %s task to %s", task.kind.name, self._path)
