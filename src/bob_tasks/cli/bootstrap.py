# src/bob_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the console reporter into the task store,
- loads the task list into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_reporter import ConsoleReporter
from ..core.ports import Reporter
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, reporter: Reporter | None = None) -> AppState:
    """
    Create AppState from the provided settings and load the tasks file.

    Settings and reporter are injectable for tests.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if reporter is None:
        reporter = ConsoleReporter()

    store = TaskStore(settings.tasks_file_path, reporter)
    state = AppState(settings=settings, store=store, tasks=store.load())
    logger.info("State ready file=%s tasks=%d", store.path, len(state.tasks))
    return state
