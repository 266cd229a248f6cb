# src/bob_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import TaskList
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings are kept on the state for easy access in commands.
    settings: object

    store: TaskStore
    # In-memory mirror of the tasks file; the store only writes it back.
    tasks: TaskList = field(default_factory=list)
