# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from bob_tasks.core.state import AppState
from bob_tasks.tasks.task_store import TaskStore

from .fakes import RecordingReporter

MIXED_FILE = (
    "T | 0 | buy milk\n"
    "D | 1 | submit report | 2024-03-01\n"
    "E | 0 | standup | 09:00-09:15\n"
)


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "bob.txt"


@pytest.fixture()
def store(tasks_file: Path, reporter: RecordingReporter) -> TaskStore:
    return TaskStore(tasks_file, reporter)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    A SimpleNamespace keeps tests independent of the process environment.
    """
    return SimpleNamespace(
        app_name="bob",
        log_level="INFO",
        file_logging=False,
        data_dir=tmp_path / "data",
        tasks_file_path=tmp_path / "data" / "bob.txt",
        log_dir=tmp_path / "data" / "logs",
    )


@pytest.fixture()
def state(settings: SimpleNamespace, reporter: RecordingReporter) -> AppState:
    """AppState wired to a real TaskStore in tmp_path and a recording reporter."""
    store = TaskStore(settings.tasks_file_path, reporter)
    return AppState(settings=settings, store=store, tasks=store.load())
