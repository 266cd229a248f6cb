# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from bob_tasks.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    for name in ("BOB_APP_NAME", "BOB_LOG_LEVEL", "BOB_FILE_LOGGING", "BOB_DATA_DIR", "BOB_TASKS_FILE", "BOB_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "bob"
    assert s.log_level == "INFO"
    assert s.file_logging is True
    assert s.tasks_file_path == Path("data") / "bob.txt"
    assert s.log_dir == Path("data") / "logs"


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BOB_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BOB_LOG_LEVEL", "debug")
    monkeypatch.setenv("BOB_FILE_LOGGING", "off")
    monkeypatch.delenv("BOB_TASKS_FILE", raising=False)
    monkeypatch.delenv("BOB_LOG_DIR", raising=False)

    s = Settings.from_env()

    assert s.tasks_file_path == tmp_path / "bob.txt"
    assert s.log_level == "DEBUG"
    assert s.file_logging is False

    monkeypatch.setenv("BOB_TASKS_FILE", str(tmp_path / "other.txt"))
    assert Settings.from_env().tasks_file_path == tmp_path / "other.txt"
