# src/bob_tasks/core/ports.py

"""
Ports (interfaces) used by the core.

The task store reports user-visible diagnostics through a Reporter
instead of printing. Connectors decide the transport (console, logger,
test sink) and the wording.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol


class CreationKind(StrEnum):
    FOLDER = "folder"
    FILE = "file"


class Reporter(Protocol):
    """
    Sink for diagnostics produced while loading/saving the tasks file.

    creating(kind, attempting):
    - attempting=True  -> creation of the folder/file has started
    - attempting=False -> creation failed
    """

    def creating(self, kind: CreationKind, attempting: bool) -> None: ...
    def parse_error(self, line_number: int, message: str) -> None: ...
    def file_not_found(self, message: str) -> None: ...
    def save_error(self, message: str) -> None: ...
    def append_error(self, message: str) -> None: ...
