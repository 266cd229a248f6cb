# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar


class TaskKind(StrEnum):
    """
    Task variant.

    The value doubles as the type tag written to the tasks file.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(frozen=True, slots=True)
class Task:
    """
    Base of the three task variants.

    Instances are frozen except for `done`, which only changes through
    mark_done() / mark_undone(). Text fields are stripped on construction
    and must not be empty.
    """

    kind: ClassVar[TaskKind]

    description: str
    done: bool = field(default=False, kw_only=True, hash=False)

    def __post_init__(self) -> None:
        if type(self) is Task:
            raise TypeError("Task is abstract; use ToDo, Deadline or Event")
        object.__setattr__(self, "description", _required("description", self.description))
        object.__setattr__(self, "done", bool(self.done))

    def mark_done(self) -> None:
        object.__setattr__(self, "done", True)

    def mark_undone(self) -> None:
        object.__setattr__(self, "done", False)


@dataclass(frozen=True, slots=True)
class ToDo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(frozen=True, slots=True)
class Deadline(Task):
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    by: str

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        object.__setattr__(self, "by", _required("by", self.by))


@dataclass(frozen=True, slots=True)
class Event(Task):
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    start: str
    end: str

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        object.__setattr__(self, "start", _required("start", self.start))
        object.__setattr__(self, "end", _required("end", self.end))


TaskList = list[Task]


def _required(name: str, value: str) -> str:
    cleaned = value.strip()
    if not cleaned:
        raise ValueError(f"{name} is required")
    return cleaned
