# tasks/task_codec.py

"""
Line codec for the tasks file.

One task per line:

    T | 0 | buy milk
    D | 1 | submit report | 2024-03-01
    E | 0 | standup | 09:00-09:15

Encoding always emits the canonical " | " separator. Decoding is lenient:
the line is split on "|" and every field is stripped. There is no escape
sequence, so encode_task() refuses text that would not survive a decode.
"""

from __future__ import annotations

from .task_models import Deadline, Event, Task, TaskKind, ToDo

SEPARATOR = "|"
FIELD_JOINER = f" {SEPARATOR} "
EVENT_TIME_SEPARATOR = "-"

DONE_FLAG = "1"
NOT_DONE_FLAG = "0"

MIN_TASK_FIELDS = 3
MIN_DEADLINE_FIELDS = 4
MIN_EVENT_FIELDS = 4

_FORBIDDEN_CHARS = (SEPARATOR, "\r", "\n")


class TaskCodecError(ValueError):
    """Base error for a line (or task) the codec cannot handle. `text` is the offending input."""

    prefix = "Invalid task line"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"{self.prefix}: {text}")


class MalformedRecordError(TaskCodecError):
    prefix = "Invalid line format"


class InvalidDoneFlagError(TaskCodecError):
    prefix = "Invalid done status"


class MalformedDeadlineError(TaskCodecError):
    prefix = "Invalid deadline format"


class MalformedEventError(TaskCodecError):
    prefix = "Invalid event format"


class InvalidEventTimesError(TaskCodecError):
    prefix = "Invalid event times"


class UnknownTaskTypeError(TaskCodecError):
    prefix = "Unknown task type"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(value)


class InvalidFieldError(TaskCodecError):
    """Raised on encode when a field would corrupt the line grammar."""

    prefix = "Field cannot be stored"

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        super().__init__(f"{name}={value!r}")


# ---- encode ----


def _check_field(name: str, value: str) -> str:
    if any(ch in value for ch in _FORBIDDEN_CHARS):
        raise InvalidFieldError(name, value)
    return value


def encode_task(task: Task) -> str:
    """Return the canonical line for `task` (without a line terminator)."""
    fields = [
        task.kind.value,
        DONE_FLAG if task.done else NOT_DONE_FLAG,
        _check_field("description", task.description),
    ]

    if isinstance(task, Deadline):
        fields.append(_check_field("by", task.by))
    elif isinstance(task, Event):
        start = _check_field("start", task.start)
        # decode splits START-END on the first dash
        if EVENT_TIME_SEPARATOR in start:
            raise InvalidFieldError("start", start)
        end = _check_field("end", task.end)
        fields.append(f"{start}{EVENT_TIME_SEPARATOR}{end}")
    elif not isinstance(task, ToDo):
        raise TypeError(f"Unsupported task type: {type(task).__name__}")

    return FIELD_JOINER.join(fields)


# ---- decode ----


def is_blank(line: str) -> bool:
    return not line.strip()


def decode_task(line: str) -> Task:
    """
    Parse one line into a Task.

    Raises a TaskCodecError subclass describing the first problem found.
    Extra trailing fields are ignored.
    """
    parts = [p.strip() for p in line.split(SEPARATOR)]
    if len(parts) < MIN_TASK_FIELDS:
        raise MalformedRecordError(line)

    type_tag, flag, description = parts[0], parts[1], parts[2]

    if flag not in (DONE_FLAG, NOT_DONE_FLAG):
        raise InvalidDoneFlagError(flag)
    if not description:
        raise MalformedRecordError(line)

    task: Task
    if type_tag == TaskKind.TODO:
        task = ToDo(description)
    elif type_tag == TaskKind.DEADLINE:
        if len(parts) < MIN_DEADLINE_FIELDS or not parts[3]:
            raise MalformedDeadlineError(line)
        task = Deadline(description, parts[3])
    elif type_tag == TaskKind.EVENT:
        if len(parts) < MIN_EVENT_FIELDS:
            raise MalformedEventError(line)
        start, sep, end = parts[3].partition(EVENT_TIME_SEPARATOR)
        start, end = start.strip(), end.strip()
        if not sep or not start or not end:
            raise InvalidEventTimesError(parts[3])
        task = Event(description, start, end)
    else:
        raise UnknownTaskTypeError(type_tag)

    if flag == DONE_FLAG:
        task.mark_done()
    return task
