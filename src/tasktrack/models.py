"""Data models for tasktrack."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, field_validator

# Format the user types a due time in, e.g. "18:30 24-12-2025"
DUE_TIME_INPUT_FORMAT = "%H:%M %d-%m-%Y"

# Stored form of a due time, e.g. "2025-12-24T18:30:00"
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{6})?")


class Priority(IntEnum):
    """Task priority levels.

    The integer value is both the stored code and the sort key,
    so HIGH sorts first.
    """

    HIGH = 0
    MEDIUM = 1
    LOW = 2

    def color(self) -> str:
        """Return the rich color name used to display this priority."""
        return _PRIORITY_COLORS[self]

    @classmethod
    def parse(cls, token: str) -> Priority | None:
        """Map an exact lowercase token (high/medium/low) to a Priority."""
        return _PRIORITY_TOKENS.get(token)


_PRIORITY_COLORS = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}

_PRIORITY_TOKENS = {
    "high": Priority.HIGH,
    "medium": Priority.MEDIUM,
    "low": Priority.LOW,
}


class Task(BaseModel):
    """A single tracked task.

    Validation is strict: description, completed and priority must be
    present with their exact JSON types. ``due_time`` may be null or
    missing, otherwise it must be ``YYYY-MM-DDTHH:MM:SS`` (optionally with
    microseconds) without a timezone.
    """

    model_config = ConfigDict(strict=True)

    description: str
    completed: bool
    priority: Priority
    due_time: datetime | None = None

    @field_validator("priority", mode="before")
    @classmethod
    def _integer_code(cls, value: object) -> object:
        # Strings, floats and booleans are not priority codes
        if isinstance(value, Priority):
            return value
        if type(value) is int:
            return Priority(value)
        raise ValueError("priority must be an integer code")

    @field_validator("due_time", mode="before")
    @classmethod
    def _timestamp_form(cls, value: object) -> object:
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, str) and _TIMESTAMP_RE.fullmatch(value):
            return datetime.fromisoformat(value)
        raise ValueError("due_time must look like YYYY-MM-DDTHH:MM:SS or be null")

    @field_validator("due_time")
    @classmethod
    def _naive_only(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            raise ValueError("due_time must not carry a timezone")
        return value

    def complete(self) -> None:
        """Mark the task as completed."""
        self.completed = True


@dataclass(frozen=True)
class DueStatus:
    """Deadline status of a task relative to a point in time."""

    overdue: bool
    hours_left: int = 0


def due_status(due_time: datetime, now: datetime) -> DueStatus:
    """Work out how a due time compares to ``now``.

    A due time strictly in the future reports the whole hours left
    (1h59m left is 1 hour). A due time at or before ``now`` is overdue.
    """
    if due_time > now:
        hours = math.floor((due_time - now) / timedelta(hours=1))
        return DueStatus(overdue=False, hours_left=hours)
    return DueStatus(overdue=True)


def parse_due_time(text: str) -> datetime | None:
    """Parse a due time typed as ``HH:MM DD-MM-YYYY``.

    Empty input means no due time. Raises ValueError for anything else
    that does not match the format.
    """
    text = text.strip()
    if not text:
        return None
    return datetime.strptime(text, DUE_TIME_INPUT_FORMAT)
