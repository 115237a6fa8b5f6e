"""Terminal rendering of the task list."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from rich.console import Console
from rich.text import Text

from tasktrack.models import Task, due_status

AHEAD_COLOR = "green"
OVERDUE_COLOR = "red"


def format_task(index: int, task: Task, now: datetime) -> Text:
    """Build the display line for one task.

    The checkbox, index and description take the priority color; the
    deadline note, if any, is green while time remains and red once due.
    """
    marker = "[x]" if task.completed else "[ ]"
    line = Text(f"{marker} {index}: {task.description}", style=task.priority.color())

    if task.due_time is not None:
        status = due_status(task.due_time, now)
        if status.overdue:
            line.append(" (overdue)", style=OVERDUE_COLOR)
        else:
            line.append(f" ({status.hours_left} hours remaining)", style=AHEAD_COLOR)

    return line


def render_tasks(console: Console, tasks: Iterable[Task], now: datetime | None = None) -> None:
    """Print every task with its position, in list order."""
    if now is None:
        now = datetime.now()

    for index, task in enumerate(tasks):
        console.print(format_task(index, task, now))
