"""Task list ownership and operations."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console

from tasktrack.config import DEFAULT_TASKS_FILE
from tasktrack.models import Priority, Task
from tasktrack.render import render_tasks
from tasktrack.store import load_tasks, save_tasks

logger = logging.getLogger(__name__)


class TaskManager:
    """Owns the in-memory task list and bridges it to the task file.

    The list is kept sorted by priority (high first). A task is addressed
    by its current position, which changes as tasks are added.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else DEFAULT_TASKS_FILE
        self._tasks: list[Task] = []

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Current tasks in display order."""
        return tuple(self._tasks)

    def add(
        self,
        description: str,
        priority: Priority = Priority.MEDIUM,
        due_time: datetime | None = None,
    ) -> Task:
        """Add a task and re-sort the list by priority."""
        task = Task(
            description=description, completed=False, priority=priority, due_time=due_time
        )
        self._tasks.append(task)
        # list.sort is stable, so equal priorities keep insertion order
        self._tasks.sort(key=lambda t: t.priority)
        return task

    def complete(self, index: int) -> bool:
        """Mark the task at ``index`` as completed.

        Returns False, leaving the list untouched, when no task sits at
        that position.
        """
        if not 0 <= index < len(self._tasks):
            logger.debug("No task at index %d (%d task(s))", index, len(self._tasks))
            return False

        self._tasks[index].complete()
        return True

    def print_tasks(self, console: Console, now: datetime | None = None) -> None:
        """Render the task list to ``console``."""
        render_tasks(console, self._tasks, now=now)

    def load(self) -> None:
        """Replace the task list with the contents of the task file.

        On any failure the current list is kept and the error propagates.
        """
        self._tasks = load_tasks(self.path)

    def save(self) -> None:
        """Write the task list to the task file."""
        save_tasks(self._tasks, self.path)
