"""Task file persistence.

The task list is stored as a JSON array of task records::

    [
      {
        "description": "Fix bug",
        "completed": false,
        "priority": 0,
        "due_time": "2025-01-10T18:30:00"
      }
    ]

``priority`` is the Priority code (0 = high, 1 = medium, 2 = low) and
``due_time`` is a timestamp without timezone, or null. The whole file is
rewritten on every save.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from tasktrack.models import Task

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[Task])


class TaskDecodeError(Exception):
    """Raised when a task file does not hold a valid task list."""


def encode_tasks(tasks: Iterable[Task]) -> str:
    """Encode tasks to the task file format, preserving their order."""
    data = [task.model_dump(mode="json") for task in tasks]
    return json.dumps(data, indent=2) + "\n"


def decode_tasks(text: str) -> list[Task]:
    """Decode the task file format.

    Raises:
        TaskDecodeError: If the text is not valid JSON, is not an array of
            complete task records with the exact field types, or holds an
            unknown priority code or a timestamp not in
            ``YYYY-MM-DDTHH:MM:SS`` form.
    """
    try:
        return _TASK_LIST.validate_json(text, strict=True)
    except ValidationError as e:
        raise TaskDecodeError(f"Invalid task data: {e}") from e


def load_tasks(path: Path) -> list[Task]:
    """Load the task list from ``path``.

    Raises:
        OSError: If the file cannot be opened or read.
        TaskDecodeError: If the file contents are malformed.
    """
    with open(path, encoding="utf-8") as f:
        text = f.read()

    tasks = decode_tasks(text)
    logger.debug("Loaded %d task(s) from %s", len(tasks), path)
    return tasks


def save_tasks(tasks: Iterable[Task], path: Path) -> None:
    """Write the task list to ``path``, replacing any previous contents.

    Raises:
        OSError: If the file cannot be written.
    """
    text = encode_tasks(tasks)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(text)

    logger.debug("Saved task list to %s", path)
