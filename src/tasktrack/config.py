"""Configuration for tasktrack."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel

# Default locations, relative to the working directory
CONFIG_FILE = Path(".tasktrack.json")
DEFAULT_TASKS_FILE = Path("tasks.json")

# Environment variable overriding the task file
TASKS_FILE_ENV = "TASKTRACK_FILE"


class TrackerConfig(BaseModel):
    """Main configuration for tasktrack."""

    tasks_file: str = str(DEFAULT_TASKS_FILE)
    color: bool = True
    log_file: str | None = None
    log_level: str = "WARNING"

    @classmethod
    def load(cls, path: Path | None = None) -> TrackerConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def tasks_path(self, override: str | None = None) -> Path:
        """Resolve the task file, letting ``override`` win over the config."""
        return Path(override or self.tasks_file).expanduser()
