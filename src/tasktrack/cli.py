"""CLI interface for tasktrack."""

from __future__ import annotations

import json
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from tasktrack import __version__
from tasktrack.config import TASKS_FILE_ENV, TrackerConfig
from tasktrack.logging_setup import setup_logging
from tasktrack.manager import TaskManager
from tasktrack.shell import TaskShell
from tasktrack.store import TaskDecodeError


@click.command()
@click.version_option(version=__version__, prog_name="tasktrack")
@click.option(
    "--file",
    "-f",
    "tasks_file",
    type=click.Path(dir_okay=False),
    envvar=TASKS_FILE_ENV,
    help="Task file to use (default: tasks.json in the current directory)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (default: .tasktrack.json)",
)
@click.option("--no-color", is_flag=True, help="Disable coloured output")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def main(
    tasks_file: str | None,
    config_path: Path | None,
    no_color: bool,
    verbose: bool,
) -> None:
    """tasktrack - track tasks from an interactive prompt.

    \b
    Commands at the prompt:
      add        Add a task with a priority and optional due time
      complete   Mark a task as done by its index
      print      Show all tasks
      quit       Save and exit
    """
    err_console = Console(stderr=True, no_color=no_color)
    config = _load_config(config_path, err_console)

    color = config.color and not no_color
    console = Console(no_color=not color)
    err_console = Console(stderr=True, no_color=not color)

    setup_logging("DEBUG" if verbose else config.log_level, config.log_file)

    manager = TaskManager(config.tasks_path(tasks_file))
    _load_tasks(manager, err_console)

    TaskShell(manager, console, err_console).run()


def _load_config(path: Path | None, err_console: Console) -> TrackerConfig:
    """Load configuration, falling back to defaults if the file is broken."""
    try:
        return TrackerConfig.load(path)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        err_console.print(f"[red]Error reading config:[/red] {escape(str(e))}")
        err_console.print("[dim]Using default configuration.[/dim]")
        return TrackerConfig()


def _load_tasks(manager: TaskManager, err_console: Console) -> None:
    """Load the task file; on failure report it and start with an empty list."""
    try:
        manager.load()
    except FileNotFoundError:
        err_console.print(
            f"[dim]No task file at {escape(str(manager.path))}, starting with an empty list.[/dim]"
        )
    except (OSError, TaskDecodeError) as e:
        err_console.print(f"[red]Error loading tasks:[/red] {escape(str(e))}")


if __name__ == "__main__":
    main()
