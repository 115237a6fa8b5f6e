"""Interactive command loop for tasktrack."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

import click
from rich.console import Console
from rich.markup import escape

from tasktrack.manager import TaskManager
from tasktrack.models import Priority, parse_due_time

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "Enter command (add/complete/print/quit)"


class ShellState(Enum):
    """Lifecycle of the command loop."""

    RUNNING = "running"
    TERMINATED = "terminated"


class TaskShell:
    """Read commands, collect their parameters and drive a TaskManager.

    Recognised commands are ``add``, ``complete``, ``print`` and ``quit``.
    End of input or Ctrl-C is handled like ``quit``.
    """

    def __init__(
        self,
        manager: TaskManager,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.manager = manager
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.state = ShellState.TERMINATED
        self._commands: dict[str, Callable[[], None]] = {
            "add": self.add,
            "complete": self.complete,
            "print": self.print_tasks,
            "quit": self.quit,
        }

    def run(self) -> None:
        """Run the loop until ``quit`` or end of input."""
        self.state = ShellState.RUNNING

        while self.state is ShellState.RUNNING:
            try:
                command = self._ask(COMMAND_PROMPT)
                self.dispatch(command)
            except click.Abort:
                # Input closed mid-command: whatever was being entered is dropped
                self.console.print()
                self.quit()

    def dispatch(self, command: str) -> None:
        """Run one command."""
        handler = self._commands.get(command.strip())
        if handler is None:
            self.console.print("Unknown command.")
            return
        handler()

    def add(self) -> None:
        """Prompt for a new task and add it."""
        description = self._ask("Enter task description")

        token = self._ask("Enter task priority (high/medium/low)")
        priority = Priority.parse(token)
        if priority is None:
            logger.debug("Unrecognised priority %r", token)
            self.console.print("[yellow]Invalid priority. Using medium.[/yellow]")
            priority = Priority.MEDIUM

        raw_due = self._ask("Enter due time (HH:MM DD-MM-YYYY) or leave empty")
        try:
            due_time = parse_due_time(raw_due)
        except ValueError:
            logger.debug("Unparseable due time %r", raw_due)
            self.console.print("[yellow]Invalid date format. Due time left empty.[/yellow]")
            due_time = None

        self.manager.add(description, priority, due_time)
        self.console.print("Task added.")

    def complete(self) -> None:
        """Show the list, then prompt for the index of the task to complete."""
        self.manager.print_tasks(self.console)

        text = self._ask("Enter task index to complete")
        if not (text.isascii() and text.isdigit()):
            self.console.print("Invalid index.")
            return

        index = int(text)
        if self.manager.complete(index):
            self.console.print("Task completed.")
        else:
            self.console.print(f"[yellow]No task at index {index}.[/yellow]")

    def print_tasks(self) -> None:
        """Show the list."""
        self.manager.print_tasks(self.console)

    def quit(self) -> None:
        """Save the list and stop the loop. A failed save does not stop the exit."""
        try:
            self.manager.save()
        except OSError as e:
            logger.debug("Saving %s failed", self.manager.path, exc_info=True)
            self.err_console.print(f"[red]Error saving tasks:[/red] {escape(str(e))}")

        self.console.print("Goodbye!")
        self.state = ShellState.TERMINATED

    def _ask(self, text: str) -> str:
        return click.prompt(text, default="", show_default=False).strip()
