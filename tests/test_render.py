"""Tests for tasktrack.render module."""

from __future__ import annotations

from datetime import datetime, timedelta

from rich.console import Console

from tasktrack.models import Priority, Task
from tasktrack.render import AHEAD_COLOR, OVERDUE_COLOR, format_task, render_tasks


def make_task(
    description: str,
    priority: Priority = Priority.MEDIUM,
    completed: bool = False,
    due_time: datetime | None = None,
) -> Task:
    """Build a task for rendering."""
    return Task(
        description=description, completed=completed, priority=priority, due_time=due_time
    )


class TestFormatTask:
    """Tests for format_task."""

    def test_open_task(self, now: datetime) -> None:
        """Test an open task without a deadline."""
        line = format_task(3, make_task("Buy milk"), now)
        assert line.plain == "[ ] 3: Buy milk"
        assert line.style == "yellow"

    def test_completed_task(self, now: datetime) -> None:
        """Test a completed task gets a checked box."""
        line = format_task(0, make_task("Done", Priority.LOW, completed=True), now)
        assert line.plain == "[x] 0: Done"
        assert line.style == "green"

    def test_hours_remaining(self, now: datetime) -> None:
        """Test a future deadline shows whole hours left in the ahead color."""
        task = make_task("Fix bug", Priority.HIGH, due_time=now + timedelta(hours=2))
        line = format_task(0, task, now)
        assert line.plain == "[ ] 0: Fix bug (2 hours remaining)"
        assert line.style == "red"
        assert [span.style for span in line.spans] == [AHEAD_COLOR]

    def test_overdue(self, now: datetime) -> None:
        """Test a deadline at now is shown as overdue in the overdue color."""
        task = make_task("Fix bug", due_time=now)
        line = format_task(0, task, now)
        assert line.plain == "[ ] 0: Fix bug (overdue)"
        assert [span.style for span in line.spans] == [OVERDUE_COLOR]

    def test_markup_in_description_is_literal(self, now: datetime) -> None:
        """Test descriptions are not interpreted as rich markup."""
        line = format_task(0, make_task("[bold]not bold[/bold]"), now)
        assert line.plain == "[ ] 0: [bold]not bold[/bold]"


class TestRenderTasks:
    """Tests for render_tasks."""

    def test_empty(self, console: Console) -> None:
        """Test rendering no tasks prints nothing."""
        render_tasks(console, [])
        assert console.export_text() == ""

    def test_uses_current_time_by_default(self, console: Console) -> None:
        """Test the deadline is compared against the wall clock."""
        task = make_task("Later", due_time=datetime.now() + timedelta(hours=5, minutes=30))
        render_tasks(console, [task])
        assert "(5 hours remaining)" in console.export_text()
