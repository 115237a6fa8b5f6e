"""Shared fixtures for tasktrack tests."""

from __future__ import annotations

import io
import os
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest
from rich.console import Console


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def now() -> datetime:
    """A fixed point in time for deadline checks."""
    return datetime(2025, 1, 10, 12, 0, 0)


@pytest.fixture
def console() -> Console:
    """A plain-text console that records what is printed."""
    return Console(file=io.StringIO(), width=120, color_system=None, record=True)


@pytest.fixture
def err_console() -> Console:
    """A plain-text error console that records what is printed."""
    return Console(file=io.StringIO(), width=120, color_system=None, record=True)


@pytest.fixture
def sample_tasks_data() -> list[dict]:
    """Sample task file contents."""
    return [
        {
            "description": "Fix bug",
            "completed": False,
            "priority": 0,
            "due_time": "2025-01-10T18:30:00",
        },
        {
            "description": "Buy milk",
            "completed": True,
            "priority": 1,
            "due_time": None,
        },
        {
            "description": "Water plants",
            "completed": False,
            "priority": 2,
            "due_time": None,
        },
    ]

