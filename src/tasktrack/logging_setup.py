"""Logging configuration for tasktrack."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: str | Path | None = None,
) -> None:
    """Configure the ``tasktrack`` logger.

    Logs go to stderr at ``level``; if ``log_file`` is given, everything
    from DEBUG up is also written there. Safe to call more than once.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("tasktrack")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
