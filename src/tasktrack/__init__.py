"""tasktrack - a small interactive task tracker for the terminal."""

__version__ = "0.1.0"
