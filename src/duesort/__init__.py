"""Deadline-aware dependency ordering for project tasks."""

__version__ = "0.1.0"
