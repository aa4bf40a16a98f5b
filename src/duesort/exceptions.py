"""Custom exceptions for duesort."""

from __future__ import annotations

from collections.abc import Iterable


class DuesortError(Exception):
    """Base exception for all duesort errors."""

    pass


class ValidationError(DuesortError):
    """Raised when validation fails."""

    pass


class EmptyInputError(ValidationError):
    """Raised when no tasks are supplied for scheduling."""

    pass


class DuplicateTaskError(ValidationError):
    """Raised when two tasks share a title."""

    pass


class SelfDependencyError(ValidationError):
    """Raised when a task lists itself as a dependency."""

    pass


class MissingReferenceError(ValidationError):
    """Raised when a dependency names a task that does not exist."""

    pass


class CircularDependencyError(ValidationError):
    """Raised when a circular dependency is detected.

    The titles left unscheduled are kept on ``tasks`` so callers can report them.
    """

    def __init__(self, message: str, tasks: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.tasks: list[str] = list(tasks)


class ParseError(DuesortError):
    """Raised when a schedule request file cannot be parsed."""

    pass
