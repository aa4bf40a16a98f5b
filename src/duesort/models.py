"""Data models for duesort."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ScheduleErrorCode(str, Enum):
    """Why a scheduling request was rejected."""

    EMPTY_INPUT = "empty_input"
    DUPLICATE_TASK = "duplicate_task"
    SELF_DEPENDENCY = "self_dependency"
    UNKNOWN_DEPENDENCY = "unknown_dependency"
    CIRCULAR_DEPENDENCY = "circular_dependency"
    INTERNAL_ERROR = "internal_error"


def _default_str_list() -> list[str]:
    return []


@dataclass(frozen=True)
class ScheduleTask:
    """A task submitted for scheduling.

    The title is the task's identity within a request; dependencies are the
    titles of tasks that must run first.
    """

    title: str
    estimated_hours: float
    due_date: datetime
    dependencies: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence for convenience but store an immutable tuple
        if not isinstance(self.dependencies, tuple):
            object.__setattr__(self, "dependencies", tuple(self.dependencies))


@dataclass
class ScheduleResult:
    """Outcome of a scheduling request."""

    recommended_order: list[str] = field(default_factory=_default_str_list)
    is_valid: bool = True
    message: str | None = None
    error: ScheduleErrorCode | None = None
    warnings: list[str] = field(default_factory=_default_str_list)

    @classmethod
    def success(cls, order: list[str], warnings: list[str] | None = None) -> ScheduleResult:
        return cls(
            recommended_order=list(order),
            is_valid=True,
            message="Tasks scheduled successfully.",
            warnings=list(warnings or []),
        )

    @classmethod
    def failure(cls, message: str, error: ScheduleErrorCode) -> ScheduleResult:
        return cls(recommended_order=[], is_valid=False, message=message, error=error)


@dataclass
class StoredTask:
    """A task as kept by the project task store.

    Dependencies are free text: either a JSON array of titles or a
    comma-separated list.
    """

    title: str
    is_completed: bool = False
    due_date: datetime | None = None
    estimated_hours: float | None = None
    dependencies: str | None = None

    @property
    def dependency_titles(self) -> list[str]:
        return parse_dependency_text(self.dependencies)


def parse_dependency_text(text: str | None) -> list[str]:
    """Split free-text dependencies into titles.

    A JSON array is used as-is; anything else is split on commas. Titles are
    trimmed and blanks dropped.
    """
    raw = (text or "").strip()
    if not raw:
        return []
    if raw.startswith("["):
        try:
            parsed: Any = json.loads(raw)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            return [str(item).strip() for item in parsed if str(item).strip()]  # type: ignore[misc]
    return [part.strip() for part in raw.split(",") if part.strip()]
