"""Pytest configuration and helpers for duesort tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

import pytest

from duesort.logger import reset_logger
from duesort.models import ScheduleResult, ScheduleTask


def due(day: int, hour: int = 0) -> datetime:
    """A due date in January 2025."""
    return datetime(2025, 1, day, hour)


def task(
    title: str, day: int = 1, *dependencies: str, hours: float = 1.0, hour: int = 0
) -> ScheduleTask:
    """Create a ScheduleTask due on the given January 2025 day.

    Example:
        task("C", 2, "A", "B")  # C is due Jan 2 and depends on A and B
    """
    return ScheduleTask(
        title=title,
        estimated_hours=hours,
        due_date=due(day, hour),
        dependencies=dependencies,
    )


def assert_valid_order(result: ScheduleResult, tasks: list[ScheduleTask]) -> None:
    """Assert a successful result is a dependency-respecting permutation of tasks."""
    assert result.is_valid, result.message
    order = result.recommended_order

    assert sorted(order) == sorted(t.title for t in tasks), "order is not a permutation"
    assert len(set(order)) == len(order), "order has duplicates"

    position = {title: i for i, title in enumerate(order)}
    for t in tasks:
        for dep in t.dependencies:
            assert position[dep] < position[t.title], (
                f"{t.title} at {position[t.title]} runs before dependency {dep} at {position[dep]}"
            )


@pytest.fixture(autouse=True)
def clean_logger() -> Iterator[None]:
    """Reset the duesort logger after each test for isolation."""
    yield
    reset_logger()
