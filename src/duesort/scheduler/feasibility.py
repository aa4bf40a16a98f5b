"""Serial completion projection against due dates.

This pass is advisory: it reports tasks that would finish late if worked in
the given order by a single person, but never changes the order itself.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from duesort.models import ScheduleTask


def match_timezone(moment: datetime, reference: datetime) -> datetime:
    """Give ``moment`` the awareness of ``reference`` so the two compare.

    A naive moment takes the reference tzinfo as its wall-clock zone; an aware
    moment compared against naive dates has its tzinfo dropped.
    """
    if (moment.tzinfo is None) == (reference.tzinfo is None):
        return moment
    return moment.replace(tzinfo=reference.tzinfo)


@dataclass(frozen=True)
class LateTask:
    """A task projected to finish after its due date."""

    title: str
    projected_completion: datetime
    due_date: datetime

    @property
    def days_late(self) -> int:
        return math.ceil((self.projected_completion - self.due_date) / timedelta(days=1))

    def describe(self) -> str:
        return (
            f"Task '{self.title}' is projected to finish {self.days_late} day(s) after its "
            f"due date ({self.projected_completion.date()} vs {self.due_date.date()})"
        )


def project_completion(
    order: list[str],
    tasks: dict[str, ScheduleTask],
    start: datetime,
    working_hours_per_day: float = 8.0,
) -> list[LateTask]:
    """Walk ``order`` from ``start`` and collect tasks that miss their due date.

    Each task occupies ceil(estimated_hours / working_hours_per_day) whole days
    and starts the day the previous one ends.
    """
    if working_hours_per_day <= 0:
        raise ValueError("working_hours_per_day must be positive")

    late: list[LateTask] = []
    current = start
    for title in order:
        task = tasks[title]
        days = math.ceil(task.estimated_hours / working_hours_per_day)
        current = match_timezone(current, task.due_date) + timedelta(days=days)
        if current > task.due_date:
            late.append(LateTask(title=title, projected_completion=current, due_date=task.due_date))
    return late
