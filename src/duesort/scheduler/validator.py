"""Input validation for scheduling requests."""

from __future__ import annotations

from datetime import datetime, timedelta

from duesort.exceptions import (
    DuplicateTaskError,
    EmptyInputError,
    MissingReferenceError,
    SelfDependencyError,
)
from duesort.logger import get_logger
from duesort.models import ScheduleTask, StoredTask

from .feasibility import match_timezone

logger = get_logger()


def validate_tasks(tasks: list[ScheduleTask]) -> None:
    """Check a request's tasks before the graph is built.

    Checks run in order and the first failure is raised:

    1. at least one task is present
    2. titles are unique
    3. no task depends on itself
    4. every dependency names a task in the request

    Raises:
        EmptyInputError, DuplicateTaskError, SelfDependencyError,
        MissingReferenceError
    """
    if not tasks:
        raise EmptyInputError("No tasks provided for scheduling.")

    titles: set[str] = set()
    for task in tasks:
        if task.title in titles:
            raise DuplicateTaskError(f"Duplicate task title '{task.title}' in task list.")
        titles.add(task.title)
    logger.checks(f"Checked {len(titles)} task titles for uniqueness")

    for task in tasks:
        if task.title in task.dependencies:
            raise SelfDependencyError(f"Task '{task.title}' cannot depend on itself.")

    for task in tasks:
        for dep in task.dependencies:
            logger.checks(f"  {task.title}: dependency '{dep}'")
            if dep not in titles:
                raise MissingReferenceError(
                    f"Dependency '{dep}' not found in task list for task '{task.title}'."
                )


def prepare_schedule_tasks(
    stored: list[StoredTask],
    now: datetime | None = None,
    default_hours: float = 1.0,
    default_due_in: timedelta = timedelta(days=7),
) -> list[ScheduleTask]:
    """Convert task-store records into scheduler input.

    Completed tasks are dropped. Missing estimates fall back to
    ``default_hours`` and missing due dates to ``now + default_due_in``.
    """
    # Default due dates follow the awareness of the dates the store already has
    reference = next((r.due_date for r in stored if r.due_date is not None), None)
    now = now or datetime.now(tz=reference.tzinfo if reference else None)
    if reference is not None:
        now = match_timezone(now, reference)
    tasks: list[ScheduleTask] = []
    for record in stored:
        if record.is_completed:
            logger.checks(f"Skipping completed task '{record.title}'")
            continue
        tasks.append(
            ScheduleTask(
                title=record.title.strip(),
                estimated_hours=record.estimated_hours or default_hours,
                due_date=record.due_date or now + default_due_in,
                dependencies=tuple(record.dependency_titles),
            )
        )
    return tasks
