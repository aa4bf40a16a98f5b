"""High-level scheduling service."""

from __future__ import annotations

import traceback
from datetime import datetime, timedelta

from duesort.exceptions import (
    CircularDependencyError,
    DuplicateTaskError,
    EmptyInputError,
    MissingReferenceError,
    SelfDependencyError,
    ValidationError,
)
from duesort.logger import debug_enabled, get_logger
from duesort.models import ScheduleErrorCode, ScheduleResult, ScheduleTask, StoredTask
from duesort.schemas import ScheduleRequestSchema, ScheduleResponseSchema

from .config import SchedulerConfig
from .feasibility import project_completion
from .graph import build_graph
from .sorter import deadline_topological_sort
from .validator import prepare_schedule_tasks, validate_tasks

logger = get_logger()

_ERROR_CODES: dict[type[ValidationError], ScheduleErrorCode] = {
    EmptyInputError: ScheduleErrorCode.EMPTY_INPUT,
    DuplicateTaskError: ScheduleErrorCode.DUPLICATE_TASK,
    SelfDependencyError: ScheduleErrorCode.SELF_DEPENDENCY,
    MissingReferenceError: ScheduleErrorCode.UNKNOWN_DEPENDENCY,
    CircularDependencyError: ScheduleErrorCode.CIRCULAR_DEPENDENCY,
}


def _error_code(exc: ValidationError) -> ScheduleErrorCode:
    for exc_type, code in _ERROR_CODES.items():
        if isinstance(exc, exc_type):
            return code
    return ScheduleErrorCode.INTERNAL_ERROR


class SchedulingService:
    """Recommend an execution order for a set of tasks.

    This service coordinates:
    - validate_tasks (empty input, duplicate titles, self and dangling references)
    - build_graph (adjacency lists and in-degrees)
    - deadline_topological_sort (earliest due date among eligible tasks)
    - project_completion (optional late-task warnings)

    schedule() never raises; every failure comes back as an invalid result.
    The service keeps no per-call state, so one instance can serve concurrent
    requests.
    """

    def __init__(self, config: SchedulerConfig | None = None):
        self.config = config or SchedulerConfig()

    def schedule(
        self, tasks: list[ScheduleTask], current_time: datetime | None = None
    ) -> ScheduleResult:
        """Schedule tasks and wrap the outcome in a ScheduleResult.

        Args:
            tasks: Tasks to order
            current_time: Start of the feasibility projection (defaults to now)
        """
        try:
            validate_tasks(tasks)
            graph = build_graph(tasks)
            order = deadline_topological_sort(graph)

            warnings: list[str] = []
            if self.config.check_feasibility:
                warnings = self._feasibility_warnings(order, graph.tasks, current_time)

            return ScheduleResult.success(order, warnings)
        except ValidationError as e:
            logger.changes(f"Scheduling rejected: {e}")
            return ScheduleResult.failure(str(e), _error_code(e))
        except Exception as e:  # noqa: BLE001 - the public boundary never raises
            logger.changes(f"Scheduling failed: {e}")
            if debug_enabled():
                logger.debug(traceback.format_exc())
            return ScheduleResult.failure(
                f"Error scheduling tasks: {e}", ScheduleErrorCode.INTERNAL_ERROR
            )

    def _feasibility_warnings(
        self,
        order: list[str],
        tasks: dict[str, ScheduleTask],
        current_time: datetime | None,
    ) -> list[str]:
        """Project completion dates; a failure here only costs the warnings."""
        first_due = tasks[order[0]].due_date
        start = current_time or datetime.now(tz=first_due.tzinfo)
        try:
            late = project_completion(order, tasks, start, self.config.working_hours_per_day)
        except (TypeError, ValueError, OverflowError) as e:
            logger.changes(f"Feasibility check skipped: {e}")
            return [f"Feasibility check skipped: {e}"]

        warnings = [task.describe() for task in late]
        for warning in warnings:
            logger.changes(f"Warning: {warning}")
        return warnings

    def schedule_stored(
        self, stored: list[StoredTask], current_time: datetime | None = None
    ) -> ScheduleResult:
        """Schedule the incomplete tasks of a project as kept by the task store.

        Missing estimates and due dates are filled from the configured defaults.
        """
        tasks = prepare_schedule_tasks(
            stored,
            now=current_time,
            default_hours=self.config.default_estimated_hours,
            default_due_in=timedelta(days=self.config.default_due_in_days),
        )
        return self.schedule(tasks, current_time=current_time)

    def schedule_request(
        self, request: ScheduleRequestSchema, current_time: datetime | None = None
    ) -> ScheduleResponseSchema:
        """Schedule an API request payload and build the API response."""
        result = self.schedule(request.to_tasks(), current_time=current_time)
        return ScheduleResponseSchema.from_result(result)


def schedule_tasks(
    tasks: list[ScheduleTask], config: SchedulerConfig | None = None
) -> ScheduleResult:
    """Schedule tasks with a throwaway service."""
    return SchedulingService(config).schedule(tasks)
