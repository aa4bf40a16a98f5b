"""Scheduler package - deadline-aware dependency ordering.

Main entry points:
- SchedulingService: validate, sort and assemble a ScheduleResult
- schedule_tasks: one-shot convenience wrapper
- deadline_topological_sort: the ordering algorithm on a DependencyGraph

Configuration:
- SchedulerConfig: feasibility projection and stored-task defaults
"""

from .config import SchedulerConfig
from .feasibility import LateTask, match_timezone, project_completion
from .graph import DependencyGraph, build_graph
from .service import SchedulingService, schedule_tasks
from .sorter import deadline_topological_sort
from .validator import prepare_schedule_tasks, validate_tasks

__all__ = [
    # Configuration
    "SchedulerConfig",
    # High-level service
    "SchedulingService",
    "schedule_tasks",
    # Pipeline stages
    "validate_tasks",
    "prepare_schedule_tasks",
    "DependencyGraph",
    "build_graph",
    "deadline_topological_sort",
    # Feasibility
    "LateTask",
    "project_completion",
    "match_timezone",
]
