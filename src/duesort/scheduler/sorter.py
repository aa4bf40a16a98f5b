"""Deadline-priority topological sort.

Kahn's algorithm with the FIFO queue replaced by a min-heap keyed on due date,
so among all tasks whose prerequisites are done the one due soonest runs next.
Ties on due date fall back to the order tasks entered the heap.
"""

from __future__ import annotations

import heapq
import itertools
from datetime import datetime

from duesort.exceptions import CircularDependencyError
from duesort.logger import get_logger

from .graph import DependencyGraph

logger = get_logger()


def deadline_topological_sort(graph: DependencyGraph) -> list[str]:
    """Order the graph's tasks, earliest due date first among eligible tasks.

    The graph's in-degree counts are not modified.

    Returns:
        Task titles in execution order

    Raises:
        CircularDependencyError: if some tasks can never become eligible
    """
    in_degree = dict(graph.in_degree)
    sequence = itertools.count()
    heap: list[tuple[datetime, int, str]] = []

    def push(title: str) -> None:
        due = graph.tasks[title].due_date
        heapq.heappush(heap, (due, next(sequence), title))
        logger.debug(f"    eligible: {title} (due {due.isoformat()})")

    for title, degree in in_degree.items():
        if degree == 0:
            push(title)

    order: list[str] = []
    while heap:
        due, _, title = heapq.heappop(heap)
        order.append(title)
        logger.changes(f"{len(order)}. {title} (due {due.isoformat()})")

        for dependent in graph.dependents[title]:
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                push(dependent)

    if len(order) != len(graph):
        emitted = set(order)
        stuck = sorted(title for title in graph.tasks if title not in emitted)
        raise CircularDependencyError(
            "Circular dependency detected. Cannot schedule tasks: " + ", ".join(stuck),
            tasks=stuck,
        )

    return order
