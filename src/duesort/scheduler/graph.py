"""Dependency graph construction for scheduling requests."""

from __future__ import annotations

from dataclasses import dataclass, field

from duesort.logger import get_logger
from duesort.models import ScheduleTask

logger = get_logger()


def _default_adjacency() -> dict[str, list[str]]:
    return {}


def _default_in_degree() -> dict[str, int]:
    return {}


def _default_tasks() -> dict[str, ScheduleTask]:
    return {}


@dataclass
class DependencyGraph:
    """Adjacency lists and in-degree counts for one request.

    Edges point from a prerequisite to the tasks that depend on it.
    """

    dependents: dict[str, list[str]] = field(default_factory=_default_adjacency)
    in_degree: dict[str, int] = field(default_factory=_default_in_degree)
    tasks: dict[str, ScheduleTask] = field(default_factory=_default_tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.dependents.values())

    def edges(self) -> list[tuple[str, str]]:
        """All (prerequisite, dependent) pairs in input order."""
        return [(src, dst) for src, targets in self.dependents.items() for dst in targets]


def build_graph(tasks: list[ScheduleTask]) -> DependencyGraph:
    """Build the dependency graph for already-validated tasks.

    Every dependency must name a task in ``tasks``. Cycles are not detected
    here; they show up as tasks the sorter never reaches.
    """
    graph = DependencyGraph()
    for task in tasks:
        graph.dependents[task.title] = []
        graph.in_degree[task.title] = 0
        graph.tasks[task.title] = task

    for task in tasks:
        # dict.fromkeys keeps declaration order while collapsing repeats
        for dep in dict.fromkeys(task.dependencies):
            graph.dependents[dep].append(task.title)
            graph.in_degree[task.title] += 1

    logger.debug(f"Built dependency graph: {len(graph)} tasks, {graph.edge_count} edges")
    return graph
