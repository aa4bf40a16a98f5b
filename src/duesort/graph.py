"""DOT rendering of a request's dependency graph."""

from __future__ import annotations

import itertools

from .models import ScheduleTask


class GraphGenerator:
    """Generate dependency graphs in DOT format.

    Edges run from a prerequisite to the task that depends on it. When an
    order is supplied, nodes are labelled with their position in it.
    """

    def __init__(self, tasks: list[ScheduleTask], order: list[str] | None = None):
        self.tasks = tasks
        self.positions = {title: i for i, title in enumerate(order or [], start=1)}

    def generate(self) -> str:
        lines = ["digraph Schedule {"]
        lines.append("  rankdir=LR;")
        lines.append("  node [shape=box];")
        lines.append("")

        # One node per title; repeated titles share the first task's node
        next_id = itertools.count()
        ids: dict[str, str] = {}
        for task in self.tasks:
            if task.title in ids:
                continue
            ids[task.title] = f"t{next(next_id)}"
            lines.append(f"  {self._format_node(ids[task.title], task)}")
        lines.append("")

        lines.append("  // Dependencies (prerequisite -> dependent)")
        for task in self.tasks:
            for dep in dict.fromkeys(task.dependencies):
                # Dangling references still get drawn, as a dashed placeholder
                if dep not in ids:
                    ids[dep] = f"t{next(next_id)}"
                    lines.append(
                        f'  {ids[dep]} [label="{self._escape_label(dep)}", style=dashed];'
                    )
                lines.append(f"  {ids[dep]} -> {ids[task.title]};")

        lines.append("}")
        return "\n".join(lines)

    def _escape_label(self, label: str) -> str:
        """Escape special characters in DOT labels."""
        return label.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")

    def _format_node(self, node_id: str, task: ScheduleTask) -> str:
        label = self._escape_label(task.title)
        if task.title in self.positions:
            label = f"{self.positions[task.title]}. {label}"
        label += f"\\ndue {task.due_date.date().isoformat()}, {task.estimated_hours:g}h"
        return f'{node_id} [label="{label}"];'
