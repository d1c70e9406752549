"""Explicit dependency graph of generation steps.

Each generator and integrator is a named task that declares the tasks it must
run after.  The graph is executed sequentially in a deterministic topological
order; a failing task is reported and only the tasks that depend on it are
skipped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from bunny.scaffolder.project import ProjectTree
from bunny.utils import print_error


class TaskGraphError(Exception):
    """Raised when the graph itself is malformed (cycle, unknown task)."""


@dataclass
class Task:
    name: str
    action: Callable[[ProjectTree], None]
    after: tuple[str, ...] = ()


@dataclass
class GraphRunResult:
    """Outcome of :meth:`TaskGraph.run`."""

    completed: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failed and not self.skipped


class TaskGraph:
    """A small DAG scheduler for generation steps."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def add(
        self,
        name: str,
        action: Callable[[ProjectTree], None],
        after: tuple[str, ...] | list[str] = (),
    ) -> Task:
        if name in self._tasks:
            raise TaskGraphError(f"Duplicate task {name!r}")
        task = Task(name=name, action=action, after=tuple(after))
        self._tasks[name] = task
        return task

    def __contains__(self, name: str) -> bool:
        return name in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def names(self) -> list[str]:
        return list(self._tasks)

    def dependencies(self, name: str) -> tuple[str, ...]:
        return self._tasks[name].after

    def order(self) -> list[str]:
        """Return task names in topological order.

        Among tasks that are ready at the same time, the one added first
        runs first, so the order is stable for a given graph.

        Raises:
            TaskGraphError: On an unknown dependency or a cycle.
        """
        for task in self._tasks.values():
            for dep in task.after:
                if dep not in self._tasks:
                    raise TaskGraphError(f"Task {task.name!r} depends on unknown task {dep!r}")

        done: set[str] = set()
        ordered: list[str] = []
        pending = list(self._tasks.values())
        while pending:
            ready = next((t for t in pending if all(d in done for d in t.after)), None)
            if ready is None:
                cycle = ", ".join(t.name for t in pending)
                raise TaskGraphError(f"Dependency cycle between: {cycle}")
            pending.remove(ready)
            done.add(ready.name)
            ordered.append(ready.name)
        return ordered

    def run(self, tree: ProjectTree) -> GraphRunResult:
        """Execute every task against *tree* in topological order."""
        result = GraphRunResult()
        blocked: set[str] = set()
        for name in self.order():
            task = self._tasks[name]
            failed_deps = [d for d in task.after if d in blocked]
            if failed_deps:
                tree.warn(f"Skipping {name}: depends on {', '.join(failed_deps)}")
                result.skipped.append(name)
                blocked.add(name)
                continue
            try:
                task.action(tree)
            except Exception as exc:
                print_error(f"  x {name} failed: {exc}")
                result.failed[name] = str(exc)
                blocked.add(name)
                continue
            result.completed.append(name)
        return result
