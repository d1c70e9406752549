"""Tests for the generation task graph.

Covers:
- Deterministic topological order
- Cycle and unknown-dependency detection
- Failure isolation: dependents are skipped, independent tasks still run
"""

from __future__ import annotations

import pytest

from bunny.scaffolder.graph import GraphRunResult, TaskGraph, TaskGraphError
from bunny.scaffolder.project import ProjectTree


pytestmark = pytest.mark.unit


def _recorder(log: list[str], name: str):
    def action(tree: ProjectTree) -> None:
        log.append(name)

    return action


class TestOrder:
    def test_dependencies_first(self):
        graph = TaskGraph()
        graph.add("integrate", lambda t: None, after=("main", "generate"))
        graph.add("main", lambda t: None, after=("app",))
        graph.add("generate", lambda t: None)
        graph.add("app", lambda t: None)
        order = graph.order()
        assert order.index("app") < order.index("main") < order.index("integrate")
        assert order.index("generate") < order.index("integrate")

    def test_ties_broken_by_insertion_order(self):
        graph = TaskGraph()
        for name in ("c", "a", "b"):
            graph.add(name, lambda t: None)
        assert graph.order() == ["c", "a", "b"]

    def test_order_is_stable(self):
        graph = TaskGraph()
        graph.add("x", lambda t: None)
        graph.add("y", lambda t: None, after=("x",))
        graph.add("z", lambda t: None)
        assert graph.order() == graph.order() == ["x", "y", "z"]

    def test_cycle_detected(self):
        graph = TaskGraph()
        graph.add("a", lambda t: None, after=("b",))
        graph.add("b", lambda t: None, after=("a",))
        with pytest.raises(TaskGraphError, match="cycle"):
            graph.order()

    def test_unknown_dependency(self):
        graph = TaskGraph()
        graph.add("a", lambda t: None, after=("missing",))
        with pytest.raises(TaskGraphError, match="unknown"):
            graph.order()

    def test_duplicate_task(self):
        graph = TaskGraph()
        graph.add("a", lambda t: None)
        with pytest.raises(TaskGraphError):
            graph.add("a", lambda t: None)

    def test_introspection(self):
        graph = TaskGraph()
        graph.add("a", lambda t: None)
        graph.add("b", lambda t: None, after=["a"])
        assert "a" in graph
        assert len(graph) == 2
        assert graph.names == ["a", "b"]
        assert graph.dependencies("b") == ("a",)


class TestRun:
    def test_runs_all_in_order(self):
        log: list[str] = []
        graph = TaskGraph()
        graph.add("second", _recorder(log, "second"), after=("first",))
        graph.add("first", _recorder(log, "first"))
        result = graph.run(ProjectTree())
        assert log == ["first", "second"]
        assert result.completed == ["first", "second"]
        assert result.success

    def test_failure_skips_dependents_only(self):
        log: list[str] = []

        def boom(tree: ProjectTree) -> None:
            raise RuntimeError("template missing")

        graph = TaskGraph()
        graph.add("broken", boom)
        graph.add("child", _recorder(log, "child"), after=("broken",))
        graph.add("grandchild", _recorder(log, "grandchild"), after=("child",))
        graph.add("independent", _recorder(log, "independent"))

        tree = ProjectTree()
        result = graph.run(tree)

        assert log == ["independent"]
        assert result.failed == {"broken": "template missing"}
        assert result.skipped == ["child", "grandchild"]
        assert result.completed == ["independent"]
        assert not result.success
        assert any("Skipping child" in w for w in tree.warnings)

    def test_empty_result_is_success(self):
        assert GraphRunResult().success
