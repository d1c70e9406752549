"""Shared pytest fixtures for the Flutter Bunny test suite.

Provides reusable fixtures for:
- Temporary output directories
- Project configurations
- The default template registry and renderer
- Composing a project tree in memory and reading its rendered files
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from bunny.config import ProjectConfig
from bunny.scaffolder import ProjectGenerator, ProjectTree, TemplateRenderer, default_registry
from bunny.scaffolder.registry import TemplateRegistry


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Temporary directory projects are generated into (auto-cleanup)."""
    output = tmp_path / "output"
    output.mkdir()
    yield output


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., ProjectConfig]:
    """Factory for ``ProjectConfig`` with test-friendly defaults.

    Usage::

        def test_something(make_config):
            config = make_config(state_management="Bloc", modules=["Theme Manager"])
    """

    def _make(**overrides: Any) -> ProjectConfig:
        values: dict[str, Any] = {
            "project_name": "demo_app",
            "architecture": "Clean Architecture",
            "state_management": "Default",
            "features": ["Authentication"],
            "modules": [],
        }
        values.update(overrides)
        return ProjectConfig(**values)

    return _make


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def registry() -> TemplateRegistry:
    return default_registry()


@pytest.fixture
def compose(renderer) -> Callable[[ProjectConfig], "ComposedProject"]:
    """Compose a project in memory and return a :class:`ComposedProject`."""

    def _compose(config: ProjectConfig) -> ComposedProject:
        generator = ProjectGenerator(config, renderer=renderer)
        tree = generator.compose()
        return ComposedProject(generator, tree, renderer)

    return _compose


class ComposedProject:
    """A composed tree with its rendered files indexed by path."""

    def __init__(
        self,
        generator: ProjectGenerator,
        tree: ProjectTree,
        renderer: TemplateRenderer,
    ) -> None:
        self.generator = generator
        self.tree = tree
        self.files = {f.path: f for f in tree.render(renderer)}

    @property
    def result(self):
        return self.generator.result

    def text(self, path: str) -> str:
        return self.files[path].content

    @property
    def main(self) -> str:
        return self.text("lib/main.dart")

    @property
    def app(self) -> str:
        return self.text(self.generator.config.root_widget_path)

    @property
    def pubspec(self) -> str:
        return self.text("pubspec.yaml")
