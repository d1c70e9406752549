"""Top-level project generator.

Builds the task graph for one :class:`ProjectConfig`, composes the project in
memory and writes it out.  The graph is:

    structure ─┬─> app ──> main ─┐
    manifest ──┤                 ├─> integrate:<module>
               └─> generate:<module> ─┘

Integrators additionally run after the integrators they name in ``after``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

from bunny.config import ProjectConfig
from bunny.scaffolder.app_gen import AppGenerator
from bunny.scaffolder.base import ModuleGenerator
from bunny.scaffolder.error_gen import ErrorHandlingGenerator
from bunny.scaffolder.graph import GraphRunResult, TaskGraph
from bunny.scaffolder.integrators import (
    Integrator,
    LocalizationIntegrator,
    LocalStorageIntegrator,
    NetworkIntegrator,
    ObservabilityIntegrator,
    PushNotificationIntegrator,
    ThemeIntegrator,
)
from bunny.scaffolder.localization_gen import LocalizationGenerator
from bunny.scaffolder.main_gen import EntryPointGenerator
from bunny.scaffolder.materializer import materialize
from bunny.scaffolder.network_gen import NetworkLayerGenerator
from bunny.scaffolder.notification_gen import PushNotificationGenerator
from bunny.scaffolder.observability_gen import ObservabilityGenerator
from bunny.scaffolder.project import ProjectTree
from bunny.scaffolder.pubspec_gen import ManifestGenerator
from bunny.scaffolder.redux_gen import ReduxGenerator
from bunny.scaffolder.registry import TemplateRegistry, default_registry
from bunny.scaffolder.showcase_gen import ShowcaseGenerator
from bunny.scaffolder.storage_gen import LocalStorageGenerator
from bunny.scaffolder.structure_gen import ProjectStructureGenerator
from bunny.scaffolder.templates import TemplateRenderer
from bunny.scaffolder.theme_gen import ThemeGenerator
from bunny.utils import print_info, print_warning

STRUCTURE_TASK = "structure"
MANIFEST_TASK = "manifest"
APP_TASK = "app"
MAIN_TASK = "main"

MODULE_GENERATORS: tuple[type[ModuleGenerator], ...] = (
    ReduxGenerator,
    ThemeGenerator,
    LocalizationGenerator,
    PushNotificationGenerator,
    NetworkLayerGenerator,
    ErrorHandlingGenerator,
    LocalStorageGenerator,
    ObservabilityGenerator,
    ShowcaseGenerator,
)

INTEGRATORS: tuple[type[Integrator], ...] = (
    ThemeIntegrator,
    NetworkIntegrator,
    LocalizationIntegrator,
    PushNotificationIntegrator,
    LocalStorageIntegrator,
    ObservabilityIntegrator,
)


@dataclass
class GenerationResult:
    """Outcome of :meth:`ProjectGenerator.compose`."""

    tree: ProjectTree
    graph: GraphRunResult
    duration: float = 0.0
    written: list[Path] = field(default_factory=list)

    @property
    def warnings(self) -> list[str]:
        return self.tree.warnings

    @property
    def success(self) -> bool:
        return self.graph.success


class ProjectGenerator:
    """Generates a complete Flutter project from a :class:`ProjectConfig`.

    Usage::

        generator = ProjectGenerator(config)
        project_dir = await generator.generate("./out")
    """

    def __init__(
        self,
        config: ProjectConfig,
        registry: TemplateRegistry | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.registry = registry or default_registry()
        self.renderer = renderer or TemplateRenderer()
        self.result: GenerationResult | None = None

    # -- Graph -------------------------------------------------------------

    def module_generators(self) -> list[ModuleGenerator]:
        generators = [cls(self.config, self.renderer, self.registry) for cls in MODULE_GENERATORS]
        return [g for g in generators if g.is_active()]

    def integrators(self) -> list[Integrator]:
        integrators = [cls(self.config, self.registry) for cls in INTEGRATORS]
        return [i for i in integrators if i.is_active()]

    def build_graph(self) -> TaskGraph:
        """Build the task graph for the active generators and integrators."""
        config = self.config
        graph = TaskGraph()
        graph.add(STRUCTURE_TASK, ProjectStructureGenerator(config, self.renderer).generate)
        graph.add(MANIFEST_TASK, ManifestGenerator(config).generate)
        graph.add(
            APP_TASK,
            AppGenerator(config, self.renderer, self.registry).generate,
            after=(STRUCTURE_TASK,),
        )
        graph.add(
            MAIN_TASK,
            EntryPointGenerator(config, self.registry).generate,
            after=(APP_TASK,),
        )

        generated: set[str] = set()
        for generator in self.module_generators():
            graph.add(
                generator.task_name,
                generator.generate,
                after=(STRUCTURE_TASK, MANIFEST_TASK),
            )
            generated.add(generator.component)

        integrators = self.integrators()
        integrated = {i.component for i in integrators}
        for integrator in integrators:
            after = [APP_TASK, MAIN_TASK]
            if integrator.component in generated:
                after.append(f"generate:{integrator.component}")
            after.extend(f"integrate:{c}" for c in integrator.after if c in integrated)
            graph.add(integrator.task_name, integrator.integrate, after=after)
        return graph

    # -- Composition -------------------------------------------------------

    def compose(self) -> ProjectTree:
        """Run every task against a fresh in-memory tree."""
        start = time.monotonic()
        tree = ProjectTree(root_widget_path=self.config.root_widget_path)
        graph_result = self.build_graph().run(tree)
        self.result = GenerationResult(
            tree=tree,
            graph=graph_result,
            duration=time.monotonic() - start,
        )
        return tree

    async def generate(self, output_dir: str | Path) -> Path:
        """Compose the project and write it to ``<output_dir>/<project_name>``.

        Returns:
            The project directory.
        """
        project_dir = Path(output_dir) / self.config.project_name
        if project_dir.exists():
            print_warning(f"{project_dir} already exists; files will be overwritten")

        print_info(f"[bold]Generating {self.config.project_name}[/bold] in {project_dir}")
        tree = self.compose()
        written = await materialize(tree, project_dir, self.renderer)
        assert self.result is not None
        self.result.written = written
        return project_dir
