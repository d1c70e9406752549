"""Project skeleton: base, architecture and per-feature directories.

Besides directories this generator owns the per-feature landing pages, the
Feature-Driven feature modules, and the architecture bootstrap files
(``core/di/injection.dart`` for Clean Architecture, ``app/app.locator.dart``
for MVVM).
"""

from __future__ import annotations

from typing import Any

from bunny.config import Architecture, ProjectConfig
from bunny.scaffolder import paths
from bunny.scaffolder.base import build_context
from bunny.scaffolder.project import ProjectTree
from bunny.scaffolder.source import StaticSource, TextSource
from bunny.scaffolder.templates import TemplateRenderer
from bunny.utils import print_info

OWNER = "structure"

BASE_DIRECTORIES: tuple[str, ...] = (
    "lib",
    "lib/app",
    "test",
    "assets/images",
    "assets/icons",
    "assets/fonts",
    "assets/json",
)

ARCHITECTURE_DIRECTORIES: dict[Architecture, tuple[str, ...]] = {
    Architecture.CLEAN: (
        "lib/core/di",
        "lib/core/usecases",
        "lib/core/utils",
        "lib/core/constants",
        "lib/features",
    ),
    Architecture.MVVM: (
        "lib/core/services",
        "lib/core/utils",
        "lib/shared/widgets",
        "lib/features",
    ),
    Architecture.MVC: (
        "lib/core/services",
        "lib/core/utils",
        "lib/shared/widgets",
        "lib/features",
    ),
    Architecture.FEATURE_DRIVEN: (
        "lib/core/utils",
        "lib/shared/widgets",
        "lib/shared/services",
        "lib/features",
    ),
}

FEATURE_DIRECTORIES: dict[Architecture, tuple[str, ...]] = {
    Architecture.CLEAN: (
        "data/datasources",
        "data/models",
        "data/repositories",
        "domain/entities",
        "domain/repositories",
        "domain/usecases",
        "presentation/pages",
        "presentation/widgets",
    ),
    Architecture.MVVM: ("models", "views", "viewmodels", "services"),
    Architecture.MVC: ("models", "views", "controllers"),
    Architecture.FEATURE_DRIVEN: (
        "data",
        "domain",
        "presentation/pages",
        "presentation/widgets",
    ),
}


class ProjectStructureGenerator:
    """Creates the directory skeleton and the per-feature stubs."""

    def __init__(self, config: ProjectConfig, renderer: TemplateRenderer) -> None:
        self.config = config
        self.renderer = renderer

    def generate(self, tree: ProjectTree) -> None:
        print_info("  [cyan]>[/cyan] Creating project structure")
        arch = self.config.architecture
        context = build_context(self.config)

        tree.add_directories(BASE_DIRECTORIES)
        tree.add_directories(ARCHITECTURE_DIRECTORIES[arch])

        for feature in context["features"]:
            self._generate_feature(tree, feature, context)

        if arch is Architecture.CLEAN:
            injection = self.renderer.render("structure/injection.dart.j2", context)
            tree.add_file(TextSource(paths.lib(paths.DI_INJECTION), injection), owner=OWNER)
            tree.add_file(
                StaticSource(".env", "API_BASE_URL=https://api.example.com\n"), owner=OWNER
            )
        elif arch is Architecture.MVVM:
            locator = self.renderer.render("structure/app_locator.dart.j2", context)
            tree.add_file(StaticSource(paths.lib(paths.APP_LOCATOR), locator), owner=OWNER)

    def _generate_feature(
        self, tree: ProjectTree, feature: dict[str, Any], context: dict[str, Any]
    ) -> None:
        base = paths.lib(paths.feature_dir(feature["slug"]))
        tree.add_directories(
            [f"{base}/{sub}" for sub in FEATURE_DIRECTORIES[self.config.architecture]]
        )
        feature_context = {**context, "feature": feature}
        page = self.renderer.render("structure/feature_page.dart.j2", feature_context)
        tree.add_file(
            StaticSource(paths.lib(feature["page_path"]), page, variant="feature"), owner=OWNER
        )
        if self.config.uses_modular:
            module = self.renderer.render("structure/feature_module.dart.j2", feature_context)
            tree.add_file(
                StaticSource(paths.lib(paths.feature_module(feature["slug"])), module, variant="feature"),
                owner=OWNER,
            )
