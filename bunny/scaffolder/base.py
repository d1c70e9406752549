"""Shared pieces of the module generators.

``ModuleGenerator`` implements the common contract: skip unless the module
is selected, create the module's directory subtree, render its registry
templates into the project tree, and add its manifest dependencies (warning
and skipping that step when there is no manifest).
"""

from __future__ import annotations

from typing import Any, ClassVar

from bunny.config import Architecture, Module, ProjectConfig, StateManagement
from bunny.scaffolder import paths
from bunny.scaffolder.project import ProjectTree
from bunny.scaffolder.registry import TemplateRegistry
from bunny.scaffolder.source import StaticSource
from bunny.scaffolder.templates import TemplateRenderer
from bunny.utils import pascal_case, print_info, title_case


# ---------------------------------------------------------------------------
# Template context
# ---------------------------------------------------------------------------


def build_context(config: ProjectConfig) -> dict[str, Any]:
    """Build the Jinja2 template context from the project config."""
    package = config.project_name
    features = [
        {
            "name": name,
            "slug": slug,
            "class_name": pascal_case(slug),
            "page_path": paths.feature_page(config.architecture, slug),
            "page_import": paths.package_uri(
                package, paths.feature_page(config.architecture, slug)
            ),
            "module_import": paths.package_uri(package, paths.feature_module(slug)),
        }
        for name, slug in zip(config.features, config.feature_slugs)
    ]
    return {
        "project_name": config.project_name,
        "package": package,
        "title": title_case(config.project_name),
        "description": config.description,
        "application_id": config.application_id,
        "architecture": config.architecture.value,
        "state_management": config.state_management.value,
        "is_clean": config.architecture is Architecture.CLEAN,
        "is_mvvm": config.architecture is Architecture.MVVM,
        "is_mvc": config.architecture is Architecture.MVC,
        "is_feature_driven": config.architecture is Architecture.FEATURE_DRIVEN,
        "is_redux": config.state_management is StateManagement.REDUX,
        "features": features,
        "modules": [m.value for m in config.modules],
        "has_theme": config.has_module(Module.THEME_MANAGER),
        "has_localization": config.has_module(Module.LOCALIZATION),
        "has_notifications": config.has_module(Module.PUSH_NOTIFICATION),
        "has_network": config.has_module(Module.NETWORK_LAYER),
        "has_routing": config.uses_router,
        "has_error_handling": config.has_module(Module.ERROR_HANDLING),
        "has_storage": config.has_module(Module.LOCAL_STORAGE),
    }


# ---------------------------------------------------------------------------
# Module generator base
# ---------------------------------------------------------------------------


class ModuleGenerator:
    """Renders one module's files into the project tree."""

    component: ClassVar[str]
    module: ClassVar[Module | None] = None
    directories: ClassVar[tuple[str, ...]] = ()
    dependencies: ClassVar[dict[str, Any]] = {}
    dev_dependencies: ClassVar[dict[str, Any]] = {}

    def __init__(
        self,
        config: ProjectConfig,
        renderer: TemplateRenderer,
        registry: TemplateRegistry,
    ) -> None:
        self.config = config
        self.renderer = renderer
        self.registry = registry

    @property
    def task_name(self) -> str:
        return f"generate:{self.component}"

    def is_active(self) -> bool:
        return self.module is None or self.config.has_module(self.module)

    def context(self) -> dict[str, Any]:
        return build_context(self.config)

    def generate(self, tree: ProjectTree) -> None:
        """Add this module's directories, files and dependencies to *tree*."""
        if not self.is_active():
            return
        print_info(f"  [cyan]>[/cyan] Generating {self.component.replace('_', ' ')}")
        tree.add_directories([paths.lib(d) for d in self.directories])
        context = self.context()
        selected = self.registry.select(self.component, self.config.state_management)
        variants = {spec.template for spec in selected}
        for spec in self.registry.files_for(self.component, self.config):
            variant = (
                f"{self.component}:{self.config.state_management.value}"
                if spec.template in variants
                else self.component
            )
            content = self.renderer.render(spec.template, context)
            tree.add_file(StaticSource(spec.output, content, variant=variant), owner=self.component)
        self.generate_extra(tree, context)
        self.update_manifest(tree)

    def generate_extra(self, tree: ProjectTree, context: dict[str, Any]) -> None:
        """Hook for files that are not plain registry templates."""

    def manifest_dependencies(self) -> tuple[dict[str, Any], dict[str, Any]]:
        """``(dependencies, dev_dependencies)`` this module needs."""
        return dict(self.dependencies), dict(self.dev_dependencies)

    def update_manifest(self, tree: ProjectTree) -> None:
        deps, dev_deps = self.manifest_dependencies()
        if not deps and not dev_deps:
            return
        if tree.manifest is None:
            tree.warn(f"pubspec.yaml not found; skipping {self.component} dependencies")
            return
        tree.manifest.add_dependencies(deps)
        tree.manifest.add_dependencies(dev_deps, dev=True)
        self.update_flutter_section(tree)

    def update_flutter_section(self, tree: ProjectTree) -> None:
        """Hook for changes to the manifest's ``flutter:`` section."""
