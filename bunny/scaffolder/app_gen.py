"""Root widget, router and app module generation.

The root widget is produced as a :class:`RootWidget` model whose shape
(stateless or stateful, ``MaterialApp`` or ``GetMaterialApp``) comes from the
state-management shell.  Without a Theme Manager it uses Flutter's built-in
light and dark themes; integrators replace those fields later.
"""

from __future__ import annotations

from bunny.config import Module, ProjectConfig
from bunny.scaffolder import paths
from bunny.scaffolder.base import build_context
from bunny.scaffolder.project import ProjectTree
from bunny.scaffolder.registry import TemplateRegistry
from bunny.scaffolder.source import RootWidget, StaticSource, dart_string
from bunny.scaffolder.templates import TemplateRenderer
from bunny.utils import print_info, title_case

OWNER = "app"

# Features that may serve as the app's initial route, most preferred first.
DEFAULT_ROUTE_PRIORITY: tuple[str, ...] = ("authentication", "dashboard", "home")


def default_route(feature_slugs: list[str]) -> str | None:
    """Slug of the feature the ``/`` route opens, or ``None`` for a placeholder."""
    for slug in DEFAULT_ROUTE_PRIORITY:
        if slug in feature_slugs:
            return slug
    return None


class AppGenerator:
    """Generates the root widget model, ``app_router.dart`` and ``app_module.dart``."""

    def __init__(
        self,
        config: ProjectConfig,
        renderer: TemplateRenderer,
        registry: TemplateRegistry,
    ) -> None:
        self.config = config
        self.renderer = renderer
        self.registry = registry

    def generate(self, tree: ProjectTree) -> None:
        print_info(f"  [cyan]>[/cyan] Generating {self.config.root_widget_path}")
        tree.add_file(self.build_root(), owner=OWNER)

        context = build_context(self.config)
        route = default_route(self.config.feature_slugs)
        context["default_feature"] = next(
            (f for f in context["features"] if f["slug"] == route), None
        )

        if self.config.uses_router:
            router = self.renderer.render("app/app_router.dart.j2", context)
            tree.add_file(StaticSource(paths.lib(paths.APP_ROUTER), router), owner=OWNER)
        if self.config.uses_modular:
            module = self.renderer.render("app/app_module.dart.j2", context)
            tree.add_file(StaticSource(paths.lib(paths.APP_MODULE), module), owner=OWNER)

    def build_root(self) -> RootWidget:
        config = self.config
        package = config.project_name
        shell = self.registry.shell(config.state_management)

        root = RootWidget(path=config.root_widget_path, class_name=config.root_widget_class)
        root.add_import("package:flutter/material.dart")
        shell.configure_root(root, package, router=config.uses_modular)

        root.set_field("title", dart_string(title_case(config.project_name)))
        root.set_field("debugShowCheckedModeBanner", "false")
        root.set_field("theme", "ThemeData.light(useMaterial3: true)")
        root.set_field("darkTheme", "ThemeData.dark(useMaterial3: true)")

        if config.uses_modular:
            root.add_import("package:flutter_modular/flutter_modular.dart")
            root.set_field("routerConfig", "Modular.routerConfig")
        else:
            root.add_import(paths.package_uri(package, paths.SHOWCASE))
            root.set_field("home", "const FlutterBunnyScreen()")
            if config.has_module(Module.ROUTING):
                root.add_import(paths.package_uri(package, paths.APP_ROUTER))
                root.set_field("onGenerateRoute", "AppRouter.onGenerateRoute")
        return root
