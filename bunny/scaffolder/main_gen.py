"""``lib/main.dart`` generation.

Builds the :class:`EntryPoint` model with the architecture bootstrap
(environment + dependency injection for Clean Architecture, the service
locator for MVVM, ``ModularApp`` for Feature-Driven) and the
state-management shell.  Module integrators add to it afterwards.
"""

from __future__ import annotations

from bunny.config import Architecture, ProjectConfig
from bunny.scaffolder import paths
from bunny.scaffolder.project import ENTRY_POINT_PATH, ProjectTree
from bunny.scaffolder.registry import TemplateRegistry
from bunny.scaffolder.source import EntryPoint, Wrapper
from bunny.utils import print_info

OWNER = "main"


class EntryPointGenerator:
    """Generates the entry point model."""

    def __init__(self, config: ProjectConfig, registry: TemplateRegistry) -> None:
        self.config = config
        self.registry = registry

    def generate(self, tree: ProjectTree) -> None:
        print_info(f"  [cyan]>[/cyan] Generating {ENTRY_POINT_PATH}")
        tree.add_file(self.build(), owner=OWNER)

    def build(self) -> EntryPoint:
        config = self.config
        package = config.project_name
        entry = EntryPoint(path=ENTRY_POINT_PATH)
        entry.add_import("package:flutter/material.dart")

        if config.architecture is Architecture.CLEAN:
            entry.add_imports(
                [
                    "package:flutter_dotenv/flutter_dotenv.dart",
                    paths.package_uri(package, paths.DI_INJECTION),
                ]
            )
            entry.add_setup("dotenv", "await dotenv.load(fileName: '.env');")
            entry.add_setup("di", "await configureDependencies();")
        elif config.architecture is Architecture.MVVM:
            entry.add_import(paths.package_uri(package, paths.APP_LOCATOR))
            entry.add_setup("locator", "await setupLocator();")

        if config.uses_modular:
            entry.add_imports(
                [
                    "package:flutter_modular/flutter_modular.dart",
                    paths.package_uri(package, paths.APP_MODULE),
                    paths.package_uri(package, paths.APP_WIDGET),
                ]
            )
            entry.outer = Wrapper("ModularApp", args=(("module", "AppModule()"),))
        else:
            entry.add_import(paths.package_uri(package, paths.APP))
        entry.root.widget = config.root_widget_class

        self.registry.shell(config.state_management).configure_entry(entry, package)
        return entry
