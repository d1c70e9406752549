"""Base ``pubspec.yaml`` generation.

The base manifest depends only on architecture, state management and
features.  Module dependencies are added later by the module generators,
so a project without modules gets exactly this manifest.
"""

from __future__ import annotations

from typing import Any

from bunny.config import Architecture, ProjectConfig, StateManagement
from bunny.scaffolder.manifest import DependencyManifest
from bunny.scaffolder.project import ProjectTree
from bunny.utils import print_info

BASE_DEPENDENCIES: dict[str, Any] = {
    "cupertino_icons": "^1.0.6",
    "logger": "^2.0.2",
    "flutter_svg": "^2.0.9",
    "json_annotation": "^4.8.1",
}

BASE_DEV_DEPENDENCIES: dict[str, Any] = {
    "flutter_lints": "^3.0.0",
    "build_runner": "^2.4.6",
    "json_serializable": "^6.7.1",
}

STATE_DEPENDENCIES: dict[StateManagement, dict[str, Any]] = {
    StateManagement.BLOC: {"flutter_bloc": "^8.1.3", "bloc": "^8.1.2"},
    StateManagement.PROVIDER: {"provider": "^6.0.5"},
    StateManagement.RIVERPOD: {"flutter_riverpod": "^2.6.1"},
    StateManagement.GETX: {"get": "^4.7.2"},
    StateManagement.MOBX: {"mobx": "^2.5.0", "flutter_mobx": "^2.1.0"},
    StateManagement.REDUX: {
        "redux": "^5.0.0",
        "flutter_redux": "^0.10.0",
        "redux_thunk": "^0.4.0",
    },
    StateManagement.DEFAULT: {},
}

STATE_DEV_DEPENDENCIES: dict[StateManagement, dict[str, Any]] = {
    StateManagement.BLOC: {"bloc_test": "^9.1.4"},
    StateManagement.RIVERPOD: {"riverpod_generator": "^2.3.5"},
    StateManagement.MOBX: {"mobx_codegen": "^2.7.0"},
}

ARCHITECTURE_DEPENDENCIES: dict[Architecture, dict[str, Any]] = {
    Architecture.CLEAN: {
        "dartz": "^0.10.1",
        "injectable": "^2.3.0",
        "get_it": "^7.6.4",
        "flutter_dotenv": "^5.1.0",
    },
    Architecture.MVVM: {
        "stacked": "^3.4.1",
        "stacked_services": "^1.3.0",
        "get_it": "^7.6.4",
    },
    Architecture.MVC: {},
    Architecture.FEATURE_DRIVEN: {"flutter_modular": "^6.3.2"},
}

ARCHITECTURE_DEV_DEPENDENCIES: dict[Architecture, dict[str, Any]] = {
    Architecture.CLEAN: {"injectable_generator": "^2.4.1"},
}

FEATURE_DEPENDENCIES: dict[str, dict[str, Any]] = {
    "User Profile": {"image_picker": "^1.0.4"},
    "Dashboard": {"fl_chart": "^0.65.0"},
}

BASE_ASSETS: tuple[str, ...] = ("assets/images/", "assets/icons/")


class ManifestGenerator:
    """Builds the base dependency manifest."""

    def __init__(self, config: ProjectConfig) -> None:
        self.config = config

    def build(self) -> DependencyManifest:
        config = self.config
        manifest = DependencyManifest(name=config.project_name, description=config.description)
        manifest.add_dependencies(BASE_DEPENDENCIES)
        manifest.add_dependencies(STATE_DEPENDENCIES.get(config.state_management, {}))
        manifest.add_dependencies(ARCHITECTURE_DEPENDENCIES[config.architecture])
        for feature in config.features:
            manifest.add_dependencies(FEATURE_DEPENDENCIES.get(feature, {}))

        manifest.add_dependencies(BASE_DEV_DEPENDENCIES, dev=True)
        manifest.add_dependencies(STATE_DEV_DEPENDENCIES.get(config.state_management, {}), dev=True)
        manifest.add_dependencies(ARCHITECTURE_DEV_DEPENDENCIES.get(config.architecture, {}), dev=True)

        for asset in BASE_ASSETS:
            manifest.add_asset(asset)
        if config.architecture is Architecture.CLEAN:
            manifest.add_asset(".env")
        return manifest

    def generate(self, tree: ProjectTree) -> None:
        print_info("  [cyan]>[/cyan] Configuring pubspec.yaml")
        tree.manifest = self.build()
