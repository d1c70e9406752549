"""Tests for the project generator and the base generators.

Covers:
- Task graph shape for different module selections
- Project structure per architecture
- Base manifest and module dependencies
- Root widget, router and app module
- Showcase screen wiring
"""

from __future__ import annotations

import pytest

from bunny.config import Architecture
from bunny.scaffolder.app_gen import default_route
from bunny.scaffolder.generator import ProjectGenerator
from bunny.scaffolder.project import ProjectTree
from bunny.scaffolder.pubspec_gen import ManifestGenerator
from bunny.scaffolder.theme_gen import ThemeGenerator


pytestmark = pytest.mark.unit


ALL_MODULES = [
    "Theme Manager",
    "Localization",
    "Push Notification",
    "Network Layer",
    "Error Handling",
    "Local Storage",
    "Routing",
]


# ---------------------------------------------------------------------------
# Task graph
# ---------------------------------------------------------------------------


class TestGraph:
    def test_no_modules(self, make_config):
        graph = ProjectGenerator(make_config()).build_graph()
        assert graph.names == [
            "structure",
            "manifest",
            "app",
            "main",
            "generate:observability",
            "generate:showcase",
            "integrate:observability",
        ]

    def test_integrators_follow_generators_and_main(self, make_config):
        graph = ProjectGenerator(make_config(modules=ALL_MODULES)).build_graph()
        assert graph.dependencies("integrate:theme") == ("app", "main", "generate:theme")
        assert graph.dependencies("integrate:localization") == (
            "app",
            "main",
            "generate:localization",
            "integrate:theme",
            "integrate:network",
        )
        order = graph.order()
        assert order.index("integrate:localization") < order.index("integrate:push_notification")

    def test_localization_without_theme(self, make_config):
        graph = ProjectGenerator(make_config(modules=["Localization"])).build_graph()
        assert "integrate:theme" not in graph.dependencies("integrate:localization")

    def test_redux_generator_only_for_redux(self, make_config):
        assert "generate:redux" not in ProjectGenerator(make_config()).build_graph()
        redux = ProjectGenerator(make_config(state_management="Redux")).build_graph()
        assert "generate:redux" in redux

    def test_compose_records_result(self, compose, make_config):
        project = compose(make_config(modules=ALL_MODULES))
        assert project.result.success
        assert project.result.warnings == []
        assert project.result.duration >= 0


# ---------------------------------------------------------------------------
# Project structure
# ---------------------------------------------------------------------------


class TestStructure:
    def test_clean(self, compose, make_config):
        project = compose(make_config(features=["User Profile"]))
        dirs = project.tree.directories
        assert "lib/core/di" in dirs
        assert "lib/features/user_profile/domain/usecases" in dirs
        assert "lib/features/user_profile/presentation/pages/user_profile_page.dart" in project.files
        assert "lib/core/di/injection.dart" in project.files
        assert project.text(".env").startswith("API_BASE_URL=")

    def test_mvvm(self, compose, make_config):
        project = compose(make_config(architecture="MVVM", features=["Home"]))
        assert "lib/features/home/viewmodels" in project.tree.directories
        assert "lib/features/home/views/home_page.dart" in project.files
        assert "setupLocator" in project.text("lib/app/app.locator.dart")
        assert "await setupLocator();" in project.main
        assert ".env" not in project.files

    def test_mvc(self, compose, make_config):
        project = compose(make_config(architecture="MVC", features=["Home"]))
        assert "lib/features/home/controllers" in project.tree.directories
        assert "lib/core/di/injection.dart" not in project.files

    def test_feature_driven_modules(self, compose, make_config):
        project = compose(make_config(architecture="Feature-Driven", features=["Home", "Settings"]))
        assert "lib/features/home/home_module.dart" in project.files
        assert "class SettingsModule extends Module" in project.text(
            "lib/features/settings/settings_module.dart"
        )

    def test_assets_directories(self, compose, make_config):
        project = compose(make_config())
        assert {"assets/images", "assets/icons", "assets/fonts", "test"} <= project.tree.directories


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------


class TestManifest:
    def test_no_modules_keeps_base_manifest(self, compose, make_config):
        config = make_config(state_management="Bloc")
        project = compose(config)
        assert project.pubspec == ManifestGenerator(config).build().render()

    def test_state_and_architecture_dependencies(self, make_config):
        manifest = ManifestGenerator(
            make_config(state_management="Riverpod", architecture="Feature-Driven")
        ).build()
        assert manifest.has_dependency("flutter_riverpod")
        assert manifest.has_dependency("flutter_modular")
        assert manifest.has_dependency("riverpod_generator", dev=True)
        assert not manifest.has_dependency("dartz")

    def test_feature_dependencies(self, make_config):
        manifest = ManifestGenerator(make_config(features=["Dashboard"])).build()
        assert manifest.has_dependency("fl_chart")

    def test_clean_declares_env_asset(self, make_config):
        assert ".env" in ManifestGenerator(make_config()).build().flutter["assets"]

    def test_module_dependencies(self, compose, make_config):
        project = compose(make_config(architecture="MVC", modules=ALL_MODULES))
        manifest = project.tree.manifest
        for name in (
            "shared_preferences",
            "flutter_localizations",
            "intl",
            "firebase_messaging",
            "dio",
            "equatable",
            "hive_flutter",
        ):
            assert manifest.has_dependency(name), name
        assert manifest.has_dependency("hive_generator", dev=True)
        assert not manifest.has_dependency("dartz")
        assert manifest.flutter["generate"] is True

    def test_error_handling_clean_adds_either_helpers(self, compose, make_config):
        project = compose(make_config(modules=["Error Handling"]))
        assert project.tree.manifest.has_dependency("dartz")
        assert "lib/core/error/either_extensions.dart" in project.files

    def test_missing_manifest_warns(self, make_config, renderer, registry):
        tree = ProjectTree()
        ThemeGenerator(make_config(modules=["Theme Manager"]), renderer, registry).generate(tree)
        assert tree.warnings == ["pubspec.yaml not found; skipping theme dependencies"]
        assert "lib/core/design_system/theme_extension/theme_manager.dart" in tree.files


# ---------------------------------------------------------------------------
# Module files
# ---------------------------------------------------------------------------


class TestModuleFiles:
    def test_no_modules_means_no_module_files(self, compose, make_config):
        project = compose(make_config())
        for prefix in ("lib/core/design_system", "lib/core/localization", "lib/core/network"):
            assert not any(path.startswith(prefix) for path in project.files)

    def test_variant_recorded(self, compose, make_config):
        project = compose(make_config(state_management="GetX", modules=["Theme Manager"]))
        manager = project.files["lib/core/design_system/theme_extension/theme_manager.dart"]
        assert manager.variant == "theme:GetX"
        assert "class ThemeController extends GetxController" in manager.content

    def test_localization_bundles(self, compose, make_config):
        project = compose(make_config(modules=["Localization"]))
        assert '"welcome": "Bienvenido"' in project.text("lib/core/localization/l10n/app_es.arb")
        assert "arb-dir: lib/core/localization/l10n" in project.text("l10n.yaml")

    def test_notification_channel_uses_application_id(self, compose, make_config):
        project = compose(
            make_config(bundle_identifier="com.acme_co.shop", modules=["Push Notification"])
        )
        service = project.text("lib/core/notifications/services/local_notification_service.dart")
        assert "'com.acmeco.shop.default'," in service

    def test_redux_slices(self, compose, make_config):
        project = compose(
            make_config(state_management="Redux", modules=["Theme Manager", "Localization"])
        )
        state = project.text("lib/core/redux/app_state.dart")
        assert "themeState" in state
        assert "localeState" in state


# ---------------------------------------------------------------------------
# App, router, module
# ---------------------------------------------------------------------------


class TestApp:
    @pytest.mark.parametrize(
        "slugs, expected",
        [
            (["home", "dashboard"], "dashboard"),
            (["home", "authentication"], "authentication"),
            (["home"], "home"),
            (["settings"], None),
        ],
    )
    def test_default_route_priority(self, slugs, expected):
        assert default_route(slugs) == expected

    def test_home_is_showcase(self, compose, make_config):
        project = compose(make_config())
        assert "home: const FlutterBunnyScreen()," in project.app
        assert "theme: ThemeData.light(useMaterial3: true)," in project.app
        assert "title: 'Demo App'," in project.app

    def test_routing_module_router(self, compose, make_config):
        project = compose(make_config(modules=["Routing"], features=["Home", "Dashboard"]))
        router = project.text("lib/app/app_router.dart")
        assert "case initial:\n        return MaterialPageRoute(builder: (_) => const DashboardPage());" in router
        assert "static const String home = '/home';" in router
        assert "onGenerateRoute: AppRouter.onGenerateRoute," in project.app

    def test_router_placeholder_without_priority_feature(self, compose, make_config):
        project = compose(make_config(modules=["Routing"], features=["Settings"]))
        assert "Text('Welcome')" in project.text("lib/app/app_router.dart")

    def test_feature_driven_module(self, compose, make_config):
        project = compose(
            make_config(architecture="Feature-Driven", features=["Home", "Authentication"])
        )
        module = project.text("lib/app/app_module.dart")
        assert "r.module('/', module: AuthenticationModule());" in module
        assert "r.child('/bunny', child: (_) => const FlutterBunnyScreen());" in module
        assert "r.module('/home', module: HomeModule());" in module
        assert "MaterialApp.router(" in project.app
        assert "routerConfig: Modular.routerConfig," in project.app
        assert "ModularApp(" in project.main
        assert project.generator.config.architecture is Architecture.FEATURE_DRIVEN


class TestShowcase:
    def test_toggle_uses_selected_holder(self, compose, make_config):
        project = compose(make_config(state_management="Provider", modules=["Theme Manager"]))
        screen = project.text("lib/app/app_flutter_bunny.dart")
        assert "context.read<ThemeProvider>().toggleTheme();" in screen
        assert "ThemeCubit" not in screen

    def test_riverpod_screen_is_consumer(self, compose, make_config):
        project = compose(make_config(state_management="Riverpod", modules=["Localization"]))
        screen = project.text("lib/app/app_flutter_bunny.dart")
        assert "extends ConsumerWidget" in screen
        assert "ref.read(localeProvider.notifier).setLocale(locale);" in screen

    def test_no_modules_no_toggle(self, compose, make_config):
        screen = compose(make_config()).text("lib/app/app_flutter_bunny.dart")
        assert "toggleTheme" not in screen
        assert "LanguageSelector" not in screen
