"""Cross-file integration of modules into the shared sources.

Each integrator wires one module into ``lib/main.dart`` and the root widget.
Wiring happens in four ordered stages:

1. import injection,
2. initialization statements inside ``main()``,
3. structural wrapping (provider registration, root widget wrappers),
4. parameter threading (constructor parameters, app-constructor fields).

Every operation is keyed, so applying an integrator twice changes nothing.
A missing target file is reported and the integrator is skipped.
"""

from __future__ import annotations

from typing import ClassVar

from bunny.config import Architecture, Module, ProjectConfig
from bunny.scaffolder import paths, registry
from bunny.scaffolder.project import ENTRY_POINT_PATH, ProjectTree
from bunny.scaffolder.registry import TemplateRegistry
from bunny.scaffolder.source import EntryPoint, PatchStage, RootWidget
from bunny.scaffolder.wiring import Wiring
from bunny.utils import print_info


def apply_wiring(
    wiring: Wiring,
    package: str,
    entry: EntryPoint,
    root: RootWidget | None = None,
) -> None:
    """Apply *wiring* to the entry point and, if given, the root widget."""
    # 1. Imports
    entry.add_imports(wiring.entry_imports(package))
    entry.advance(PatchStage.IMPORTS_PATCHED)
    if root is not None:
        root.add_imports(wiring.root_imports(package))
        root.advance(PatchStage.IMPORTS_PATCHED)

    # 2. Initialization
    for key, statement in wiring.setup().items():
        entry.add_setup(key, statement)

    # 3. Wrappers
    for key, provider in wiring.providers().items():
        entry.add_provider(key, provider)
    for key, value in wiring.scope_args().items():
        entry.add_scope_arg(key, value)
    entry.advance(PatchStage.WRAPPER_ESTABLISHED)
    if root is not None:
        for key, wrapper in wiring.wrappers().items():
            root.add_wrapper(key, wrapper)
        root.advance(PatchStage.WRAPPER_ESTABLISHED)

    # 4. Parameter threading
    for key, statement in wiring.root_locals().items():
        entry.root.add_local(key, statement)
    for name, value in wiring.root_args().items():
        entry.root.set_arg(name, value)
    entry.advance(PatchStage.FIELDS_THREADED)
    if root is not None:
        for param in wiring.params():
            root.add_param(param)
        for key, declaration in wiring.state_fields().items():
            root.add_state_field(key, declaration)
        for key, statement in wiring.init_state().items():
            root.add_init_state(key, statement)
        for key, statement in wiring.dispose().items():
            root.add_dispose(key, statement)
        for key, code in wiring.methods().items():
            root.add_method(key, code)
        for name, value in wiring.fields().items():
            root.set_field(name, value)
        root.advance(PatchStage.FIELDS_THREADED)


# ---------------------------------------------------------------------------
# Integrators
# ---------------------------------------------------------------------------


class Integrator:
    """Base integrator.

    ``after`` names other integrators (by component) that must run first
    when they are part of the same run.
    """

    component: ClassVar[str]
    module: ClassVar[Module | None] = None
    after: ClassVar[tuple[str, ...]] = ()
    needs_root: ClassVar[bool] = True

    def __init__(self, config: ProjectConfig, registry: TemplateRegistry) -> None:
        self.config = config
        self.registry = registry

    @property
    def task_name(self) -> str:
        return f"integrate:{self.component}"

    def is_active(self) -> bool:
        return self.module is None or self.config.has_module(self.module)

    def integrate(self, tree: ProjectTree) -> None:
        entry = tree.entry_point()
        if entry is None:
            tree.warn(f"{ENTRY_POINT_PATH} not found; skipping {self.component} integration")
            return
        root = tree.root_widget()
        if root is None and self.needs_root:
            tree.warn(
                f"{self.config.root_widget_path} not found; "
                f"skipping {self.component} integration"
            )
            return
        print_info(f"  [cyan]>[/cyan] Integrating {self.component.replace('_', ' ')}")
        self.apply(tree, entry, root)

    def apply(self, tree: ProjectTree, entry: EntryPoint, root: RootWidget | None) -> None:
        raise NotImplementedError


class ThemeIntegrator(Integrator):
    component = registry.THEME
    module = Module.THEME_MANAGER

    def apply(self, tree: ProjectTree, entry: EntryPoint, root: RootWidget | None) -> None:
        wiring = self.registry.theme(self.config.state_management)
        apply_wiring(wiring, self.config.project_name, entry, root)


class LocalizationIntegrator(Integrator):
    component = registry.LOCALIZATION
    module = Module.LOCALIZATION
    after = (registry.THEME, registry.NETWORK)

    def apply(self, tree: ProjectTree, entry: EntryPoint, root: RootWidget | None) -> None:
        wiring = self.registry.locale(self.config.state_management)
        apply_wiring(wiring, self.config.project_name, entry, root)


class ObservabilityIntegrator(Integrator):
    component = registry.OBSERVABILITY
    needs_root = False

    def apply(self, tree: ProjectTree, entry: EntryPoint, root: RootWidget | None) -> None:
        wiring = self.registry.observability(self.config.state_management)
        apply_wiring(wiring, self.config.project_name, entry)


class NetworkIntegrator(Integrator):
    """Creates the connectivity services in ``main()``.

    For Clean Architecture it also registers the network module in
    ``core/di/injection.dart``.
    """

    component = registry.NETWORK
    module = Module.NETWORK_LAYER
    needs_root = False

    INJECTION_ANCHOR = "Future<void> configureDependencies() async {"

    def apply(self, tree: ProjectTree, entry: EntryPoint, root: RootWidget | None) -> None:
        package = self.config.project_name
        entry.add_imports(
            [
                "package:internet_connection_checker/internet_connection_checker.dart",
                paths.package_uri(package, paths.CONNECTIVITY_SERVICE),
                paths.package_uri(package, paths.NETWORK_INFO),
            ]
        )
        entry.advance(PatchStage.IMPORTS_PATCHED)
        entry.add_setup("connectivity", "final connectivityService = ConnectivityService();")
        entry.add_setup(
            "network-info", "final networkInfo = NetworkInfoImpl(InternetConnectionChecker());"
        )
        if self.config.architecture is Architecture.CLEAN:
            self._register_dependencies(tree)

    def _register_dependencies(self, tree: ProjectTree) -> None:
        path = paths.lib(paths.DI_INJECTION)
        injection = tree.text(path)
        if injection is None:
            tree.warn(f"{path} not found; network dependencies not registered")
            return
        injection.inject_imports(
            [paths.package_uri(self.config.project_name, paths.DI_NETWORK_MODULE)]
        )
        if not injection.insert_after(self.INJECTION_ANCHOR, "  registerNetworkDependencies(sl);"):
            tree.warn(f"{path}: configureDependencies() not found; network module not registered")


class PushNotificationIntegrator(Integrator):
    component = registry.PUSH_NOTIFICATION
    module = Module.PUSH_NOTIFICATION
    after = (registry.LOCALIZATION,)

    def apply(self, tree: ProjectTree, entry: EntryPoint, root: RootWidget | None) -> None:
        handler = paths.package_uri(self.config.project_name, paths.NOTIFICATION_HANDLER)
        entry.add_imports(["package:firebase_core/firebase_core.dart", handler])
        entry.advance(PatchStage.IMPORTS_PATCHED)
        entry.add_setup("firebase", "await Firebase.initializeApp();")
        entry.add_setup("notifications", "await notificationHandler.initialize();")
        if root is not None and not self.config.uses_modular:
            root.add_import(handler)
            root.add_field("navigatorKey", "notificationHandler.navigatorKey")
            root.advance(PatchStage.FIELDS_THREADED)


class LocalStorageIntegrator(Integrator):
    component = registry.LOCAL_STORAGE
    module = Module.LOCAL_STORAGE
    needs_root = False

    def apply(self, tree: ProjectTree, entry: EntryPoint, root: RootWidget | None) -> None:
        entry.add_import(paths.package_uri(self.config.project_name, paths.LOCAL_STORAGE_SERVICE))
        entry.advance(PatchStage.IMPORTS_PATCHED)
        entry.add_setup("storage", "await LocalStorageService.init();")
