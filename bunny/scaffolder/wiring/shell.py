"""App shells: the state-management-specific skeleton of ``main.dart`` and
the root widget.

The shell decides how registered providers are mounted (nothing, a single
provider, or a multi-provider), how constructor arguments reach the root
widget, and which app constructor the root widget builds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from bunny.config import StateManagement
from bunny.scaffolder import paths
from bunny.scaffolder.source import Wrapper, dart_call, dart_list

if TYPE_CHECKING:
    from bunny.scaffolder.source import EntryPoint, RootInvocation, RootWidget


class AppShell:
    """Default shell: no provider tree, plain constructor arguments."""

    state: ClassVar[StateManagement] = StateManagement.DEFAULT
    app_constructor: ClassVar[str] = "MaterialApp"
    stateful: ClassVar[bool] = False
    root_builder: ClassVar[Wrapper | None] = None
    screen_base: ClassVar[str] = "StatelessWidget"
    screen_build_params: ClassVar[str] = "BuildContext context"

    def entry_imports(self, package: str) -> list[str]:
        return []

    def root_imports(self, package: str) -> list[str]:
        return []

    def screen_imports(self, package: str) -> list[str]:
        """Imports the showcase screen needs to reach the state holders."""
        return self.root_imports(package)

    def setup(self) -> dict[str, str]:
        return {}

    def configure_entry(self, entry: EntryPoint, package: str) -> None:
        entry.shell = self
        entry.add_imports(self.entry_imports(package))
        for key, statement in self.setup().items():
            entry.add_setup(key, statement)

    def configure_root(self, root: RootWidget, package: str, router: bool = False) -> None:
        root.add_imports(self.root_imports(package))
        root.stateful = self.stateful
        root.app_constructor = f"{self.app_constructor}.router" if router else self.app_constructor

    # -- runApp ----------------------------------------------------------

    def run_app_expression(self, entry: EntryPoint) -> str:
        """The expression passed to ``runApp``."""
        child = self.root_expression(entry.root)
        if entry.outer is not None:
            child = entry.outer.wrap(child)
        return self.wrap_providers(entry, child)

    def root_expression(self, root: RootInvocation) -> str:
        if not root.args:
            return f"const {root.widget}()"
        call = dart_call(root.widget, root.args.items())
        if self.root_builder is None:
            return call
        return self.root_builder.wrap(call, root.locals.values())

    def wrap_providers(self, entry: EntryPoint, child: str) -> str:
        return child


class DefaultShell(AppShell):
    """No state-management package: the root widget owns its state."""

    stateful = True


class _ProviderTreeShell(AppShell):
    """Shells that mount ``XProvider`` / ``MultiXProvider`` above the app."""

    multi_provider: ClassVar[str]

    def wrap_providers(self, entry: EntryPoint, child: str) -> str:
        providers = list(entry.providers.values())
        if not providers:
            return child
        if len(providers) == 1:
            provider = providers[0]
            return dart_call(provider.type, [("create", provider.create), ("child", child)])
        return dart_call(
            self.multi_provider,
            [("providers", dart_list(p.render() for p in providers)), ("child", child)],
        )


class BlocShell(_ProviderTreeShell):
    state = StateManagement.BLOC
    multi_provider = "MultiBlocProvider"

    def entry_imports(self, package: str) -> list[str]:
        return ["package:flutter_bloc/flutter_bloc.dart"]

    def root_imports(self, package: str) -> list[str]:
        return ["package:flutter_bloc/flutter_bloc.dart"]


class ProviderShell(_ProviderTreeShell):
    state = StateManagement.PROVIDER
    multi_provider = "MultiProvider"

    def entry_imports(self, package: str) -> list[str]:
        return ["package:provider/provider.dart"]

    def root_imports(self, package: str) -> list[str]:
        return ["package:provider/provider.dart"]


class RiverpodShell(AppShell):
    state = StateManagement.RIVERPOD
    root_builder = Wrapper("Consumer", builder_params="context, ref, child")
    screen_base = "ConsumerWidget"
    screen_build_params = "BuildContext context, WidgetRef ref"

    def entry_imports(self, package: str) -> list[str]:
        return ["package:flutter_riverpod/flutter_riverpod.dart"]

    def screen_imports(self, package: str) -> list[str]:
        return ["package:flutter_riverpod/flutter_riverpod.dart"]

    def wrap_providers(self, entry: EntryPoint, child: str) -> str:
        return dart_call("ProviderScope", [*entry.scope_args.items(), ("child", child)])


class GetXShell(AppShell):
    state = StateManagement.GETX
    app_constructor = "GetMaterialApp"

    def entry_imports(self, package: str) -> list[str]:
        return ["package:get/get.dart"]

    def root_imports(self, package: str) -> list[str]:
        return ["package:get/get.dart"]


class MobXShell(AppShell):
    state = StateManagement.MOBX
    root_builder = Wrapper("Observer", builder_params="_")

    def entry_imports(self, package: str) -> list[str]:
        return ["package:flutter_mobx/flutter_mobx.dart"]

    def screen_imports(self, package: str) -> list[str]:
        return ["package:flutter_mobx/flutter_mobx.dart"]


class ReduxShell(AppShell):
    state = StateManagement.REDUX
    root_builder = Wrapper(
        "StoreConnector<AppState, AppState>",
        builder_params="context, state",
        args=(("converter", "(store) => store.state"),),
    )

    def entry_imports(self, package: str) -> list[str]:
        return [
            "package:flutter_redux/flutter_redux.dart",
            paths.package_uri(package, paths.REDUX_APP_STATE),
            paths.package_uri(package, paths.REDUX_STORE),
        ]

    def setup(self) -> dict[str, str]:
        return {"redux-store": "final store = createStore();"}

    def wrap_providers(self, entry: EntryPoint, child: str) -> str:
        return dart_call("StoreProvider<AppState>", [("store", "store"), ("child", child)])


SHELLS: dict[StateManagement, type[AppShell]] = {
    StateManagement.BLOC: BlocShell,
    StateManagement.PROVIDER: ProviderShell,
    StateManagement.RIVERPOD: RiverpodShell,
    StateManagement.GETX: GetXShell,
    StateManagement.MOBX: MobXShell,
    StateManagement.REDUX: ReduxShell,
    StateManagement.DEFAULT: DefaultShell,
}
