"""Theme Manager wiring, one class per state-management choice."""

from __future__ import annotations

from typing import ClassVar

from bunny.config import StateManagement
from bunny.scaffolder import paths
from bunny.scaffolder.source import CtorParam, Provider, Wrapper
from bunny.scaffolder.wiring.base import Wiring

_THEME_MODE_PARAM = CtorParam("themeMode", "ThemeMode?")


class ThemeWiring(Wiring):
    """Puts ``AppTheme`` and the selected theme mode on the app constructor."""

    theme_mode_expression: ClassVar[str] = "ThemeMode.system"
    toggle_statement: ClassVar[str] = ""

    def entry_imports(self, package: str) -> list[str]:
        return [paths.package_uri(package, paths.THEME_MANAGER)]

    def root_imports(self, package: str) -> list[str]:
        return [
            paths.package_uri(package, paths.THEME_EXTENSION),
            paths.package_uri(package, paths.THEME_MANAGER),
        ]

    def fields(self) -> dict[str, str]:
        return {
            "theme": "AppTheme.light",
            "darkTheme": "AppTheme.dark",
            "themeMode": self.theme_mode_expression,
        }

    def showcase_imports(self, package: str) -> list[str]:
        return [paths.package_uri(package, paths.THEME_MANAGER)]


class BlocThemeWiring(ThemeWiring):
    state = StateManagement.BLOC
    theme_mode_expression = "themeState.themeMode"
    toggle_statement = "context.read<ThemeCubit>().toggleTheme();"

    def providers(self) -> dict[str, Provider]:
        return {"theme": Provider("BlocProvider", "(_) => ThemeCubit()..loadTheme()")}

    def wrappers(self) -> dict[str, Wrapper]:
        return {"theme": Wrapper("BlocBuilder<ThemeCubit, ThemeState>", "context, themeState")}


class ProviderThemeWiring(ThemeWiring):
    state = StateManagement.PROVIDER
    theme_mode_expression = "themeProvider.themeMode"
    toggle_statement = "context.read<ThemeProvider>().toggleTheme();"

    def providers(self) -> dict[str, Provider]:
        return {"theme": Provider("ChangeNotifierProvider", "(_) => ThemeProvider()..initialize()")}

    def wrappers(self) -> dict[str, Wrapper]:
        return {"theme": Wrapper("Consumer<ThemeProvider>", "context, themeProvider, child")}


class RiverpodThemeWiring(ThemeWiring):
    state = StateManagement.RIVERPOD
    theme_mode_expression = "themeMode ?? ThemeMode.system"
    toggle_statement = "ref.read(themeModeProvider.notifier).toggleTheme();"

    def root_locals(self) -> dict[str, str]:
        return {"themeMode": "final themeMode = ref.watch(flutterThemeModeProvider);"}

    def root_args(self) -> dict[str, str]:
        return {"themeMode": "themeMode"}

    def params(self) -> list[CtorParam]:
        return [_THEME_MODE_PARAM]


class GetXThemeWiring(ThemeWiring):
    state = StateManagement.GETX
    theme_mode_expression = "Get.find<ThemeController>().themeMode"
    toggle_statement = "Get.find<ThemeController>().toggleTheme();"

    def setup(self) -> dict[str, str]:
        return {"theme": "await Get.put(ThemeController()).initialize();"}


class MobXThemeWiring(ThemeWiring):
    state = StateManagement.MOBX
    theme_mode_expression = "themeMode ?? ThemeMode.system"
    toggle_statement = "themeStore.toggleTheme();"

    def setup(self) -> dict[str, str]:
        return {"theme": "await themeStore.initialize();"}

    def root_args(self) -> dict[str, str]:
        return {"themeMode": "themeStore.flutterThemeMode"}

    def params(self) -> list[CtorParam]:
        return [_THEME_MODE_PARAM]


class ReduxThemeWiring(ThemeWiring):
    state = StateManagement.REDUX
    theme_mode_expression = "themeMode ?? ThemeMode.system"
    toggle_statement = "StoreProvider.of<AppState>(context).dispatch(ToggleThemeAction());"

    def root_args(self) -> dict[str, str]:
        return {"themeMode": "state.themeState.flutterThemeMode"}

    def params(self) -> list[CtorParam]:
        return [_THEME_MODE_PARAM]

    def showcase_imports(self, package: str) -> list[str]:
        return [
            "package:flutter_redux/flutter_redux.dart",
            paths.package_uri(package, paths.REDUX_APP_STATE),
            paths.package_uri(package, paths.REDUX_ACTIONS),
        ]


class DefaultThemeWiring(ThemeWiring):
    """A ``ThemeManager`` created in ``main()`` and handed to the root widget."""

    state = StateManagement.DEFAULT
    theme_mode_expression = "_themeMode"
    toggle_statement = "ThemeScope.of(context).toggleTheme();"

    def setup(self) -> dict[str, str]:
        return {"theme": "final themeManager = ThemeManager();\nawait themeManager.initialize();"}

    def root_args(self) -> dict[str, str]:
        return {"themeManager": "themeManager"}

    def params(self) -> list[CtorParam]:
        return [CtorParam("themeManager", "ThemeManager", required=True)]

    def wrappers(self) -> dict[str, Wrapper]:
        return {"theme": Wrapper("ThemeScope", args=(("notifier", "widget.themeManager"),))}

    def state_fields(self) -> dict[str, str]:
        return {"theme": "ThemeMode _themeMode = ThemeMode.system;"}

    def init_state(self) -> dict[str, str]:
        return {
            "theme": "_themeMode = widget.themeManager.themeMode;\n"
                     "widget.themeManager.addListener(_onThemeChanged);",
        }

    def dispose(self) -> dict[str, str]:
        return {"theme": "widget.themeManager.removeListener(_onThemeChanged);"}

    def methods(self) -> dict[str, str]:
        return {
            "theme": "void _onThemeChanged() {\n"
                     "  setState(() => _themeMode = widget.themeManager.themeMode);\n"
                     "}",
        }


THEME_WIRINGS: dict[StateManagement, type[ThemeWiring]] = {
    StateManagement.BLOC: BlocThemeWiring,
    StateManagement.PROVIDER: ProviderThemeWiring,
    StateManagement.RIVERPOD: RiverpodThemeWiring,
    StateManagement.GETX: GetXThemeWiring,
    StateManagement.MOBX: MobXThemeWiring,
    StateManagement.REDUX: ReduxThemeWiring,
    StateManagement.DEFAULT: DefaultThemeWiring,
}
