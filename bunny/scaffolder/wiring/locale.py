"""Localization wiring, one class per state-management choice."""

from __future__ import annotations

from typing import ClassVar

from bunny.config import StateManagement
from bunny.scaffolder import paths
from bunny.scaffolder.source import CtorParam, Provider, Wrapper
from bunny.scaffolder.wiring.base import Wiring

_LOCALE_PARAM = CtorParam("locale", "Locale?")


class LocaleWiring(Wiring):
    """Adds the generated delegates and the selected locale to the app."""

    locale_expression: ClassVar[str] = "null"
    current_locale_expression: ClassVar[str] = "Localizations.localeOf(context)"
    change_statement: ClassVar[str] = ""

    def state_file(self) -> str:
        return paths.locale_state_file(self.state)

    def entry_imports(self, package: str) -> list[str]:
        return [paths.package_uri(package, self.state_file())]

    def root_imports(self, package: str) -> list[str]:
        return [
            paths.package_uri(package, paths.L10N_GENERATED),
            paths.package_uri(package, self.state_file()),
        ]

    def fields(self) -> dict[str, str]:
        return {
            "locale": self.locale_expression,
            "supportedLocales": "AppLocalizations.supportedLocales",
            "localizationsDelegates": "AppLocalizations.localizationsDelegates",
        }

    def showcase_imports(self, package: str) -> list[str]:
        return [
            paths.package_uri(package, self.state_file()),
            paths.package_uri(package, paths.LANGUAGE_SELECTOR),
        ]


class BlocLocaleWiring(LocaleWiring):
    state = StateManagement.BLOC
    locale_expression = "localeState.locale"
    current_locale_expression = "context.watch<LocaleBloc>().state.locale"
    change_statement = "context.read<LocaleBloc>().add(ChangeLocale(locale));"

    def providers(self) -> dict[str, Provider]:
        return {"locale": Provider("BlocProvider", "(_) => LocaleBloc()..add(const LoadLocale())")}

    def wrappers(self) -> dict[str, Wrapper]:
        return {"locale": Wrapper("BlocBuilder<LocaleBloc, LocaleState>", "context, localeState")}


class ProviderLocaleWiring(LocaleWiring):
    state = StateManagement.PROVIDER
    locale_expression = "localizationProvider.locale"
    current_locale_expression = "context.watch<LocalizationProvider>().locale"
    change_statement = "context.read<LocalizationProvider>().setLocale(locale);"

    def providers(self) -> dict[str, Provider]:
        return {
            "locale": Provider(
                "ChangeNotifierProvider", "(_) => LocalizationProvider()..initialize()"
            ),
        }

    def wrappers(self) -> dict[str, Wrapper]:
        return {
            "locale": Wrapper(
                "Consumer<LocalizationProvider>", "context, localizationProvider, child"
            ),
        }


class RiverpodLocaleWiring(LocaleWiring):
    state = StateManagement.RIVERPOD
    locale_expression = "locale"
    current_locale_expression = "ref.watch(localeProvider)"
    change_statement = "ref.read(localeProvider.notifier).setLocale(locale);"

    def root_locals(self) -> dict[str, str]:
        return {"locale": "final locale = ref.watch(localeProvider);"}

    def root_args(self) -> dict[str, str]:
        return {"locale": "locale"}

    def params(self) -> list[CtorParam]:
        return [_LOCALE_PARAM]


class GetXLocaleWiring(LocaleWiring):
    state = StateManagement.GETX
    locale_expression = "Get.find<LocalizationController>().locale"
    current_locale_expression = "Get.find<LocalizationController>().locale"
    change_statement = "Get.find<LocalizationController>().setLocale(locale);"

    def setup(self) -> dict[str, str]:
        return {"locale": "await Get.put(LocalizationController()).initialize();"}


class MobXLocaleWiring(LocaleWiring):
    state = StateManagement.MOBX
    locale_expression = "locale"
    current_locale_expression = "localizationStore.locale"
    change_statement = "localizationStore.setLocale(locale);"

    def setup(self) -> dict[str, str]:
        return {"locale": "await localizationStore.initialize();"}

    def root_args(self) -> dict[str, str]:
        return {"locale": "localizationStore.locale"}

    def params(self) -> list[CtorParam]:
        return [_LOCALE_PARAM]


class ReduxLocaleWiring(LocaleWiring):
    state = StateManagement.REDUX
    locale_expression = "locale"
    current_locale_expression = "StoreProvider.of<AppState>(context).state.localeState.locale"
    change_statement = "StoreProvider.of<AppState>(context).dispatch(ChangeLocaleAction(locale));"

    def entry_imports(self, package: str) -> list[str]:
        return []

    def root_args(self) -> dict[str, str]:
        return {"locale": "state.localeState.locale"}

    def params(self) -> list[CtorParam]:
        return [_LOCALE_PARAM]

    def showcase_imports(self, package: str) -> list[str]:
        return [
            "package:flutter_redux/flutter_redux.dart",
            paths.package_uri(package, paths.REDUX_APP_STATE),
            paths.package_uri(package, paths.REDUX_ACTIONS),
            paths.package_uri(package, paths.LANGUAGE_SELECTOR),
        ]


class DefaultLocaleWiring(LocaleWiring):
    """A ``LocaleManager`` created in ``main()`` and handed to the root widget."""

    state = StateManagement.DEFAULT
    locale_expression = "_locale"
    current_locale_expression = "LocaleScope.of(context).locale"
    change_statement = "LocaleScope.of(context).setLocale(locale);"

    def setup(self) -> dict[str, str]:
        return {"locale": "final localeManager = LocaleManager();\nawait localeManager.initialize();"}

    def root_args(self) -> dict[str, str]:
        return {"localeManager": "localeManager"}

    def params(self) -> list[CtorParam]:
        return [CtorParam("localeManager", "LocaleManager", required=True)]

    def wrappers(self) -> dict[str, Wrapper]:
        return {"locale": Wrapper("LocaleScope", args=(("notifier", "widget.localeManager"),))}

    def state_fields(self) -> dict[str, str]:
        return {"locale": "Locale _locale = const Locale('en');"}

    def init_state(self) -> dict[str, str]:
        return {
            "locale": "_locale = widget.localeManager.locale;\n"
                      "widget.localeManager.addListener(_onLocaleChanged);",
        }

    def dispose(self) -> dict[str, str]:
        return {"locale": "widget.localeManager.removeListener(_onLocaleChanged);"}

    def methods(self) -> dict[str, str]:
        return {
            "locale": "void _onLocaleChanged() {\n"
                      "  setState(() => _locale = widget.localeManager.locale);\n"
                      "}",
        }


LOCALE_WIRINGS: dict[StateManagement, type[LocaleWiring]] = {
    StateManagement.BLOC: BlocLocaleWiring,
    StateManagement.PROVIDER: ProviderLocaleWiring,
    StateManagement.RIVERPOD: RiverpodLocaleWiring,
    StateManagement.GETX: GetXLocaleWiring,
    StateManagement.MOBX: MobXLocaleWiring,
    StateManagement.REDUX: ReduxLocaleWiring,
    StateManagement.DEFAULT: DefaultLocaleWiring,
}
