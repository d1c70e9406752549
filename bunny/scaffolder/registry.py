"""Template registry and variant selection.

Maps ``(component, state management)`` to the template branch that renders a
module's state-dependent files, plus shared and architecture-specific
templates, and hands out the wiring strategies for the selected state
management.  Selection is a pure function of the project configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

from bunny.config import Architecture, ProjectConfig, StateManagement
from bunny.scaffolder import paths
from bunny.scaffolder.wiring import (
    LOCALE_WIRINGS,
    OBSERVABILITY_WIRINGS,
    SHELLS,
    THEME_WIRINGS,
    AppShell,
    LocaleWiring,
    ObservabilityWiring,
    ThemeWiring,
)

# Component names
THEME = "theme"
LOCALIZATION = "localization"
PUSH_NOTIFICATION = "push_notification"
NETWORK = "network"
ERROR_HANDLING = "error_handling"
LOCAL_STORAGE = "local_storage"
REDUX = "redux"
OBSERVABILITY = "observability"
SHOWCASE = "showcase"

_STATE_SUFFIX: dict[StateManagement, str] = {
    StateManagement.BLOC: "bloc",
    StateManagement.PROVIDER: "provider",
    StateManagement.RIVERPOD: "riverpod",
    StateManagement.GETX: "getx",
    StateManagement.MOBX: "mobx",
    StateManagement.REDUX: "redux",
    StateManagement.DEFAULT: "default",
}


@dataclass(frozen=True)
class TemplateSpec:
    """One template and the project-relative file it renders to."""

    template: str
    output: str


class TemplateRegistry:
    """Lookup table of templates and wiring strategies."""

    def __init__(self) -> None:
        self._shared: dict[str, tuple[TemplateSpec, ...]] = {}
        self._variants: dict[tuple[str, StateManagement], tuple[TemplateSpec, ...]] = {}
        self._by_architecture: dict[tuple[str, Architecture], tuple[TemplateSpec, ...]] = {}

    # -- Registration ------------------------------------------------------

    def register_shared(self, component: str, *specs: TemplateSpec) -> None:
        self._shared[component] = self._shared.get(component, ()) + specs

    def register_variant(
        self, component: str, state: StateManagement, *specs: TemplateSpec
    ) -> None:
        self._variants[(component, state)] = self._variants.get((component, state), ()) + specs

    def register_architecture(
        self, component: str, architecture: Architecture, *specs: TemplateSpec
    ) -> None:
        key = (component, architecture)
        self._by_architecture[key] = self._by_architecture.get(key, ()) + specs

    # -- Selection ---------------------------------------------------------

    def components(self) -> list[str]:
        names = list(self._shared)
        for component, _ in [*self._variants, *self._by_architecture]:
            if component not in names:
                names.append(component)
        return names

    def has_variants(self, component: str) -> bool:
        return any(c == component for c, _ in self._variants)

    def shared(self, component: str) -> tuple[TemplateSpec, ...]:
        return self._shared.get(component, ())

    def select(self, component: str, state: StateManagement) -> tuple[TemplateSpec, ...]:
        """Return the single variant branch for *state*.

        States without a dedicated branch fall back to the ``Default`` one.
        Components without variants return an empty tuple.
        """
        branch = self._variants.get((component, state))
        if branch is None:
            branch = self._variants.get((component, StateManagement.DEFAULT), ())
        return branch

    def for_architecture(
        self, component: str, architecture: Architecture
    ) -> tuple[TemplateSpec, ...]:
        return self._by_architecture.get((component, architecture), ())

    def files_for(self, component: str, config: ProjectConfig) -> list[TemplateSpec]:
        """Shared, state-specific and architecture-specific templates."""
        return [
            *self.shared(component),
            *self.select(component, config.state_management),
            *self.for_architecture(component, config.architecture),
        ]

    # -- Wiring strategies -------------------------------------------------

    def shell(self, state: StateManagement) -> AppShell:
        return SHELLS.get(state, SHELLS[StateManagement.DEFAULT])()

    def theme(self, state: StateManagement) -> ThemeWiring:
        return THEME_WIRINGS.get(state, THEME_WIRINGS[StateManagement.DEFAULT])()

    def locale(self, state: StateManagement) -> LocaleWiring:
        return LOCALE_WIRINGS.get(state, LOCALE_WIRINGS[StateManagement.DEFAULT])()

    def observability(self, state: StateManagement) -> ObservabilityWiring:
        return OBSERVABILITY_WIRINGS.get(state, OBSERVABILITY_WIRINGS[StateManagement.DEFAULT])()


# ---------------------------------------------------------------------------
# Default table
# ---------------------------------------------------------------------------


def _lib(template: str, path: str) -> TemplateSpec:
    return TemplateSpec(template=template, output=paths.lib(path))


def default_registry() -> TemplateRegistry:
    """The registry of every template shipped with Flutter Bunny."""
    registry = TemplateRegistry()

    # Theme Manager
    registry.register_shared(
        THEME,
        _lib("theme/app_colors.dart.j2", paths.APP_COLORS),
        _lib("theme/color_extension.dart.j2", paths.COLOR_EXTENSION),
        _lib("theme/font_extension.dart.j2", paths.FONT_EXTENSION),
        _lib("theme/app_theme_extension.dart.j2", paths.THEME_EXTENSION),
    )
    for state, suffix in _STATE_SUFFIX.items():
        registry.register_variant(
            THEME, state, _lib(f"theme/theme_manager_{suffix}.dart.j2", paths.THEME_MANAGER)
        )

    # Localization
    registry.register_shared(
        LOCALIZATION,
        _lib("localization/localization.dart.j2", paths.LOCALIZATION_EXPORTS),
        _lib("localization/l10n.dart.j2", paths.L10N),
        _lib("localization/language_selector.dart.j2", paths.LANGUAGE_SELECTOR),
        TemplateSpec("localization/l10n.yaml.j2", "l10n.yaml"),
    )
    for state, suffix in _STATE_SUFFIX.items():
        registry.register_variant(
            LOCALIZATION,
            state,
            _lib(f"localization/locale_{suffix}.dart.j2", paths.locale_state_file(state)),
        )

    # Push Notification
    registry.register_shared(
        PUSH_NOTIFICATION,
        _lib("notifications/notification_handler.dart.j2", paths.NOTIFICATION_HANDLER),
        _lib("notifications/fcm_service.dart.j2", "core/notifications/services/fcm_service.dart"),
        _lib(
            "notifications/local_notification_service.dart.j2",
            "core/notifications/services/local_notification_service.dart",
        ),
        _lib(
            "notifications/notification_model.dart.j2",
            "core/notifications/models/notification_model.dart",
        ),
        _lib(
            "notifications/notifications_page.dart.j2",
            "features/notifications/presentation/pages/notifications_page.dart",
        ),
    )

    # Network Layer
    registry.register_shared(
        NETWORK,
        _lib("network/api_client.dart.j2", "core/network/api_client.dart"),
        _lib("network/api_constants.dart.j2", "core/network/api_constants.dart"),
        _lib("network/api_response.dart.j2", "core/network/api_response.dart"),
        _lib("network/network_exception.dart.j2", "core/network/network_exception.dart"),
        _lib("network/network_info.dart.j2", paths.NETWORK_INFO),
        _lib(
            "network/logging_interceptor.dart.j2",
            "core/network/interceptors/logging_interceptor.dart",
        ),
        _lib("network/auth_interceptor.dart.j2", "core/network/interceptors/auth_interceptor.dart"),
        _lib("network/connectivity_service.dart.j2", paths.CONNECTIVITY_SERVICE),
    )
    registry.register_architecture(
        NETWORK,
        Architecture.CLEAN,
        _lib("network/network_module.dart.j2", paths.DI_NETWORK_MODULE),
    )

    # Error Handling
    registry.register_shared(
        ERROR_HANDLING,
        _lib("error/app_exception.dart.j2", "core/error/exceptions/app_exception.dart"),
        _lib("error/failure.dart.j2", "core/error/failures/failure.dart"),
        _lib("error/error_mapper.dart.j2", "core/error/error_mapper.dart"),
    )
    registry.register_architecture(
        ERROR_HANDLING,
        Architecture.CLEAN,
        _lib("error/either_extensions.dart.j2", "core/error/either_extensions.dart"),
    )

    # Local Storage
    registry.register_shared(
        LOCAL_STORAGE,
        _lib("storage/local_storage_service.dart.j2", paths.LOCAL_STORAGE_SERVICE),
    )

    # Redux (state = Redux only)
    registry.register_shared(
        REDUX,
        _lib("redux/app_state.dart.j2", paths.REDUX_APP_STATE),
        _lib("redux/app_reducer.dart.j2", "core/redux/app_reducer.dart"),
        _lib("redux/app_actions.dart.j2", paths.REDUX_ACTIONS),
        _lib("redux/middleware.dart.j2", "core/redux/middleware/middleware.dart"),
        _lib("redux/store.dart.j2", paths.REDUX_STORE),
    )

    # Observability
    for state, suffix in _STATE_SUFFIX.items():
        registry.register_variant(
            OBSERVABILITY,
            state,
            _lib(f"observability/observability_{suffix}.dart.j2", paths.OBSERVABILITY),
        )

    # Showcase home screen
    registry.register_shared(
        SHOWCASE,
        _lib("app/app_flutter_bunny.dart.j2", paths.SHOWCASE),
    )

    return registry
