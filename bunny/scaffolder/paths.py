"""Locations of generated files shared between generators and integrators.

Paths are relative to ``lib/``; use :func:`lib` for project-relative paths
and :func:`package_uri` for ``package:`` imports.
"""

from __future__ import annotations

from bunny.config import Architecture, StateManagement

APP = "app/app.dart"
APP_WIDGET = "app/app_widget.dart"
APP_MODULE = "app/app_module.dart"
APP_ROUTER = "app/app_router.dart"
APP_LOCATOR = "app/app.locator.dart"
SHOWCASE = "app/app_flutter_bunny.dart"

DI_INJECTION = "core/di/injection.dart"
DI_NETWORK_MODULE = "core/di/network_module.dart"

APP_COLORS = "core/design_system/app_colors/app_colors.dart"
COLOR_EXTENSION = "core/design_system/color_extension/color_extension.dart"
FONT_EXTENSION = "core/design_system/font_extension/font_extension.dart"
THEME_EXTENSION = "core/design_system/theme_extension/app_theme_extension.dart"
THEME_MANAGER = "core/design_system/theme_extension/theme_manager.dart"

LOCALIZATION_EXPORTS = "core/localization/localization.dart"
L10N = "core/localization/l10n/l10n.dart"
L10N_ARB_DIR = "core/localization/l10n"
L10N_GENERATED = "core/localization/generated/app_localizations.dart"
LANGUAGE_SELECTOR = "core/localization/widgets/language_selector.dart"
LOCALE_STATE_FILES: dict[StateManagement, str] = {
    StateManagement.BLOC: "core/localization/bloc/locale_bloc.dart",
    StateManagement.PROVIDER: "core/localization/providers/localization_provider.dart",
    StateManagement.RIVERPOD: "core/localization/providers/locale_provider.dart",
    StateManagement.GETX: "core/localization/controllers/localization_controller.dart",
    StateManagement.MOBX: "core/localization/stores/localization_store.dart",
    StateManagement.REDUX: "core/localization/redux/locale_preferences.dart",
    StateManagement.DEFAULT: "core/localization/locale_manager.dart",
}

NOTIFICATION_HANDLER = "core/notifications/notification_handler.dart"

CONNECTIVITY_SERVICE = "core/network/services/connectivity_service.dart"
NETWORK_INFO = "core/network/network_info.dart"

LOCAL_STORAGE_SERVICE = "core/storage/local_storage_service.dart"

REDUX_APP_STATE = "core/redux/app_state.dart"
REDUX_STORE = "core/redux/store/store.dart"
REDUX_ACTIONS = "core/redux/actions/app_actions.dart"

OBSERVABILITY = "core/utils/state_management_observability.dart"


def lib(path: str) -> str:
    """Project-relative path of a file under ``lib/``."""
    return f"lib/{path}"


def package_uri(package: str, path: str) -> str:
    """``package:`` import URI of a file under ``lib/``."""
    return f"package:{package}/{path}"


def locale_state_file(state: StateManagement) -> str:
    return LOCALE_STATE_FILES.get(state, LOCALE_STATE_FILES[StateManagement.DEFAULT])


def feature_dir(slug: str) -> str:
    return f"features/{slug}"


def feature_page(architecture: Architecture, slug: str) -> str:
    """Location of a feature's landing page for the given architecture."""
    if architecture in (Architecture.MVVM, Architecture.MVC):
        return f"features/{slug}/views/{slug}_page.dart"
    return f"features/{slug}/presentation/pages/{slug}_page.dart"


def feature_module(slug: str) -> str:
    return f"features/{slug}/{slug}_module.dart"
