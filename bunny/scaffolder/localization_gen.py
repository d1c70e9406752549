"""Localization generation.

Produces ``l10n.yaml`` for ``flutter gen-l10n``, the English and Spanish
resource bundles, a language selector widget and the locale holder for the
selected state management.  Also switches on ``flutter.generate`` in the
manifest so the localization classes are generated on build.
"""

from __future__ import annotations

import json
from typing import Any

from bunny.config import Module
from bunny.scaffolder import paths, registry
from bunny.scaffolder.base import ModuleGenerator
from bunny.scaffolder.project import ProjectTree
from bunny.scaffolder.source import StaticSource

SUPPORTED_LOCALES: tuple[str, ...] = ("en", "es")

LOCALE_NAMES: dict[str, str] = {"en": "English", "es": "Español"}


class LocalizationGenerator(ModuleGenerator):
    """Generates the localization subtree and resource bundles."""

    component = registry.LOCALIZATION
    module = Module.LOCALIZATION
    directories = (
        "core/localization",
        "core/localization/generated",
        "core/localization/l10n",
        "core/localization/widgets",
    )
    dependencies = {
        "flutter_localizations": {"sdk": "flutter"},
        "intl": "^0.19.0",
        "shared_preferences": "^2.5.2",
    }

    def context(self) -> dict[str, Any]:
        context = super().context()
        context["supported_locales"] = list(SUPPORTED_LOCALES)
        context["locale_names"] = {code: LOCALE_NAMES[code] for code in SUPPORTED_LOCALES}
        return context

    def generate_extra(self, tree: ProjectTree, context: dict[str, Any]) -> None:
        for locale, bundle in _resource_bundles(context["title"]).items():
            path = paths.lib(f"{paths.L10N_ARB_DIR}/app_{locale}.arb")
            content = json.dumps(bundle, indent=2, ensure_ascii=False) + "\n"
            tree.add_file(StaticSource(path, content, variant=f"arb:{locale}"), owner=self.component)

    def update_flutter_section(self, tree: ProjectTree) -> None:
        assert tree.manifest is not None
        tree.manifest.set_flutter_option("generate", True)


def _resource_bundles(title: str) -> dict[str, dict[str, Any]]:
    """English template bundle plus its Spanish translation."""
    en: dict[str, Any] = {
        "@@locale": "en",
        "appTitle": title,
        "@appTitle": {"description": "The title of the application"},
        "welcome": "Welcome",
        "hello": "Hello {name}",
        "@hello": {
            "description": "Greeting with the user's name",
            "placeholders": {"name": {"type": "String"}},
        },
        "language": "Language",
        "changeLanguage": "Change language",
        "toggleTheme": "Toggle theme",
        "features": "Features",
        "notifications": "Notifications",
    }
    es: dict[str, Any] = {
        "@@locale": "es",
        "appTitle": title,
        "welcome": "Bienvenido",
        "hello": "Hola {name}",
        "language": "Idioma",
        "changeLanguage": "Cambiar idioma",
        "toggleTheme": "Cambiar tema",
        "features": "Funciones",
        "notifications": "Notificaciones",
    }
    return {"en": en, "es": es}
