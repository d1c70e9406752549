"""State-management wiring strategies.

Every state-management choice gets one concrete class per concern (app
shell, theme, locale, observability).  The :class:`TemplateRegistry` selects
them once per run; nothing else branches on the state-management value.
"""

from bunny.scaffolder.wiring.base import Wiring
from bunny.scaffolder.wiring.locale import LOCALE_WIRINGS, LocaleWiring
from bunny.scaffolder.wiring.observability import OBSERVABILITY_WIRINGS, ObservabilityWiring
from bunny.scaffolder.wiring.shell import SHELLS, AppShell
from bunny.scaffolder.wiring.theme import THEME_WIRINGS, ThemeWiring

__all__ = [
    "AppShell",
    "LOCALE_WIRINGS",
    "LocaleWiring",
    "OBSERVABILITY_WIRINGS",
    "ObservabilityWiring",
    "SHELLS",
    "THEME_WIRINGS",
    "ThemeWiring",
    "Wiring",
]
