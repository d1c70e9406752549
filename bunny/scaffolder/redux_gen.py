"""Redux store generation.

Only runs when the project uses Redux.  The app state grows a theme slice
and a locale slice when the Theme Manager and Localization modules are
selected, so those modules' wirings can read ``state.themeState`` and
``state.localeState``.
"""

from __future__ import annotations

from bunny.config import StateManagement
from bunny.scaffolder import registry
from bunny.scaffolder.base import ModuleGenerator


class ReduxGenerator(ModuleGenerator):
    """Generates ``lib/core/redux/``."""

    component = registry.REDUX
    directories = (
        "core/redux",
        "core/redux/actions",
        "core/redux/middleware",
        "core/redux/store",
    )

    def is_active(self) -> bool:
        return self.config.state_management is StateManagement.REDUX
