"""Theme Manager generation.

Renders the design system (colors, color/font extensions, ``AppTheme``) and
the theme-mode holder for the selected state management into
``lib/core/design_system/``.
"""

from __future__ import annotations

from bunny.config import Module
from bunny.scaffolder import registry
from bunny.scaffolder.base import ModuleGenerator


class ThemeGenerator(ModuleGenerator):
    """Generates the design system and theme state holder."""

    component = registry.THEME
    module = Module.THEME_MANAGER
    directories = (
        "core/design_system/app_colors",
        "core/design_system/color_extension",
        "core/design_system/font_extension",
        "core/design_system/theme_extension",
    )
    dependencies = {"shared_preferences": "^2.5.2"}
