"""Flutter Bunny showcase home screen.

The screen lists the selected features and, when the modules are present,
offers a theme toggle and a language selector.  The toggle and selector
call into the state holders through the same wiring strategies the
integrators use, so the screen never names a holder of another state
management library.
"""

from __future__ import annotations

from typing import Any

from bunny.config import Module
from bunny.scaffolder import registry
from bunny.scaffolder.base import ModuleGenerator


class ShowcaseGenerator(ModuleGenerator):
    component = registry.SHOWCASE
    directories = ("app",)

    def context(self) -> dict[str, Any]:
        context = super().context()
        state = self.config.state_management
        package = self.config.project_name
        shell = self.registry.shell(state)

        imports: list[str] = list(shell.screen_imports(package))

        theme_toggle = ""
        if self.config.has_module(Module.THEME_MANAGER):
            theme = self.registry.theme(state)
            imports.extend(theme.showcase_imports(package))
            theme_toggle = theme.toggle_statement

        locale_change = ""
        current_locale = ""
        if self.config.has_module(Module.LOCALIZATION):
            locale = self.registry.locale(state)
            imports.extend(locale.showcase_imports(package))
            locale_change = locale.change_statement
            current_locale = locale.current_locale_expression

        context.update(
            {
                "imports": list(dict.fromkeys(imports)),
                "screen_base": shell.screen_base,
                "build_params": shell.screen_build_params,
                "theme_toggle": theme_toggle,
                "locale_change": locale_change,
                "current_locale": current_locale,
            }
        )
        return context
