"""Common shape of a state-management wiring strategy.

A wiring describes, as data, what one module needs from the two shared files
for one state-management choice: imports, initialization statements,
providers, wrappers and threaded fields.  Integrators apply a wiring in
stages (see :func:`bunny.scaffolder.integrators.apply_wiring`); the default
for every hook is "nothing to add".
"""

from __future__ import annotations

from typing import ClassVar

from bunny.config import StateManagement
from bunny.scaffolder.source import CtorParam, Provider, Wrapper


class Wiring:
    """Base class for module wirings.  Subclasses override what they need."""

    state: ClassVar[StateManagement] = StateManagement.DEFAULT

    # -- entry point -------------------------------------------------------

    def entry_imports(self, package: str) -> list[str]:
        return []

    def setup(self) -> dict[str, str]:
        return {}

    def providers(self) -> dict[str, Provider]:
        return {}

    def scope_args(self) -> dict[str, str]:
        return {}

    def root_locals(self) -> dict[str, str]:
        return {}

    def root_args(self) -> dict[str, str]:
        return {}

    # -- root widget -------------------------------------------------------

    def root_imports(self, package: str) -> list[str]:
        return []

    def wrappers(self) -> dict[str, Wrapper]:
        return {}

    def params(self) -> list[CtorParam]:
        return []

    def state_fields(self) -> dict[str, str]:
        return {}

    def init_state(self) -> dict[str, str]:
        return {}

    def dispose(self) -> dict[str, str]:
        return {}

    def methods(self) -> dict[str, str]:
        return {}

    def fields(self) -> dict[str, str]:
        return {}
