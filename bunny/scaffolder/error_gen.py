"""Error Handling generation: exception and failure hierarchies plus a mapper."""

from __future__ import annotations

from typing import Any

from bunny.config import Architecture, Module
from bunny.scaffolder import registry
from bunny.scaffolder.base import ModuleGenerator


class ErrorHandlingGenerator(ModuleGenerator):
    """Generates ``lib/core/error/``.

    Clean Architecture projects also get ``Either`` helpers, which need
    ``dartz``.
    """

    component = registry.ERROR_HANDLING
    module = Module.ERROR_HANDLING
    directories = (
        "core/error",
        "core/error/exceptions",
        "core/error/failures",
    )
    dependencies = {"equatable": "^2.0.5"}

    def manifest_dependencies(self) -> tuple[dict[str, Any], dict[str, Any]]:
        deps, dev_deps = super().manifest_dependencies()
        if self.config.architecture is Architecture.CLEAN:
            deps["dartz"] = "^0.10.1"
        return deps, dev_deps
