"""Local Storage generation: a Hive-backed key/value service."""

from __future__ import annotations

from bunny.config import Module
from bunny.scaffolder import registry
from bunny.scaffolder.base import ModuleGenerator


class LocalStorageGenerator(ModuleGenerator):
    component = registry.LOCAL_STORAGE
    module = Module.LOCAL_STORAGE
    directories = ("core/storage",)
    dependencies = {
        "hive": "^2.2.3",
        "hive_flutter": "^1.1.0",
        "path_provider": "^2.1.1",
    }
    dev_dependencies = {"hive_generator": "^2.0.1"}
