"""Network Layer generation.

Dio-based API client with logging/auth interceptors, typed responses and
exceptions, and connectivity helpers.  Clean Architecture projects also get
``core/di/network_module.dart`` for dependency registration.
"""

from __future__ import annotations

from bunny.config import Module
from bunny.scaffolder import registry
from bunny.scaffolder.base import ModuleGenerator


class NetworkLayerGenerator(ModuleGenerator):
    """Generates ``lib/core/network/``."""

    component = registry.NETWORK
    module = Module.NETWORK_LAYER
    directories = (
        "core/network",
        "core/network/interceptors",
        "core/network/services",
    )
    dependencies = {
        "dio": "^5.3.3",
        "connectivity_plus": "^6.0.0",
        "internet_connection_checker": "^1.0.0+1",
    }
