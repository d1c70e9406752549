"""State-change observability generation.

Renders ``lib/core/utils/state_management_observability.dart`` in the
flavour of the selected state management (Bloc observer, Riverpod provider
observer, Redux logging middleware, or a plain debug logger).
"""

from __future__ import annotations

from bunny.scaffolder import registry
from bunny.scaffolder.base import ModuleGenerator


class ObservabilityGenerator(ModuleGenerator):
    component = registry.OBSERVABILITY
    directories = ("core/utils",)
