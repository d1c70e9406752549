"""State-change observability wiring."""

from __future__ import annotations

from bunny.config import StateManagement
from bunny.scaffolder import paths
from bunny.scaffolder.wiring.base import Wiring


class ObservabilityWiring(Wiring):
    """Calls ``setupStateObservability()`` before the app starts."""

    def entry_imports(self, package: str) -> list[str]:
        return [paths.package_uri(package, paths.OBSERVABILITY)]

    def setup(self) -> dict[str, str]:
        return {"observability": "setupStateObservability();"}


class BlocObservabilityWiring(ObservabilityWiring):
    state = StateManagement.BLOC

    def setup(self) -> dict[str, str]:
        return {**super().setup(), "bloc-observer": "Bloc.observer = AppBlocObserver();"}


class RiverpodObservabilityWiring(ObservabilityWiring):
    state = StateManagement.RIVERPOD

    def scope_args(self) -> dict[str, str]:
        return {"observers": "[StateObserver()]"}


OBSERVABILITY_WIRINGS: dict[StateManagement, type[ObservabilityWiring]] = {
    StateManagement.BLOC: BlocObservabilityWiring,
    StateManagement.RIVERPOD: RiverpodObservabilityWiring,
    StateManagement.DEFAULT: ObservabilityWiring,
}
