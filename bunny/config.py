"""Flutter Bunny project configuration.

A single, immutable ``ProjectConfig`` drives every generator.  It is validated
once at construction time (Pydantic v2) and can be loaded from JSON/YAML files,
from the answers object passed by an interactive front end, or from
environment variables.
"""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from bunny.utils import feature_slug, print_warning


PROJECT_NAME_PATTERN = re.compile(r"[a-z_][a-z0-9_]*")

DEFAULT_FEATURES: tuple[str, ...] = ("Authentication",)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Architecture(str, Enum):
    """Top-level code organization of the generated app."""

    CLEAN = "Clean Architecture"
    MVVM = "MVVM"
    MVC = "MVC"
    FEATURE_DRIVEN = "Feature-Driven"

    @classmethod
    def _missing_(cls, value: object) -> "Architecture":
        return cls.CLEAN


class StateManagement(str, Enum):
    """State-management library the generated app is wired for.

    Unrecognized values degrade to ``DEFAULT`` (plain ``ChangeNotifier``
    holders, no third-party package).
    """

    BLOC = "Bloc"
    PROVIDER = "Provider"
    RIVERPOD = "Riverpod"
    GETX = "GetX"
    MOBX = "MobX"
    REDUX = "Redux"
    DEFAULT = "Default"

    @classmethod
    def _missing_(cls, value: object) -> "StateManagement":
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return cls.DEFAULT


class Module(str, Enum):
    """Optional cross-cutting capabilities."""

    THEME_MANAGER = "Theme Manager"
    LOCALIZATION = "Localization"
    PUSH_NOTIFICATION = "Push Notification"
    NETWORK_LAYER = "Network Layer"
    ROUTING = "Routing"
    ERROR_HANDLING = "Error Handling"
    LOCAL_STORAGE = "Local Storage"


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def is_valid_project_name(name: str) -> bool:
    """Return ``True`` if *name* is a legal Dart package name."""
    return bool(PROJECT_NAME_PATTERN.fullmatch(name))


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Everything the scaffolder needs to know about the app to generate.

    Instances are frozen: generators read from the config but never mutate
    it, so the same config always produces the same project.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Dart package name of the generated app")
    description: str = Field(default="A new Flutter project.")
    architecture: Architecture = Field(default=Architecture.CLEAN)
    state_management: StateManagement = Field(default=StateManagement.DEFAULT)
    features: tuple[str, ...] = Field(default=DEFAULT_FEATURES)
    modules: tuple[Module, ...] = Field(default=())
    bundle_identifier: str = Field(default="com.example.app")

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        if not is_valid_project_name(value):
            raise ValueError(
                f"Invalid project name {value!r}: use lowercase letters, digits "
                "and underscores, starting with a letter or underscore"
            )
        return value

    @field_validator("architecture", mode="before")
    @classmethod
    def _coerce_architecture(cls, value: Any) -> Architecture:
        return Architecture(value)

    @field_validator("state_management", mode="before")
    @classmethod
    def _coerce_state_management(cls, value: Any) -> StateManagement:
        return StateManagement(value)

    @field_validator("features", mode="before")
    @classmethod
    def _normalize_features(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            value = []
        if isinstance(value, str):
            value = _split_list(value)
        elif not isinstance(value, (list, tuple)):
            value = [value]
        features: list[str] = []
        for item in value:
            name = str(item).strip()
            if name and name not in features:
                features.append(name)
        return tuple(features) or DEFAULT_FEATURES

    @field_validator("modules", mode="before")
    @classmethod
    def _normalize_modules(cls, value: Any) -> tuple[Module, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = _split_list(value)
        elif not isinstance(value, (list, tuple)):
            value = [value]
        known = {m.value.lower(): m for m in Module}
        modules: list[Module] = []
        for item in value:
            raw = item.value if isinstance(item, Module) else str(item).strip()
            module = known.get(raw.lower())
            if module is None:
                print_warning(f"Unknown module {raw!r} ignored")
                continue
            if module not in modules:
                modules.append(module)
        return tuple(modules)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def has_module(self, module: Module) -> bool:
        """Return ``True`` if *module* was selected."""
        return module in self.modules

    @property
    def feature_slugs(self) -> list[str]:
        """Feature names lower-cased with spaces replaced by underscores."""
        return [feature_slug(f) for f in self.features]

    @property
    def uses_modular(self) -> bool:
        """Feature-Driven apps are composed from ``flutter_modular`` modules."""
        return self.architecture is Architecture.FEATURE_DRIVEN

    @property
    def uses_router(self) -> bool:
        """Whether ``lib/app/app_router.dart`` is generated."""
        return self.uses_modular or self.has_module(Module.ROUTING)

    @property
    def root_widget_path(self) -> str:
        """Project-relative path of the root widget file."""
        if self.uses_modular:
            return "lib/app/app_widget.dart"
        return "lib/app/app.dart"

    @property
    def root_widget_class(self) -> str:
        return "AppWidget" if self.uses_modular else "App"

    @property
    def application_id(self) -> str:
        """Bundle identifier normalized for Android/iOS application ids."""
        return self.bundle_identifier.replace("_", "").lower()

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @staticmethod
    def read_answers(path: Path) -> dict[str, Any]:
        """Read a JSON or YAML config file into a raw answers mapping.

        Nothing is validated here, so callers can merge overrides first.
        Raises ``yaml.YAMLError`` on malformed input and ``ValueError`` if
        the top level is not a mapping.
        """
        # JSON documents are valid YAML.
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")
        return data

    @classmethod
    def load(cls, path: Path) -> "ProjectConfig":
        """Load a configuration from a ``.json``, ``.yaml`` or ``.yml`` file."""
        return cls.from_answers(cls.read_answers(path))

    @classmethod
    def from_answers(cls, answers: dict[str, Any]) -> "ProjectConfig":
        """Build a config from a front-end answers mapping.

        Accepts the brick variable names (``project_name``, ``architecture``,
        ``state_management``, ``features``, ``modules``) and ignores keys it
        does not know.
        """
        known = set(cls.model_fields)
        return cls(**{k: v for k, v in answers.items() if k in known and v is not None})

    @classmethod
    def from_env(cls) -> "ProjectConfig":
        """Build a ``ProjectConfig`` from environment variables.

        Recognised variables:
            BUNNY_PROJECT_NAME (required), BUNNY_ARCHITECTURE,
            BUNNY_STATE_MANAGEMENT, BUNNY_FEATURES, BUNNY_MODULES,
            BUNNY_BUNDLE_IDENTIFIER.
        """
        kwargs: dict[str, Any] = {
            "project_name": os.environ.get("BUNNY_PROJECT_NAME", ""),
        }
        if os.environ.get("BUNNY_ARCHITECTURE"):
            kwargs["architecture"] = os.environ["BUNNY_ARCHITECTURE"]
        if os.environ.get("BUNNY_STATE_MANAGEMENT"):
            kwargs["state_management"] = os.environ["BUNNY_STATE_MANAGEMENT"]
        if os.environ.get("BUNNY_FEATURES"):
            kwargs["features"] = _split_list(os.environ["BUNNY_FEATURES"])
        if os.environ.get("BUNNY_MODULES"):
            kwargs["modules"] = _split_list(os.environ["BUNNY_MODULES"])
        if os.environ.get("BUNNY_BUNDLE_IDENTIFIER"):
            kwargs["bundle_identifier"] = os.environ["BUNNY_BUNDLE_IDENTIFIER"]
        return cls(**kwargs)

    def summary(self) -> dict[str, str]:
        """Key/value rows for the console summary table."""
        return {
            "Project": self.project_name,
            "Architecture": self.architecture.value,
            "State management": self.state_management.value,
            "Features": ", ".join(self.features),
            "Modules": ", ".join(m.value for m in self.modules) or "(none)",
        }
