"""Structured model of the generated ``pubspec.yaml``.

Generators add dependencies through :meth:`DependencyManifest.add_dependency`,
which checks the parsed key rather than searching the file text, so adding
the same package twice (or a package that is already a prefix of another
one) is always a no-op.
"""

from __future__ import annotations

from typing import Any

import yaml

_SDK_FLUTTER: dict[str, str] = {"sdk": "flutter"}

_KNOWN_KEYS = (
    "name",
    "description",
    "publish_to",
    "version",
    "environment",
    "dependencies",
    "dev_dependencies",
    "flutter",
)


def _mapping(value: Any) -> dict[str, Any]:
    """Sections left empty or hand-edited into a non-mapping read as empty."""
    return value if isinstance(value, dict) else {}


class DependencyManifest:
    """The package manifest of the generated app."""

    def __init__(
        self,
        name: str,
        description: str = "A new Flutter project.",
        version: str = "1.0.0+1",
        sdk: str = "^3.6.0",
    ) -> None:
        self.name = name
        self.description = description
        self.publish_to = "none"
        self.version = version
        self.environment: dict[str, Any] = {"sdk": sdk}
        self.dependencies: dict[str, Any] = {"flutter": dict(_SDK_FLUTTER)}
        self.dev_dependencies: dict[str, Any] = {"flutter_test": dict(_SDK_FLUTTER)}
        self.flutter: dict[str, Any] = {"uses-material-design": True}
        self.extra: dict[str, Any] = {}

    # -- Dependencies --------------------------------------------------------

    def has_dependency(self, name: str, dev: bool = False) -> bool:
        section = self.dev_dependencies if dev else self.dependencies
        return name in section

    def add_dependency(self, name: str, spec: Any, dev: bool = False) -> bool:
        """Add ``name: spec`` unless *name* is already declared.

        Returns ``True`` if the dependency was added.
        """
        section = self.dev_dependencies if dev else self.dependencies
        if name in section:
            return False
        section[name] = spec
        return True

    def add_dependencies(self, deps: dict[str, Any], dev: bool = False) -> list[str]:
        return [name for name, spec in deps.items() if self.add_dependency(name, spec, dev)]

    # -- Flutter section -----------------------------------------------------

    def add_asset(self, path: str) -> bool:
        assets: list[str] = self.flutter.setdefault("assets", [])
        if path in assets:
            return False
        assets.append(path)
        return True

    def set_flutter_option(self, key: str, value: Any) -> None:
        self.flutter[key] = value

    # -- Serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "publish_to": self.publish_to,
            "version": self.version,
            "environment": self.environment,
            "dependencies": self.dependencies,
            "dev_dependencies": self.dev_dependencies,
            "flutter": self.flutter,
        }
        data.update(self.extra)
        return data

    def render(self) -> str:
        """Render the manifest as YAML, preserving insertion order."""
        return yaml.safe_dump(
            self.to_dict(),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )

    @classmethod
    def parse(cls, text: str) -> "DependencyManifest":
        """Build a manifest from existing ``pubspec.yaml`` content."""
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict) or "name" not in data:
            raise ValueError("pubspec.yaml has no 'name' entry")
        manifest = cls(name=str(data["name"]))
        manifest.description = data.get("description", manifest.description)
        manifest.publish_to = data.get("publish_to", manifest.publish_to)
        manifest.version = str(data.get("version", manifest.version))
        manifest.environment = data.get("environment") or manifest.environment
        manifest.dependencies = _mapping(data.get("dependencies"))
        manifest.dev_dependencies = _mapping(data.get("dev_dependencies"))
        manifest.flutter = _mapping(data.get("flutter"))
        if "assets" in manifest.flutter and not isinstance(manifest.flutter["assets"], list):
            manifest.flutter["assets"] = []
        manifest.extra = {k: v for k, v in data.items() if k not in _KNOWN_KEYS}
        return manifest

    def merge(self, other: "DependencyManifest") -> list[str]:
        """Fold *other*'s declarations into this manifest.

        Entries already present here win; everything missing is added.
        Returns the names of the dependencies that were added.
        """
        added = self.add_dependencies(other.dependencies)
        added += self.add_dependencies(other.dev_dependencies, dev=True)
        for key, value in other.flutter.items():
            if key == "assets":
                for asset in value:
                    self.add_asset(asset)
            else:
                self.flutter.setdefault(key, value)
        for key, value in other.extra.items():
            self.extra.setdefault(key, value)
        return added
