"""Tests for DependencyManifest (pubspec.yaml model)."""

from __future__ import annotations

import pytest
import yaml

from bunny.scaffolder.manifest import DependencyManifest


pytestmark = pytest.mark.unit


@pytest.fixture
def manifest() -> DependencyManifest:
    return DependencyManifest(name="demo_app", description="Demo")


class TestDependencies:
    def test_defaults(self, manifest):
        assert manifest.dependencies == {"flutter": {"sdk": "flutter"}}
        assert manifest.dev_dependencies == {"flutter_test": {"sdk": "flutter"}}
        assert manifest.flutter == {"uses-material-design": True}

    def test_add_is_idempotent(self, manifest):
        assert manifest.add_dependency("dio", "^5.3.3")
        assert not manifest.add_dependency("dio", "^4.0.0")
        assert manifest.dependencies["dio"] == "^5.3.3"

    def test_prefix_name_is_a_different_package(self, manifest):
        manifest.add_dependency("flutter_bloc", "^8.1.3")
        assert manifest.add_dependency("bloc", "^8.1.2")
        assert manifest.has_dependency("bloc")

    def test_dev_dependencies_are_separate(self, manifest):
        assert manifest.add_dependency("build_runner", "^2.4.6", dev=True)
        assert manifest.has_dependency("build_runner", dev=True)
        assert not manifest.has_dependency("build_runner")

    def test_add_dependencies_returns_added(self, manifest):
        manifest.add_dependency("intl", "^0.19.0")
        assert manifest.add_dependencies({"intl": "^0.18.0", "dio": "^5.3.3"}) == ["dio"]


class TestFlutterSection:
    def test_assets_deduplicated(self, manifest):
        assert manifest.add_asset("assets/images/")
        assert not manifest.add_asset("assets/images/")
        assert manifest.flutter["assets"] == ["assets/images/"]

    def test_set_option(self, manifest):
        manifest.set_flutter_option("generate", True)
        assert manifest.flutter["generate"] is True


class TestSerialisation:
    def test_render_keeps_order(self, manifest):
        manifest.add_dependency("dio", "^5.3.3")
        rendered = manifest.render()
        data = yaml.safe_load(rendered)
        assert list(data) == [
            "name",
            "description",
            "publish_to",
            "version",
            "environment",
            "dependencies",
            "dev_dependencies",
            "flutter",
        ]
        assert list(data["dependencies"]) == ["flutter", "dio"]
        assert data["environment"] == {"sdk": "^3.6.0"}

    def test_parse_round_trip_keeps_extra_keys(self):
        text = (
            "name: shop\n"
            "version: 2.0.0\n"
            "dependencies:\n"
            "  http: ^1.1.0\n"
            "flutter_launcher_icons:\n"
            "  android: true\n"
        )
        parsed = DependencyManifest.parse(text)
        assert parsed.name == "shop"
        assert parsed.version == "2.0.0"
        assert parsed.dependencies == {"http": "^1.1.0"}
        assert parsed.extra == {"flutter_launcher_icons": {"android": True}}

    def test_parse_requires_name(self):
        with pytest.raises(ValueError):
            DependencyManifest.parse("dependencies: {}\n")

    def test_parse_empty_sections(self):
        parsed = DependencyManifest.parse(
            "name: demo_app\ndependencies:\ndev_dependencies: []\nflutter:\n  assets:\n"
        )
        assert parsed.dependencies == {}
        assert parsed.dev_dependencies == {}
        assert parsed.add_asset("assets/images/")
        assert parsed.flutter["assets"] == ["assets/images/"]


class TestMerge:
    def test_existing_entries_win(self, manifest):
        existing = DependencyManifest.parse(
            "name: demo_app\n"
            "dependencies:\n"
            "  dio: ^4.0.0\n"
            "  http: ^1.1.0\n"
            "flutter:\n"
            "  assets:\n"
            "    - assets/fonts/\n"
        )
        manifest.add_dependency("dio", "^5.3.3")
        manifest.add_asset("assets/images/")
        added = existing.merge(manifest)
        assert "dio" not in added
        assert existing.dependencies["dio"] == "^4.0.0"
        assert existing.dependencies["http"] == "^1.1.0"
        assert existing.dependencies["flutter"] == {"sdk": "flutter"}
        assert existing.flutter["assets"] == ["assets/fonts/", "assets/images/"]
        assert existing.flutter["uses-material-design"] is True
