"""Unit tests for the command-line pipeline (bunny.pipeline).

Tests cover:
- build_config merging a config file with command-line overrides
- main() argument validation (exit code 1 on bad input)
- ScaffoldPipeline.run state dictionary
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import pytest

from bunny.config import Architecture, Module, StateManagement
from bunny.pipeline import ScaffoldPipeline, build_config, main


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _args(**overrides: Any) -> argparse.Namespace:
    values: dict[str, Any] = {
        "project_name": None,
        "architecture": None,
        "state_management": None,
        "features": None,
        "modules": None,
        "bundle_identifier": None,
        "config": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


# ---------------------------------------------------------------------------
# build_config
# ---------------------------------------------------------------------------


class TestBuildConfig:
    def test_options_only(self):
        config = build_config(
            _args(
                project_name="shop",
                architecture="MVC",
                modules="Theme Manager, Routing",
            )
        )
        assert config.project_name == "shop"
        assert config.architecture is Architecture.MVC
        assert config.state_management is StateManagement.DEFAULT
        assert config.modules == (Module.THEME_MANAGER, Module.ROUTING)

    def test_options_override_config_file(self, tmp_path: Path):
        path = tmp_path / "bunny.yaml"
        path.write_text(
            "project_name: from_file\n"
            "state_management: Bloc\n"
            "features:\n"
            "  - Home\n"
        )
        config = build_config(_args(config=str(path), project_name="from_cli"))
        assert config.project_name == "from_cli"
        assert config.state_management is StateManagement.BLOC
        assert config.features == ("Home",)

    def test_file_without_project_name_takes_option(self, tmp_path: Path):
        path = tmp_path / "bunny.yaml"
        path.write_text("architecture: MVVM\n")
        config = build_config(_args(config=str(path), project_name="demo_app"))
        assert config.project_name == "demo_app"
        assert config.architecture is Architecture.MVVM

    def test_json_file(self, tmp_path: Path):
        path = tmp_path / "bunny.json"
        path.write_text('{"project_name": "shop", "modules": ["Routing"]}')
        config = build_config(_args(config=str(path)))
        assert config.project_name == "shop"
        assert config.modules == (Module.ROUTING,)


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


class TestMain:
    def test_invalid_project_name_exits(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["bunny", "--project-name", "My-App"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_missing_config_file_exits(self, monkeypatch, tmp_path: Path):
        missing = tmp_path / "nope.yaml"
        monkeypatch.setattr(sys, "argv", ["bunny", "--config", str(missing)])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    @pytest.mark.parametrize("content", ["project_name: [demo\n", "- demo_app\n", "just text\n"])
    def test_unreadable_config_file_exits(self, monkeypatch, tmp_path: Path, content):
        path = tmp_path / "bunny.yaml"
        path.write_text(content)
        monkeypatch.setattr(sys, "argv", ["bunny", "--config", str(path)])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_missing_project_name_exits(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["bunny", "--architecture", "MVVM"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_generates_project(self, monkeypatch, tmp_output_dir):
        monkeypatch.setattr(
            sys,
            "argv",
            ["bunny", "--project-name", "cli_app", "--modules", "Local Storage", "-o", str(tmp_output_dir)],
        )
        main()
        assert (tmp_output_dir / "cli_app" / "lib" / "main.dart").is_file()


# ---------------------------------------------------------------------------
# ScaffoldPipeline
# ---------------------------------------------------------------------------


class TestScaffoldPipeline:
    async def test_run_returns_state(self, tmp_output_dir, make_config):
        pipeline = ScaffoldPipeline(make_config(modules=["Theme Manager"]), tmp_output_dir)
        state = await pipeline.run()
        assert state["success"] is True
        assert state["project_dir"] == str(tmp_output_dir / "demo_app")
        assert state["files"] > 0
        assert state["warnings"] == []
        assert state["failed"] == {}
