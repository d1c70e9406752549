"""Flutter Bunny command-line pipeline.

Resolves a :class:`ProjectConfig` from command-line options (or a config
file), generates the project and prints a summary.

Usage::

    python -m bunny.pipeline --project-name demo_app --architecture MVVM
    python -m bunny.pipeline --config bunny.yaml --output ./apps
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from rich.panel import Panel

from bunny.config import ProjectConfig, is_valid_project_name
from bunny.scaffolder import ProjectGenerator
from bunny.utils import (
    console,
    format_duration,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class ScaffoldPipeline:
    """Generates one project and reports on it.

    Attributes:
        config: The validated project configuration.
        output_dir: Directory the project folder is created in.
        generator: The underlying :class:`ProjectGenerator`.
    """

    def __init__(self, config: ProjectConfig, output_dir: str | Path = ".") -> None:
        self.config = config
        self.output_dir = Path(output_dir)
        self.generator = ProjectGenerator(config)

    async def run(self) -> dict[str, Any]:
        """Generate the project.

        Returns:
            A state dictionary with ``project_dir``, ``files``, ``warnings``,
            ``failed`` and a top-level ``success`` boolean.
        """
        console.print(
            Panel(
                f"[bold bright_cyan]Flutter Bunny[/bold bright_cyan]\n"
                f"Project      : {self.config.project_name}\n"
                f"Architecture : {self.config.architecture.value}\n"
                f"State        : {self.config.state_management.value}\n"
                f"Output       : {self.output_dir.resolve()}",
                title="[bold]Scaffold[/bold]",
                border_style="bright_cyan",
            )
        )

        print_step_header("Generating")
        project_dir = await self.generator.generate(self.output_dir)
        result = self.generator.result
        assert result is not None

        state: dict[str, Any] = {
            "project_dir": str(project_dir),
            "files": len(result.written),
            "warnings": list(result.warnings),
            "failed": dict(result.graph.failed),
            "success": result.success,
        }
        self._print_summary(state, result.duration)
        return state

    def _print_summary(self, state: dict[str, Any], duration: float) -> None:
        console.print()
        rows = self.config.summary()
        rows["Files written"] = str(state["files"])
        rows["Warnings"] = str(len(state["warnings"]))
        rows["Duration"] = format_duration(duration)
        print_summary_table(rows, title="Project Summary")

        for name, error in state["failed"].items():
            print_error(f"{name}: {error}")
        if state["success"]:
            print_success(f"Project created at {state['project_dir']}")
        else:
            print_warning(f"Project created at {state['project_dir']} with errors")


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_config(args: Any) -> ProjectConfig:
    """Merge a config file (if given) with command-line overrides."""
    answers: dict[str, Any] = {}
    if args.config:
        answers.update(ProjectConfig.read_answers(Path(args.config)))
    overrides = {
        "project_name": args.project_name,
        "architecture": args.architecture,
        "state_management": args.state_management,
        "features": args.features,
        "modules": args.modules,
        "bundle_identifier": args.bundle_identifier,
    }
    answers.update({k: v for k, v in overrides.items() if v is not None})
    return ProjectConfig.from_answers(answers)


def main() -> None:
    """CLI entry point for ``python -m bunny.pipeline``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Flutter Bunny -- Flutter project scaffolding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m bunny.pipeline --project-name demo_app\n"
            "  python -m bunny.pipeline --project-name shop --architecture MVVM \\\n"
            "      --state-management Provider --modules 'Theme Manager,Localization'\n"
            "  python -m bunny.pipeline --config bunny.yaml -o ./apps\n"
        ),
    )
    parser.add_argument("--project-name", default=None, help="Dart package name of the app")
    parser.add_argument(
        "--architecture",
        default=None,
        help="Clean Architecture, MVVM, MVC or Feature-Driven (default: Clean Architecture)",
    )
    parser.add_argument(
        "--state-management",
        default=None,
        help="Bloc, Provider, Riverpod, GetX, MobX, Redux or Default (default: Default)",
    )
    parser.add_argument("--features", default=None, help="Comma-separated feature names")
    parser.add_argument("--modules", default=None, help="Comma-separated module names")
    parser.add_argument("--bundle-identifier", default=None, help="e.g. com.example.app")
    parser.add_argument("--config", default=None, help="JSON or YAML config file")
    parser.add_argument(
        "--output", "-o",
        default=".",
        help="Directory the project folder is created in (default: .)",
    )

    args = parser.parse_args()

    if args.config and not Path(args.config).exists():
        console.print(f"[bold red]Error:[/bold red] Config file not found: {args.config}")
        sys.exit(1)
    if args.project_name is not None and not is_valid_project_name(args.project_name):
        console.print(
            f"[bold red]Error:[/bold red] Invalid project name {args.project_name!r}: "
            "use lowercase letters, digits and underscores"
        )
        sys.exit(1)

    try:
        config = build_config(args)
    except ValidationError as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid configuration: {exc}")
        sys.exit(1)
    except (yaml.YAMLError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] Could not read config file: {exc}")
        sys.exit(1)

    pipeline = ScaffoldPipeline(config, args.output)
    asyncio.run(pipeline.run())


if __name__ == "__main__":
    main()
