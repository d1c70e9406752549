"""Flutter Bunny scaffolder -- generates complete Flutter project trees.

The scaffolder composes a project in memory from a ``ProjectConfig`` (the
architecture, state management, features and modules) and writes it to disk
in one pass: directory skeleton, ``pubspec.yaml``, ``lib/main.dart``, the
root widget and every selected module wired into both.

Quick usage::

    from bunny.config import ProjectConfig
    from bunny.scaffolder import ProjectGenerator

    config = ProjectConfig(project_name="demo_app", modules=["Theme Manager"])
    generator = ProjectGenerator(config)
    project_path = await generator.generate("/tmp/output")
"""

from bunny.scaffolder.generator import GenerationResult, ProjectGenerator
from bunny.scaffolder.project import ProjectTree
from bunny.scaffolder.registry import TemplateRegistry, default_registry
from bunny.scaffolder.templates import TemplateRenderer

__all__ = [
    "GenerationResult",
    "ProjectGenerator",
    "ProjectTree",
    "TemplateRegistry",
    "TemplateRenderer",
    "default_registry",
]
