"""Writes a composed :class:`ProjectTree` to disk.

Directories are created if absent, then files are written one at a time in
path order.  An existing ``pubspec.yaml`` is merged with the generated one so
that regenerating into a project keeps dependencies added by hand.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import yaml

from bunny.scaffolder.manifest import DependencyManifest
from bunny.scaffolder.project import MANIFEST_PATH, GeneratedFile, ProjectTree
from bunny.scaffolder.templates import TemplateRenderer
from bunny.utils import ensure_dir, print_warning


async def materialize(
    tree: ProjectTree,
    project_root: str | Path,
    renderer: TemplateRenderer,
) -> list[Path]:
    """Write every directory and file of *tree* below *project_root*.

    Returns:
        The written file paths, in write order.
    """
    root = Path(project_root)
    await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)

    for directory in sorted(tree.directories):
        await asyncio.to_thread(ensure_dir, root / directory)

    written: list[Path] = []
    for generated in tree.render(renderer):
        target = root / generated.path
        content = generated.content
        if generated.path == MANIFEST_PATH and target.exists():
            content = await asyncio.to_thread(_merged_manifest, target, generated)
        await asyncio.to_thread(_write_file, target, content)
        written.append(target)
    return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _merged_manifest(existing_path: Path, generated: GeneratedFile) -> str:
    try:
        existing = DependencyManifest.parse(existing_path.read_text(encoding="utf-8"))
    except (ValueError, yaml.YAMLError) as exc:
        print_warning(f"  ! {existing_path} could not be read ({exc}); replacing it")
        return generated.content
    existing.merge(DependencyManifest.parse(generated.content))
    return existing.render()
