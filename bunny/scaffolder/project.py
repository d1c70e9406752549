"""In-memory project tree assembled by the generators.

Nothing touches the disk while the project is being composed: generators add
directories and sources here, integrators edit the shared source models, and
:mod:`bunny.scaffolder.materializer` writes the final result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from pydantic import BaseModel, Field

from bunny.scaffolder.manifest import DependencyManifest
from bunny.scaffolder.source import EntryPoint, RootWidget, StaticSource, TextSource
from bunny.utils import print_warning

if TYPE_CHECKING:
    from bunny.scaffolder.templates import TemplateRenderer

Source = Union[EntryPoint, RootWidget, TextSource, StaticSource]

MANIFEST_PATH = "pubspec.yaml"
ENTRY_POINT_PATH = "lib/main.dart"


class GeneratedFile(BaseModel):
    """A rendered output file."""

    path: str = Field(..., description="Project-relative path")
    content: str
    variant: str = Field(default="", description="Template branch that produced the file")
    owner: str = Field(default="", description="Generator that owns the file")


class ProjectTree:
    """Files, directories and the manifest of the project being generated."""

    def __init__(self, root_widget_path: str = "lib/app/app.dart") -> None:
        self.root_widget_path = root_widget_path
        self.files: dict[str, Source] = {}
        self.owners: dict[str, str] = {}
        self.directories: set[str] = set()
        self.manifest: DependencyManifest | None = None
        self.warnings: list[str] = []

    # -- Logging ---------------------------------------------------------------

    def warn(self, message: str) -> None:
        """Record and print a recoverable problem."""
        self.warnings.append(message)
        print_warning(f"  ! {message}")

    # -- Directories -----------------------------------------------------------

    def add_directory(self, path: str) -> None:
        self.directories.add(path.strip("/"))

    def add_directories(self, paths: list[str] | tuple[str, ...]) -> None:
        for path in paths:
            self.add_directory(path)

    # -- Files -----------------------------------------------------------------

    def add_file(self, source: Source, owner: str) -> bool:
        """Register *source* under its path.

        A generator may replace its own files but never another generator's:
        such a conflict is warned about and the existing file is kept.
        """
        current = self.owners.get(source.path)
        if current is not None and current != owner:
            self.warn(f"{source.path} is owned by {current}; {owner} left it untouched")
            return False
        self.files[source.path] = source
        self.owners[source.path] = owner
        parent = source.path.rpartition("/")[0]
        if parent:
            self.add_directory(parent)
        return True

    def get(self, path: str) -> Source | None:
        return self.files.get(path)

    def __contains__(self, path: str) -> bool:
        return path in self.files or (path == MANIFEST_PATH and self.manifest is not None)

    def entry_point(self) -> EntryPoint | None:
        source = self.files.get(ENTRY_POINT_PATH)
        return source if isinstance(source, EntryPoint) else None

    def root_widget(self) -> RootWidget | None:
        source = self.files.get(self.root_widget_path)
        return source if isinstance(source, RootWidget) else None

    def text(self, path: str) -> TextSource | None:
        source = self.files.get(path)
        return source if isinstance(source, TextSource) else None

    # -- Rendering -------------------------------------------------------------

    def render(self, renderer: TemplateRenderer) -> list[GeneratedFile]:
        """Render every source, sorted by path."""
        rendered: list[GeneratedFile] = []
        for path in sorted(self.files):
            source = self.files[path]
            rendered.append(
                GeneratedFile(
                    path=path,
                    content=source.render(renderer),
                    variant=getattr(source, "variant", ""),
                    owner=self.owners[path],
                )
            )
        if self.manifest is not None:
            rendered.append(
                GeneratedFile(path=MANIFEST_PATH, content=self.manifest.render(), owner="manifest")
            )
        rendered.sort(key=lambda f: f.path)
        return rendered
