"""In-memory models of the generated Dart sources.

Shared files (``lib/main.dart`` and the root widget) are not patched as text.
They are held as structured models that every integrator edits through
keyed, idempotent operations, and they are rendered exactly once when the
project is materialized.  Files that are not modeled are kept as opaque text
(``TextSource``) and support anchor-based insertion for the few cases where
a generator has to extend another generator's file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Iterable

from bunny.utils import indent

if TYPE_CHECKING:
    from bunny.scaffolder.templates import TemplateRenderer
    from bunny.scaffolder.wiring.shell import AppShell


_LAST_IMPORT = re.compile(r"^import .*;\n", re.MULTILINE)


# ---------------------------------------------------------------------------
# Dart expression helpers
# ---------------------------------------------------------------------------


def dart_call(callee: str, args: Iterable[tuple[str | None, str]] = ()) -> str:
    """Render ``callee(name: value, ...)`` one argument per line.

    Multi-line argument values are re-indented under the call, so calls nest
    cleanly.
    """
    args = list(args)
    if not args:
        return f"{callee}()"
    lines = [f"{callee}("]
    for name, value in args:
        prefix = f"{name}: " if name else ""
        lines.append(indent(f"{prefix}{value},", 2, first=True))
    lines.append(")")
    return "\n".join(lines)


def dart_string(value: str) -> str:
    """Quote *value* as a single-quoted Dart string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$")
    return f"'{escaped}'"


def dart_list(items: Iterable[str]) -> str:
    items = list(items)
    if not items:
        return "[]"
    body = "\n".join(indent(f"{item},", 2, first=True) for item in items)
    return f"[\n{body}\n]"


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------


class PatchStage(IntEnum):
    """How far the integrators have progressed on a shared file."""

    UNTOUCHED = 0
    IMPORTS_PATCHED = 1
    WRAPPER_ESTABLISHED = 2
    FIELDS_THREADED = 3


@dataclass(frozen=True)
class Provider:
    """A state container registered at the top of the widget tree."""

    type: str
    create: str

    def render(self) -> str:
        return f"{self.type}(create: {self.create})"


@dataclass(frozen=True)
class Wrapper:
    """A widget that wraps a child expression.

    With ``builder_params`` set the child is returned from a ``builder``
    closure (``Consumer``, ``BlocBuilder``, ``StoreConnector`` ...);
    otherwise it is passed as ``child:``.
    """

    callee: str
    builder_params: str | None = None
    args: tuple[tuple[str, str], ...] = ()

    def wrap(self, child: str, locals_: Iterable[str] = ()) -> str:
        if self.builder_params is None:
            return dart_call(self.callee, [*self.args, ("child", child)])
        body = "\n".join([*locals_, f"return {child};"])
        closure = f"({self.builder_params}) {{\n{indent(body, 2, first=True)}\n}}"
        return dart_call(self.callee, [*self.args, ("builder", closure)])


@dataclass(frozen=True)
class CtorParam:
    """A named constructor parameter of the root widget."""

    name: str
    type: str
    required: bool = False

    def render(self) -> str:
        return f"required this.{self.name}" if self.required else f"this.{self.name}"


def _add_keyed(items: dict, key: str, value) -> bool:
    if key in items:
        return False
    items[key] = value
    return True


# ---------------------------------------------------------------------------
# Source models
# ---------------------------------------------------------------------------


@dataclass
class DartSource:
    """Common base: an ordered, de-duplicated import list and a patch stage."""

    path: str
    imports: list[str] = field(default_factory=list)
    stage: PatchStage = PatchStage.UNTOUCHED

    def add_import(self, uri: str) -> bool:
        """Add *uri* unless it is already imported.  Returns ``True`` if added."""
        if uri in self.imports:
            return False
        self.imports.append(uri)
        return True

    def add_imports(self, uris: Iterable[str]) -> int:
        return sum(1 for uri in uris if self.add_import(uri))

    def advance(self, stage: PatchStage) -> None:
        """Move the patch stage forward; stages never go back."""
        if stage > self.stage:
            self.stage = stage

    def render(self, renderer: TemplateRenderer) -> str:
        raise NotImplementedError


@dataclass
class RootInvocation:
    """The root widget as it is passed to ``runApp``."""

    widget: str = "App"
    args: dict[str, str] = field(default_factory=dict)
    locals: dict[str, str] = field(default_factory=dict)

    def set_arg(self, name: str, value: str) -> None:
        self.args[name] = value

    def add_local(self, key: str, statement: str) -> bool:
        return _add_keyed(self.locals, key, statement)


@dataclass
class EntryPoint(DartSource):
    """Model of ``lib/main.dart``."""

    shell: AppShell | None = field(default=None, repr=False)
    setup: dict[str, str] = field(default_factory=dict)
    providers: dict[str, Provider] = field(default_factory=dict)
    scope_args: dict[str, str] = field(default_factory=dict)
    outer: Wrapper | None = None
    root: RootInvocation = field(default_factory=RootInvocation)

    def add_setup(self, key: str, statement: str) -> bool:
        """Add an initialization statement inside ``main()`` before ``runApp``."""
        return _add_keyed(self.setup, key, statement)

    def add_provider(self, key: str, provider: Provider) -> bool:
        return _add_keyed(self.providers, key, provider)

    def add_scope_arg(self, key: str, value: str) -> bool:
        return _add_keyed(self.scope_args, key, value)

    def run_app_expression(self) -> str:
        if self.shell is None:
            raise ValueError(f"{self.path}: no app shell configured")
        return self.shell.run_app_expression(self)

    def render(self, renderer: TemplateRenderer) -> str:
        return renderer.render(
            "app/main.dart.j2",
            {
                "imports": self.imports,
                "setup": list(self.setup.values()),
                "run_app": self.run_app_expression(),
            },
        )


@dataclass
class RootWidget(DartSource):
    """Model of the root widget (``App`` / ``AppWidget``)."""

    class_name: str = "App"
    stateful: bool = False
    app_constructor: str = "MaterialApp"
    params: dict[str, CtorParam] = field(default_factory=dict)
    fields: dict[str, str] = field(default_factory=dict)
    wrappers: dict[str, Wrapper] = field(default_factory=dict)
    state_fields: dict[str, str] = field(default_factory=dict)
    init_state: dict[str, str] = field(default_factory=dict)
    dispose: dict[str, str] = field(default_factory=dict)
    methods: dict[str, str] = field(default_factory=dict)

    def add_param(self, param: CtorParam) -> bool:
        return _add_keyed(self.params, param.name, param)

    def set_field(self, name: str, value: str) -> None:
        """Set an app-constructor field, replacing it in place if present."""
        self.fields[name] = value

    def add_field(self, name: str, value: str) -> bool:
        return _add_keyed(self.fields, name, value)

    def add_wrapper(self, key: str, wrapper: Wrapper) -> bool:
        """Wrap the app constructor.  Earlier wrappers end up outermost."""
        return _add_keyed(self.wrappers, key, wrapper)

    def add_state_field(self, key: str, declaration: str) -> bool:
        return _add_keyed(self.state_fields, key, declaration)

    def add_init_state(self, key: str, statement: str) -> bool:
        return _add_keyed(self.init_state, key, statement)

    def add_dispose(self, key: str, statement: str) -> bool:
        return _add_keyed(self.dispose, key, statement)

    def add_method(self, key: str, code: str) -> bool:
        return _add_keyed(self.methods, key, code)

    def body(self) -> str:
        """The expression returned from ``build``."""
        expression = dart_call(self.app_constructor, self.fields.items())
        for wrapper in reversed(list(self.wrappers.values())):
            expression = wrapper.wrap(expression)
        return expression

    def render(self, renderer: TemplateRenderer) -> str:
        return renderer.render(
            "app/app.dart.j2",
            {
                "imports": self.imports,
                "class_name": self.class_name,
                "stateful": self.stateful,
                "params": list(self.params.values()),
                "state_fields": list(self.state_fields.values()),
                "init_state": list(self.init_state.values()),
                "dispose": list(self.dispose.values()),
                "methods": list(self.methods.values()),
                "body": self.body(),
            },
        )


@dataclass
class TextSource:
    """Opaque Dart text with anchor-based, idempotent insertion."""

    path: str
    content: str
    variant: str = ""

    def inject_imports(self, uris: Iterable[str]) -> list[str]:
        """Insert ``import`` lines after the last existing import.

        Targets that are already imported are skipped.  Returns the URIs that
        were actually added.
        """
        added = [
            uri for uri in dict.fromkeys(uris)
            if f"import '{uri}';" not in self.content
        ]
        if not added:
            return []
        block = "".join(f"import '{uri}';\n" for uri in added)
        matches = list(_LAST_IMPORT.finditer(self.content))
        if matches:
            pos = matches[-1].end()
            self.content = self.content[:pos] + block + self.content[pos:]
        else:
            self.content = block + "\n" + self.content
        return added

    def insert_after(self, anchor: str, snippet: str) -> bool:
        """Insert *snippet* on the line after the line containing *anchor*.

        Returns ``False`` if the anchor is missing.  Inserting a snippet that
        is already present is a no-op that still returns ``True``.
        """
        if snippet.strip() in self.content:
            return True
        pos = self.content.find(anchor)
        if pos < 0:
            return False
        line_end = self.content.find("\n", pos)
        if line_end < 0:
            self.content += "\n"
            line_end = len(self.content) - 1
        self.content = (
            self.content[: line_end + 1]
            + snippet.rstrip("\n") + "\n"
            + self.content[line_end + 1:]
        )
        return True

    def render(self, renderer: TemplateRenderer) -> str:
        return self.content


@dataclass
class StaticSource:
    """Pre-rendered content owned by a single generator."""

    path: str
    content: str
    variant: str = ""

    def render(self, renderer: TemplateRenderer) -> str:
        return self.content
