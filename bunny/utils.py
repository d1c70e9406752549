"""Shared utility functions for Flutter Bunny.

Provides Rich-based console reporting, identifier case helpers used both by
the generators and the Jinja2 filters, and small file-system helpers.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def feature_slug(name: str) -> str:
    """Lower-case *name* and replace whitespace with underscores.

    Examples::

        feature_slug("User Profile") -> "user_profile"
        feature_slug("Dashboard")    -> "dashboard"
    """
    return re.sub(r"\s+", "_", name.strip().lower())


def pascal_case(value: str) -> str:
    """Convert ``some-thing``, ``some_thing`` or ``some thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def camel_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = pascal_case(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def snake_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def title_case(value: str) -> str:
    """``demo_app`` -> ``Demo App``."""
    return " ".join(word.capitalize() for word in re.split(r"[-_\s]+", value) if word)


def indent(text: str, width: int, *, first: bool = False) -> str:
    """Indent every non-empty line of *text* by *width* spaces.

    The first line is left alone unless *first* is set, which makes the
    helper suitable for splicing multi-line expressions after an existing
    prefix.
    """
    pad = " " * width
    lines = text.split("\n")
    out = []
    for i, line in enumerate(lines):
        if not line or (i == 0 and not first):
            out.append(line)
        else:
            out.append(pad + line)
    return "\n".join(out)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(0.42) -> "0.4s"
        format_duration(65.2) -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step_header(name: str) -> None:
    """Print a full-width rule announcing a generation step."""
    console.print(Rule(f"[bold bright_cyan] {name} [/bold bright_cyan]", style="bright_cyan"))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_info(message: str) -> None:
    """Print a plain informational message."""
    console.print(message)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
