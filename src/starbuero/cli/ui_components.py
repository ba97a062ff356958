"""CLI UI components (Rich).

Tables and panels shared by the commands.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from starbuero import __version__
from starbuero.core.domain.models import FieldKind, OperationSchema


def print_banner(console: Console) -> None:
    """Print the welcome banner (interactive commands only)."""

    title = Text("starbuero", style="bold cyan")
    subtitle = Text(f"Starbüro API client • v{__version__}", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _format_argument(schema: OperationSchema) -> str:
    parts: list[str] = []
    for spec in schema.arguments:
        label = spec.name
        if spec.kind is FieldKind.ARRAY:
            label += "[]"
        elif spec.kind is FieldKind.EXPLICIT_BOOLEAN:
            label += "!"
        if not spec.required:
            label = f"[{label}]"
        parts.append(label)
    return ", ".join(parts) or "-"


def build_operations_table(schemas: Iterable[OperationSchema]) -> Table:
    """Table of catalogued operations.

    `[]` marks list arguments, `!` arguments that must be passed even when
    False, brackets optional ones.
    """

    table = Table(title="Operations")
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Verb", style="magenta", no_wrap=True)
    table.add_column("Path", style="white")
    table.add_column("Arguments", style="dim")
    for schema in schemas:
        table.add_row(schema.name, schema.verb.value, schema.path or "/", _format_argument(schema))
    return table


def build_doctor_table() -> Table:
    table = Table(title="starbuero doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
