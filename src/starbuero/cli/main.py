"""Command line entry point (Typer).

Examples:
    starbuero operations
    starbuero call list_contacts page=1 limit=10
    starbuero call create_contact salutation=Herr ... vip=false email_addresses='["a@b.de"]'
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from starbuero.cli import doctor
from starbuero.cli.ui_components import build_operations_table
from starbuero.client import StarbueroClient
from starbuero.core.config import ClientSettings
from starbuero.core.domain.operations import OPERATIONS
from starbuero.core.errors import ConfigurationError, ValidationError

app = typer.Typer(no_args_is_help=True, help="Starbüro API command line client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
    )


def parse_assignments(items: list[str]) -> dict[str, Any]:
    """Parse `key=value` pairs; values are JSON when they parse as JSON, else strings."""

    out: dict[str, Any] = {}
    for item in items:
        if "=" not in item:
            raise typer.BadParameter(f"expected key=value, got {item!r}")
        key, raw = item.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"empty argument name in {item!r}")
        try:
            out[key] = json.loads(raw)
        except json.JSONDecodeError:
            out[key] = raw
    return out


def build_client(debug: bool) -> StarbueroClient:
    settings = ClientSettings()
    if debug:
        settings = settings.model_copy(update={"debug": True})
    return StarbueroClient.from_settings(settings)


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Verbose logging of requests and failures."),
) -> None:
    configure_logging(debug)
    ctx.obj = {"debug": debug}


@app.command()
def operations() -> None:
    """List every available operation."""

    _console.print(build_operations_table(OPERATIONS.values()))


@app.command()
def call(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Operation name, see `starbuero operations`."),
    assignments: list[str] = typer.Argument(None, help="Arguments as key=value."),
) -> None:
    """Run one operation and print its JSON payload."""

    if name not in OPERATIONS:
        raise typer.BadParameter(f"unknown operation {name!r}", param_hint="NAME")
    arguments = parse_assignments(assignments or [])

    debug = bool((ctx.obj or {}).get("debug"))
    try:
        client = build_client(debug)
        payload = asyncio.run(client.call(name, **arguments))
    except (ConfigurationError, ValidationError) as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except TypeError as exc:
        raise typer.BadParameter(str(exc), param_hint="ASSIGNMENTS") from exc

    if payload is None:
        _err_console.print("[yellow]No result.[/yellow] The request failed; see the log above.")
        raise typer.Exit(code=1)

    _console.print_json(data=payload)


def run() -> None:
    app()
