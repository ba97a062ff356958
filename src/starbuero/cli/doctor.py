"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from starbuero.cli.ui_components import build_doctor_table, print_banner
from starbuero.client import StarbueroClient
from starbuero.core.config import DEFAULT_BASE_URL, ClientSettings, write_user_env_vars
from starbuero.core.errors import ConfigurationError

app = typer.Typer(no_args_is_help=True, help="Configuration checks and setup.")

_console = Console()


def _mask(token: str) -> str:
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}…{token[-4:]}"


async def _probe(client: StarbueroClient) -> tuple[bool, str]:
    payload = await client.get_company_info()
    if payload is None:
        return False, "No result (see log for status / error)"
    return True, "Company info received"


def build_client(settings: ClientSettings) -> StarbueroClient:
    return StarbueroClient.from_settings(settings)


@app.command()
def run() -> None:
    """Show configuration status and probe the API root with the configured token."""

    settings = ClientSettings()
    print_banner(_console)

    table = build_doctor_table()
    table.add_row("API base_url", "OK", settings.base_url)
    table.add_row("Debug", "ON" if settings.debug else "OFF", "STARBUERO_DEBUG")

    client: StarbueroClient | None = None
    if settings.api_token:
        table.add_row("API token", "OK", _mask(settings.api_token))
        try:
            client = build_client(settings)
        except ConfigurationError as exc:
            table.add_row("Client", "FAIL", str(exc))
    else:
        table.add_row("API token", "MISSING", "Run `starbuero doctor setup` or set STARBUERO_API_TOKEN")

    ok = client is not None
    if client is not None:
        ok, detail = asyncio.run(_probe(client))
        table.add_row("API connectivity", "OK" if ok else "FAIL", detail)

    _console.print(table)
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive setup (stores the token in the user config .env)."""

    token = typer.prompt("Starbüro API token", hide_input=True).strip()
    base_url = typer.prompt("API base URL", default=DEFAULT_BASE_URL, show_default=True).strip()

    if not token:
        raise typer.BadParameter("token is required")

    env_path = write_user_env_vars(
        {
            "STARBUERO_API_TOKEN": token,
            "STARBUERO_BASE_URL": base_url or DEFAULT_BASE_URL,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
