"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.providers.remote import validate_endpoint_url
from core.config import AppSettings, get_user_env_file
from core.errors import ConfigurationError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Postboard Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Log level", "OK", settings.log_level)

    try:
        endpoint = validate_endpoint_url(settings.endpoint_url)
    except ConfigurationError as exc:
        table.add_row("Endpoint URL", "FAIL", str(exc))
        _console.print(table)
        raise typer.Exit(code=1) from exc
    table.add_row("Endpoint URL", "OK", endpoint)

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(endpoint, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] `postboard show --static` works offline with in-memory records."
        )
