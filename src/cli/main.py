"""Typer entry-point.

`show` is the composition root of the demo: it builds one provider, injects
it into `RecordsController` and subscribes the Rich renderer to the
controller's observable `records`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_records_json
from cli import doctor
from cli.ui_components import build_error_panel, build_records_table, print_banner
from core.config import AppSettings
from core.domain.models import FetchStatus, PostRecord
from core.errors import ConfigurationError, PostboardError
from core.interfaces.provider import RecordProvider
from core.log import configure_logging
from core.presentation.controller import RecordsController
from core.services.composition import build_provider

app = typer.Typer(no_args_is_help=True, help="Fetch posts through an injected provider and list their titles.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


async def _run_controller(provider: RecordProvider, console: Console) -> RecordsController:
    controller = RecordsController(provider)

    def render(records: list[PostRecord]) -> None:
        console.print(build_records_table(records))

    # The fetch task has not run yet, so no update is missed.
    controller.records.subscribe(render)
    await controller.wait_loaded()
    return controller


@app.command()
def show(
    url: Optional[str] = typer.Option(None, "--url", help="Endpoint URL (defaults to POSTBOARD_ENDPOINT_URL)."),
    static: bool = typer.Option(False, "--static", help="Use the in-memory provider with default records."),
    fixture: Optional[Path] = typer.Option(
        None,
        "--fixture",
        help="Use the in-memory provider loaded from a JSON file.",
        dir_okay=False,
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write fetched records to a JSON file."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
) -> None:
    """Fetch the records once and render their titles."""

    settings = AppSettings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    if not no_banner:
        print_banner(_console)

    try:
        provider = build_provider(settings, static=static, fixture=fixture, url=url)
    except PostboardError as exc:
        # Bad URL, unreadable or undecodable fixture.
        _console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc

    controller = asyncio.run(_run_controller(provider, _console))

    if controller.status.value is FetchStatus.FAILED:
        error = controller.error.value
        if error is not None:
            _console.print(build_error_panel(error))
        raise typer.Exit(code=1)

    if output is not None:
        try:
            path = export_records_json(records=controller.records.value, output_path=output)
        except OSError as exc:
            error = ConfigurationError(f"Cannot write {output}: {exc}")
            _console.print(build_error_panel(error))
            raise typer.Exit(code=1) from exc
        _console.print(f"[green]Saved {len(controller.records.value)} records to:[/green] {path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
