"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.soap_client import METHOD_NAME, SERVICE_NAMESPACE, SERVICE_URL, SOAP_ACTION
from cli.ui_components import build_settings_table
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.container import build_container
from core.domain.state import Error, Success

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# 32 °F son exactamente 0 °C.
_LIVE_SAMPLE_VALUE = "32"


def _settings_from(ctx: typer.Context) -> AppSettings:
    return ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.status_code < 500, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


async def _check_live_conversion(settings: AppSettings) -> tuple[bool, str]:
    with build_container(settings) as container:
        state = await container.view_model.submit(_LIVE_SAMPLE_VALUE)
    if isinstance(state, Success):
        return True, f"{_LIVE_SAMPLE_VALUE} °F -> {state.celsius_text!r}"
    if isinstance(state, Error):
        return False, state.message
    return False, state.kind


@app.command()
def run(
    ctx: typer.Context,
    live: bool = typer.Option(False, "--live", help="Also perform one real conversion."),
) -> None:
    """Run baseline diagnostics: settings, endpoint and connectivity."""

    settings = _settings_from(ctx)

    _console.print(build_settings_table(settings, title="TempConvert settings"))

    table = Table(title="TempConvert Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Endpoint", "OK", SERVICE_URL)
    table.add_row("Operation", "OK", f"{METHOD_NAME} ({SERVICE_NAMESPACE})")
    table.add_row("Action", "OK", SOAP_ACTION)

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(SERVICE_URL, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    ok_live = True
    if live:
        ok_live, detail_live = asyncio.run(_check_live_conversion(settings))
        table.add_row("Live conversion", "OK" if ok_live else "FAIL", detail_live)

    _console.print(table)

    if not (ok_http and ok_live):
        raise typer.Exit(code=1)


@app.command()
def setup(ctx: typer.Context) -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = _settings_from(ctx)

    timeout = typer.prompt(
        "HTTP timeout (seconds)",
        default=settings.http_timeout_seconds,
        type=float,
    )
    workers = typer.prompt(
        "Blocking I/O workers",
        default=settings.blocking_io_workers,
        type=int,
    )
    log_level = typer.prompt("Log level", default=settings.log_level).strip().upper()

    try:
        validated = AppSettings(
            http_timeout_seconds=timeout,
            blocking_io_workers=workers,
            log_level=log_level,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars(
        {
            "TEMPCONVERT_HTTP_TIMEOUT_SECONDS": f"{validated.http_timeout_seconds:g}",
            "TEMPCONVERT_BLOCKING_IO_WORKERS": str(validated.blocking_io_workers),
            "TEMPCONVERT_LOG_LEVEL": validated.log_level,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
