"""CLI de TempConvert (Typer + Rich).

Por qué la CLI es delgada:
- Toda la lógica de estados vive en `ConversionViewModel`; aquí solo se
  observa el estado y se pinta.
- El wiring sale de `core.container.build_container`.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cli import doctor
from cli.ui_components import configure_logging, print_banner, render_state
from core.config import AppSettings
from core.container import build_container
from core.domain.models import is_blank
from core.domain.state import Error, PresentationState, Success

app = typer.Typer(
    no_args_is_help=True,
    help="Fahrenheit to Celsius through the public TempConvert SOAP service.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

_QUIT_WORDS = {"q", "quit", "exit"}


def _settings_from(ctx: typer.Context) -> AppSettings:
    settings = ctx.obj if isinstance(ctx.obj, AppSettings) else None
    return settings or AppSettings()


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override TEMPCONVERT_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    overrides: dict[str, str] = {}
    if log_level:
        overrides["log_level"] = log_level.upper()
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        # Solo se culpa a --log-level si es ese campo el que falla.
        if log_level and any(error["loc"] == ("log_level",) for error in exc.errors()):
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
        _err_console.print("[red]Invalid configuration:[/red]", escape(str(exc)))
        raise typer.Exit(code=2) from exc
    configure_logging(settings.log_level)
    ctx.obj = settings


def _print_state(state: PresentationState) -> None:
    text = render_state(state)
    if text is not None:
        _console.print(text)


@app.command()
def convert(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Fahrenheit value, sent to the service as-is."),
    raw: bool = typer.Option(False, "--raw", help="Print only the Celsius text returned by the service."),
    as_json: bool = typer.Option(False, "--json", help="Print the final state as JSON."),
) -> None:
    """Convert one Fahrenheit value and show each state of the conversion."""

    if is_blank(value):
        _err_console.print("[yellow]Nothing to convert: the value is blank.[/yellow]")
        raise typer.Exit(code=2)

    settings = _settings_from(ctx)
    on_state = None if (raw or as_json) else _print_state

    async def _run() -> PresentationState:
        with build_container(settings) as container:
            unsubscribe = container.view_model.subscribe(on_state) if on_state else None
            try:
                return await container.view_model.submit(value)
            finally:
                if unsubscribe is not None:
                    unsubscribe()

    final = asyncio.run(_run())

    if as_json:
        _console.print_json(final.model_dump_json())
    elif raw:
        if isinstance(final, Success):
            # Sin Rich markup/highlight: el texto sale tal cual.
            typer.echo(final.celsius_text)
        elif isinstance(final, Error):
            _err_console.print(render_state(final))

    if isinstance(final, Error):
        raise typer.Exit(code=1)


@app.command()
def interactive(ctx: typer.Context) -> None:
    """Prompt for values until `quit` or EOF; blank input is ignored."""

    settings = _settings_from(ctx)
    print_banner(_console)

    async def _loop() -> None:
        with build_container(settings) as container:
            unsubscribe = container.view_model.subscribe(_print_state)
            try:
                while True:
                    try:
                        value = await asyncio.to_thread(_console.input, "[bold cyan]°F>[/bold cyan] ")
                    except EOFError:
                        break
                    if value.strip().lower() in _QUIT_WORDS:
                        break
                    await container.view_model.submit(value)
            finally:
                unsubscribe()

    asyncio.run(_loop())


def run() -> None:
    app()
