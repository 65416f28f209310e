"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar el render de estados en `convert` e `interactive`.
"""

from __future__ import annotations

import logging
from typing import assert_never

from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.state import Empty, Error, Loading, PresentationState, Success


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("TempConvert", style="bold cyan")
    subtitle = Text("Fahrenheit → Celsius • SOAP 1.2", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def render_state(state: PresentationState) -> Text | None:
    """Texto para un estado; `None` cuando no hay nada que mostrar (`Empty`)."""

    match state:
        case Empty():
            return None
        case Loading():
            return Text("Loading...", style="dim")
        case Success(celsius_text=celsius_text):
            return Text(f"Result: {celsius_text} °C", style="bold green")
        case Error(message=message):
            return Text(f"Error: {message}", style="bold red")
        case _:
            assert_never(state)


def build_settings_table(settings: AppSettings, *, title: str = "Settings") -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("http_timeout_seconds", f"{settings.http_timeout_seconds:g}")
    table.add_row("user_agent", settings.user_agent)
    table.add_row("blocking_io_workers", str(settings.blocking_io_workers))
    table.add_row("log_level", settings.log_level)
    return table


def configure_logging(level: str) -> None:
    """Logging a stderr con `RichHandler` para no ensuciar la salida de resultados."""

    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
