"""CLI (Typer + Rich): comandos `convert`, `interactive` y `doctor`."""
