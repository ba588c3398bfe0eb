"""Typer-based CLI for flatcopy."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from .config import ConfigError, Settings, load_settings
from .selfcheck import run_self_check
from .tui.app import FlatCopyApp

app = typer.Typer(help="Interactively copy files by extension into one flat folder.", add_completion=False)
console = Console()


def _configure_logging(level: str, log_file: Path | None, *, to_console: bool) -> None:
    # The default stderr handler would draw over the full-screen UI.
    logger.remove()
    if to_console:
        logger.add(console.print, level="WARNING", format="{level}: {message}")
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level, rotation="1 week", retention=5)


def _run_interactive(settings: Settings) -> None:
    FlatCopyApp(settings).run()


@app.command()
def main(
    test: bool = typer.Option(False, "--test", help="Run the non-interactive self-check and exit"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to a YAML settings file"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level for the log file"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write a log file to this path"),
) -> None:
    """Launch the interactive copy wizard."""

    try:
        settings = load_settings(config)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=4)

    _configure_logging(log_level.upper(), log_file or settings.log_file, to_console=test)

    if test:
        run_self_check(console)
        raise typer.Exit(code=0)

    try:
        _run_interactive(settings)
    except Exception as exc:
        logger.exception("Interactive session failed")
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
