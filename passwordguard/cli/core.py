"""Shared CLI application context and setup helpers."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.console import Console

from passwordguard import __logo__, __version__

if TYPE_CHECKING:
    from passwordguard.config.provider import SnapshotProvider

app = typer.Typer(
    name="passwordguard",
    help=f"{__logo__} passwordguard - password complexity policy",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"{__logo__} passwordguard v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
    """passwordguard - password complexity policy."""


def make_provider(config_path: Path | None) -> SnapshotProvider:
    """Create a SnapshotProvider for one CLI invocation (no live reload)."""
    from passwordguard.config.loader import get_config_path, load_config
    from passwordguard.config.provider import SnapshotProvider

    path = config_path or get_config_path()
    return SnapshotProvider(load_config(path), config_path=path, reload_on_change=False)
