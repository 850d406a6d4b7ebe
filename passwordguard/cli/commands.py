"""CLI commands for passwordguard."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, replace
from pathlib import Path

import typer
from rich.table import Table

from passwordguard import __logo__
from passwordguard.core.models import Accepted, PasswordCandidate, PolicySnapshot
from passwordguard.policy.evaluator import evaluate
from passwordguard.policy.messages import REJECTION_MESSAGE, detail_message

from .core import app, console, make_provider

config_app = typer.Typer(help="Inspect passwordguard configuration")
app.add_typer(config_app, name="config")

_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to config.json")


@app.command()
def init(config_path: Path | None = _CONFIG_OPTION) -> None:
    """Write the default passwordguard configuration."""
    from passwordguard.config.loader import get_config_path, save_config
    from passwordguard.config.schema import PasswordGuardConfig

    path = config_path or get_config_path()
    if path.exists():
        console.print(f"[yellow]Config already exists at {path}[/yellow]")
        if not typer.confirm("Overwrite?"):
            raise typer.Exit()

    save_config(PasswordGuardConfig(), path)
    console.print(f"[green]✓[/green] Created config at {path}")
    console.print(f"\n{__logo__} passwordguard is ready!")


@app.command()
def check(
    username: str = typer.Argument(..., help="Account the password is being set for"),
    from_stdin: bool = typer.Option(False, "--stdin", help="Read the password from stdin"),
    advisory: bool = typer.Option(False, "--advisory", help="Report violations without failing"),
    config_path: Path | None = _CONFIG_OPTION,
) -> None:
    """Check one password against the effective policy for USERNAME."""
    if from_stdin:
        password = sys.stdin.readline().rstrip("\r\n")
    else:
        password = typer.prompt("Password", hide_input=True)

    provider = make_provider(config_path)
    snapshot = provider.snapshot_for(username)
    if advisory:
        snapshot = _with_advisory(snapshot)

    result = evaluate(snapshot, PasswordCandidate(password, username))
    if isinstance(result, Accepted):
        console.print("[green]✓[/green] password accepted")
        return

    table = Table(title=f"Policy violations for {username}")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Detail")
    for violation in result.violations:
        table.add_row(violation.code, detail_message(violation))
    console.print(table)

    if result.advisory:
        console.print("[yellow]advisory mode: change would be allowed[/yellow]")
        return
    console.print(f"[red]Error: {REJECTION_MESSAGE}[/red]")
    raise typer.Exit(1)


@config_app.command("path")
def config_path_cmd() -> None:
    """Show config file location."""
    from passwordguard.config.loader import get_config_path

    console.print(str(get_config_path()), soft_wrap=True)


@config_app.command("show")
def config_show(config_path: Path | None = _CONFIG_OPTION) -> None:
    """Print the effective configuration as JSON."""
    from passwordguard.config.loader import convert_to_camel

    provider = make_provider(config_path)
    data = convert_to_camel(provider.config.model_dump(exclude_none=True))
    console.print_json(json.dumps(data, ensure_ascii=False, indent=2))


@config_app.command("explain")
def config_explain(
    username: str = typer.Argument(..., help="Account to resolve"),
    config_path: Path | None = _CONFIG_OPTION,
) -> None:
    """Show the merged policy snapshot for one account."""
    provider = make_provider(config_path)
    snapshot = provider.snapshot_for(username)
    source = "role override" if username in provider.config.roles else "default policy"

    table = Table(title=f"Effective policy for {username} ({source})")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in asdict(snapshot).items():
        table.add_row(key, str(value))
    console.print(table)


def _with_advisory(snapshot: PolicySnapshot) -> PolicySnapshot:
    return replace(snapshot, advisory_mode=True)
