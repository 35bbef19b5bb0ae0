"""Time-log CLI commands: format, parse, split."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from devboard.cli.common import err_console, load_config_or_exit
from devboard.utils.time import format_time_display, parse_time_string, round_minutes, split_minutes

console = Console()
time_app = typer.Typer(name="time", help="Time-log formatting and splitting.")


@time_app.command("format")
def format_minutes(minutes: int = typer.Argument(..., help="Total minutes")) -> None:
    """Format a minute count as "1h 30m"."""
    typer.echo(format_time_display(minutes))


@time_app.command("parse")
def parse(text: str = typer.Argument(..., help='Duration such as "1h 30m"')) -> None:
    """Parse a duration into minutes."""
    minutes = parse_time_string(text)
    if minutes is None:
        err_console.print(f"[red]Unrecognised duration:[/red] {text}")
        raise typer.Exit(1)
    typer.echo(str(minutes))


@time_app.command("split")
def split(
    minutes: int = typer.Argument(..., help="Total minutes to log"),
    max_per_entry: Optional[int] = typer.Option(None, "--max", help="Maximum minutes per entry"),
    rounded: bool = typer.Option(False, "--round", help="Round the total to the configured interval first"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to a YAML config file"),
) -> None:
    """Split a long session into several time-log entries."""
    cfg = load_config_or_exit(config_path)
    total = round_minutes(minutes, cfg.time.rounding_interval) if rounded else minutes
    limit = max_per_entry or cfg.time.max_minutes_per_entry

    for entry in split_minutes(total, limit):
        console.print(f"{entry:>5}  {format_time_display(entry)}")
