"""Helpers shared by the CLI command groups."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from devboard.core.config import load_config
from devboard.core.models import AppConfig

err_console = Console(stderr=True)


def load_config_or_exit(config_path: Optional[str] = None) -> AppConfig:
    """Load the configuration, reporting a bad file or env value and exiting 1."""
    try:
        return load_config(config_path)
    except ValueError as exc:
        err_console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(1)
