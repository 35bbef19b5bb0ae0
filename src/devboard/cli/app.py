"""Root CLI application: sanitize, inspect and time-log helpers."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from devboard.cli.common import err_console, load_config_or_exit
from devboard.cli.time_cmd import time_app
from devboard.core.models import AppConfig, SanitizerBackend
from devboard.sanitize.descriptions import (
    render_markdown_description,
    sanitize_comment,
    sanitize_pr_description,
)
from devboard.sanitize.plaintext import strip_html
from devboard.sanitize.rewriter import sanitize_html
from devboard.sanitize.strict import sanitize_html_strict
from devboard.sanitize.styles import sanitize_style
from devboard.sanitize.urls import is_safe_url
from devboard.utils.estimates import (
    COMPLETED_WORK_FIELD,
    ORIGINAL_ESTIMATE_FIELD,
    REMAINING_WORK_FIELD,
    estimate_summary,
    severity_color,
    severity_level,
)

logger = logging.getLogger(__name__)

console = Console()
app = typer.Typer(
    name="devboard",
    help="Render work-item and pull-request rich text safely.",
    no_args_is_help=True,
)

# Register sub-command groups
app.add_typer(time_app)


class Mode(str, Enum):
    HTML = "html"
    TEXT = "text"
    DESCRIPTION = "description"
    COMMENT = "comment"
    MARKDOWN = "markdown"


def _setup_logging(cfg: AppConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        err_console.print(f"[red]Cannot read {path}:[/red] {exc}")
        raise typer.Exit(1)


def _cap(text: str, limit: int) -> str:
    if limit and len(text) > limit:
        logger.warning("Input truncated from %d to %d characters", len(text), limit)
        return text[:limit]
    return text


@app.command()
def sanitize(
    path: str = typer.Argument("-", help="File to read, or - for stdin"),
    mode: Mode = typer.Option(Mode.HTML, "-m", "--mode", help="Output flavour"),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict", help="Parse with bleach first"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to a YAML config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log every dropped tag and attribute"),
) -> None:
    """Sanitize rich text and write the result to stdout."""
    cfg = load_config_or_exit(config_path)
    _setup_logging(cfg, verbose)
    policy = cfg.policy()

    text = _cap(_read_input(path), cfg.sanitizer.max_input_length)
    use_strict = strict if strict is not None else cfg.sanitizer.backend == SanitizerBackend.STRICT

    if mode == Mode.TEXT:
        result = strip_html(text)
    elif mode == Mode.COMMENT:
        result = sanitize_comment(text, policy=policy)
    elif mode == Mode.MARKDOWN:
        result = render_markdown_description(text, policy=policy)
    elif mode == Mode.DESCRIPTION:
        if use_strict:
            text = sanitize_html_strict(text, policy=policy)
        result = sanitize_pr_description(text, policy=policy)
    elif use_strict:
        result = sanitize_html_strict(text, policy=policy)
    else:
        result = sanitize_html(text, policy=policy)

    typer.echo(result)


@app.command("check-url")
def check_url(url: str = typer.Argument(..., help="URL to check")) -> None:
    """Report whether a URL is allowed as a link target."""
    if is_safe_url(url):
        typer.echo("safe")
        return
    typer.echo("unsafe")
    raise typer.Exit(1)


@app.command()
def style(declarations: str = typer.Argument(..., help='CSS declarations, e.g. "color: red"')) -> None:
    """Filter an inline style down to the allowed properties."""
    typer.echo(sanitize_style(declarations))


@app.command()
def estimate(
    original: Optional[float] = typer.Option(None, "--original", help="Original estimate (hours)"),
    completed: Optional[float] = typer.Option(None, "--completed", help="Completed work (hours)"),
    remaining: Optional[float] = typer.Option(None, "--remaining", help="Remaining work (hours)"),
) -> None:
    """Show how a work item tracks against its original estimate."""
    summary = estimate_summary({
        ORIGINAL_ESTIMATE_FIELD: original,
        COMPLETED_WORK_FIELD: completed,
        REMAINING_WORK_FIELD: remaining,
    })

    table = Table(title="Estimate")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Original", f"{summary.original_estimate:g}")
    table.add_row("Completed", f"{summary.completed_work:g}")
    table.add_row("Remaining", f"{summary.remaining_work:g}")
    table.add_row("Total", f"{summary.total_work:g}")
    console.print(table)

    if summary.is_over:
        severity = severity_level(summary.percentage)
        console.print(
            f"[red]Over estimate[/red] by {summary.over_by:g}h ({summary.percentage:.0f}%): "
            f"{severity.value} ({severity_color(severity)})"
        )
    elif summary.original_estimate:
        console.print("[green]Within estimate[/green]")
    else:
        console.print("[dim]No original estimate set[/dim]")


@app.command("config")
def show_config(
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to a YAML config file"),
) -> None:
    """Print the effective configuration."""
    cfg = load_config_or_exit(config_path)
    console.print_json(cfg.model_dump_json())
