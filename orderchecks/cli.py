#!/usr/bin/env python3
"""
orderchecks CLI - Order API Integration Checks

Usage:
    orderchecks run [--config FILE] [--base-url URL] [--report PATH]
    orderchecks reset [--report PATH]
    orderchecks show [--report PATH]
    orderchecks validate <config.yaml>
    orderchecks --version
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .checks import run_order_checks
from .config import SuiteConfig, load_config
from .reporting import DEFAULT_REPORT_PATH, CurlReporter, ReportWriteError

app = typer.Typer(
    name="orderchecks",
    help="Order API integration checks with curl failure reports",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"orderchecks v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    debug: bool = typer.Option(
        False, "--debug",
        help="Show debug logging"
    ),
):
    """
    Order API integration checks.

    Failing requests are written to a report as reproducible curl commands.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def resolve_config(
    config_file: Optional[Path],
    base_url: Optional[str],
    report: Optional[Path],
) -> SuiteConfig:
    """Load config and apply command line overrides, exiting on invalid files."""
    config, validation = load_config(config_file)
    if config is None:
        console.print("\n[red]Config validation failed:[/red]")
        console.print(str(validation))
        raise typer.Exit(code=2)

    if base_url:
        config.base_url = base_url
    if report:
        config.report_path = report
    return config


@app.command()
def run(
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Path to a YAML suite config"
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", "-u",
        help="Order API base URL (overrides config and API_BASE_URL)"
    ),
    report: Optional[Path] = typer.Option(
        None, "--report", "-r",
        help="Path of the curl report"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show the final status"
    ),
):
    """
    Run the order API checks.

    The report is truncated first; every failing check is appended to it.
    """
    config = resolve_config(config_file, base_url, report)

    if not quiet:
        console.print(f"\n[bold]Order API:[/bold] {config.base_url}")
        console.print(f"[bold]Report:[/bold] {config.report_path}\n")

    try:
        summary = asyncio.run(run_order_checks(config))
    except ReportWriteError as e:
        console.print(f"[red]Report error:[/red] {e}")
        raise typer.Exit(code=2)

    if not quiet:
        table = Table(title="Checks")
        table.add_column("Check", style="cyan")
        table.add_column("Result")
        table.add_column("Duration", justify="right")
        table.add_column("Error")

        for outcome in summary.outcomes:
            result = "[green]PASS[/green]" if outcome.passed else "[red]FAIL[/red]"
            table.add_row(
                outcome.name,
                result,
                f"{outcome.duration_ms:.0f}ms",
                outcome.error or "",
            )
        console.print(table)

    if summary.passed:
        console.print("[green]All checks passed[/green]")
        raise typer.Exit(code=0)

    console.print(
        f"[red]{summary.failed_count} check(s) failed[/red], "
        f"see {summary.report_path}"
    )
    raise typer.Exit(code=1)


@app.command()
def reset(
    report: Path = typer.Option(
        DEFAULT_REPORT_PATH, "--report", "-r",
        help="Path of the curl report"
    ),
):
    """
    Truncate the curl report to empty.
    """
    try:
        CurlReporter(report).reset_report()
    except ReportWriteError as e:
        console.print(f"[red]Report error:[/red] {e}")
        raise typer.Exit(code=2)
    console.print(f"Report reset: {report}")


@app.command()
def show(
    report: Path = typer.Option(
        DEFAULT_REPORT_PATH, "--report", "-r",
        help="Path of the curl report"
    ),
):
    """
    Print the curl report.
    """
    text = CurlReporter(report).read()
    if not text:
        console.print(f"[green]No failures recorded[/green] in {report}")
        raise typer.Exit(code=0)
    console.print(text, markup=False, highlight=False, soft_wrap=True, end="")


@app.command()
def validate(
    config_file: Path = typer.Argument(
        ...,
        help="Path to the YAML suite config",
        exists=True,
        readable=True,
    ),
):
    """
    Validate a suite config file.
    """
    console.print(f"\nValidating: {config_file}")

    config, validation = load_config(config_file, env={})

    if config is None:
        console.print("\n[red]Validation failed:[/red]")
        console.print(str(validation))
        raise typer.Exit(code=1)

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("base_url", config.base_url)
    table.add_row("connect_timeout_s", str(config.connect_timeout_s))
    table.add_row("request_timeout_s", str(config.request_timeout_s))
    table.add_row("report_path", str(config.report_path))
    table.add_row("order_id", config.order_id)

    console.print("\n[green]Valid config[/green]")
    console.print(table)


@app.command()
def info():
    """
    Show information about orderchecks.
    """
    console.print(f"""
[bold]orderchecks[/bold] v{__version__}

Order API integration checks with curl failure reports

[bold]Checks:[/bold]
  - POST /api/orders
  - GET /api/orders/{{id}}/status

[bold]Quick Start:[/bold]
  API_BASE_URL=http://localhost:9090 orderchecks run
  orderchecks show
""")


if __name__ == "__main__":
    app()
