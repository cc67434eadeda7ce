"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Optional, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig, load_config
from ..domain.models import TimeRange
from ..domain.shortcuts import SHORTCUTS
from ..services.period_scopes import PeriodScopes

app = typer.Typer(
    name="periodscopes",
    help="Compute this/next/last period date ranges",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./periodscopes.yaml")]
TimezoneOption = Annotated[Optional[str], typer.Option("--tz", help="IANA timezone, overrides the config file")]


def _build_scopes(config_file: Optional[Path], tz: Optional[str]) -> PeriodScopes:
    """Load configuration, apply a timezone override and build the scopes."""
    config = load_config(config_file)
    if tz:
        config = AppConfig(**{**config.model_dump(), "timezone": tz})
    return config.build_scopes()


def _print_range(time_range: TimeRange, title: str) -> None:
    console.print(f"\n[bold cyan]{title}[/bold cyan]")
    console.print(f"   Start: {time_range.start.format('YYYY-MM-DD HH:mm:ss')}")
    console.print(f"   End:   {time_range.end.format('YYYY-MM-DD HH:mm:ss')}")
    console.print(f"   Timezone: {time_range.start.timezone_name}\n")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Period range helper.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command("range")
def range_command(
    unit: Annotated[str, typer.Argument(help="Period unit: minute, hour, day, week, month or year")],
    periods: Annotated[int, typer.Argument(help="0 = current period, N = N periods ahead, -N = N periods back")],
    include_current: Annotated[bool, typer.Option("--include-current", "-i", help="Include the current period as well.")] = False,
    config_file: ConfigOption = None,
    tz: TimezoneOption = None,
):
    """
    Compute the range for this or the last/next N periods.

    Examples:

        periodscopes range year 0 --include-current

        periodscopes range -- month -3

        periodscopes range hour 2 --include-current --tz Europe/Berlin
    """
    try:
        scopes = _build_scopes(config_file, tz)
        time_range = scopes.range_for(unit, periods, include_current)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    _print_range(time_range, f"{unit} {periods:+d}{' (incl. current)' if include_current else ''}")


@app.command()
def shortcut(
    name: Annotated[str, typer.Argument(help="Shortcut name, e.g. last_month or tomorrow")],
    config_file: ConfigOption = None,
    tz: TimezoneOption = None,
):
    """
    Compute the range of a named shortcut.
    """
    try:
        scopes = _build_scopes(config_file, tz)
        time_range = scopes.shortcut_range(name)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    _print_range(time_range, name)


@app.command()
def shortcuts(
    config_file: ConfigOption = None,
    tz: TimezoneOption = None,
):
    """
    List all shortcuts with their current ranges.
    """
    try:
        scopes = _build_scopes(config_file, tz)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(
        title="Shortcuts",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Name", style="bold yellow")
    table.add_column("Unit")
    table.add_column("Periods", justify="right")
    table.add_column("Start", style="dim", no_wrap=True)
    table.add_column("End", style="dim", no_wrap=True)

    for entry in SHORTCUTS.values():
        time_range = scopes.range_for(entry.unit, entry.periods, entry.include_current)
        table.add_row(
            entry.name,
            entry.unit.value,
            str(entry.periods),
            time_range.start.format("YYYY-MM-DD HH:mm:ss"),
            time_range.end.format("YYYY-MM-DD HH:mm:ss"),
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]periodscopes[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
