"""CLI entry point for datesugar."""

import logging
import sys
import tomllib

import typer
from rich.console import Console

from datesugar.commands.admin import config_command, init_command
from datesugar.commands.dates import (
    ago_command,
    beginning_of_command,
    separate_command,
    today_command,
    yesterday_command,
)
from datesugar.config import get_log_level, load_config
from datesugar.logging_setup import configure_logging

console = Console()

app = typer.Typer(
    name="datesugar",
    help="Rails-style date helpers: today, yesterday, beginning of month, n days ago",
    add_completion=False,
)

NOW_HELP = "Pretend today is this date (YYYY-MM-DD)"

# Commands that rewrite the config file must still run when it is broken
REPAIR_COMMANDS = ("config", "init")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Rails-style date helpers: today, yesterday, beginning of month, n days ago."""
    if verbose:
        level = logging.DEBUG
    else:
        try:
            level = get_log_level(load_config())
        except (ValueError, tomllib.TOMLDecodeError) as e:
            if ctx.invoked_subcommand not in REPAIR_COMMANDS:
                console.print(f"[red]{e}[/red]", style="bold")
                sys.exit(1)
            console.print(f"[yellow]Ignoring broken config: {e}[/yellow]")
            level = logging.WARNING
    configure_logging(level=level, force=True)


@app.command()
def today(
    now: str = typer.Option(None, "--now", help=NOW_HELP),
) -> None:
    """Show today's date."""
    today_command(now)


@app.command()
def yesterday(
    now: str = typer.Option(None, "--now", help=NOW_HELP),
) -> None:
    """Show yesterday's date."""
    yesterday_command(now)


@app.command(name="beginning-of")
def beginning_of(
    unit: str = typer.Argument(..., help="'day', 'month' or 'year'"),
    now: str = typer.Option(None, "--now", help=NOW_HELP),
) -> None:
    """Show the first date of the current day, month or year."""
    beginning_of_command(unit, now)


# Negative offsets would otherwise be parsed as unknown short options
@app.command(context_settings={"ignore_unknown_options": True})
def ago(
    n: int = typer.Argument(..., help="How many days, months and years back (at least 1)"),
    now: str = typer.Option(None, "--now", help=NOW_HELP),
    overflow: str = typer.Option(
        None, "--overflow", help="'clamp' or 'roll' for days missing from the target month (overrides config)"
    ),
) -> None:
    """Show the dates n days, n months and n years ago."""
    ago_command(n, now, overflow)


@app.command()
def separate(
    value: str = typer.Argument(None, help="Date to split (YYYY-MM-DD, default: today)"),
    now: str = typer.Option(None, "--now", help=NOW_HELP),
) -> None:
    """Split a date into day, month and year."""
    separate_command(value, now)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the default configuration file."""
    init_command(force)


@app.command(name="config")
def config(
    key: str = typer.Argument(None, help="Option to set ('day_overflow' or 'log_level')"),
    value: str = typer.Argument(None, help="New value for the option"),
) -> None:
    """Show the configuration, or set an option."""
    config_command(key, value)


if __name__ == "__main__":
    app()
