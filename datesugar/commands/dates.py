"""Commands that print anchor and relative dates."""

import sys
import tomllib
from dataclasses import fields
from datetime import date

from rich.console import Console
from rich.table import Table

from datesugar.clock import Clock, fixed_clock, system_clock
from datesugar.config import get_day_overflow, load_config
from datesugar.dates import (
    beginning_of_day,
    beginning_of_month,
    beginning_of_year,
    get,
    separate,
    today,
    yesterday,
)
from datesugar.domain.errors import InvalidArgumentError
from datesugar.domain.models import DayOverflow

console = Console()

ANCHORS = {
    "day": beginning_of_day,
    "month": beginning_of_month,
    "year": beginning_of_year,
}


def parse_date_option(raw: str) -> date:
    """Parse a YYYY-MM-DD option value, exiting with an error if it's malformed."""
    try:
        return date.fromisoformat(raw)
    except ValueError:
        console.print(f"[red]Invalid date '{raw}'. Use YYYY-MM-DD.[/red]", style="bold")
        sys.exit(1)


def resolve_clock(now: str | None) -> Clock:
    """Use the system clock unless --now pins the current date."""
    if now is None:
        return system_clock
    return fixed_clock(parse_date_option(now))


def resolve_overflow(overflow: str | None) -> DayOverflow:
    """Pick the overflow policy from the option, falling back to the config file."""
    try:
        if overflow is not None:
            return get_day_overflow({"day_overflow": overflow.lower()})
        return get_day_overflow(load_config())
    except (ValueError, tomllib.TOMLDecodeError) as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)


def today_command(now: str | None = None) -> None:
    """Print today's date."""
    console.print(today(clock=resolve_clock(now)).isoformat())


def yesterday_command(now: str | None = None) -> None:
    """Print yesterday's date."""
    console.print(yesterday(clock=resolve_clock(now)).isoformat())


def beginning_of_command(unit: str, now: str | None = None) -> None:
    """Print the start of the current day, month or year."""
    anchor = ANCHORS.get(unit.lower())
    if anchor is None:
        console.print(f"[red]Unknown unit '{unit}'. Use one of: {', '.join(ANCHORS)}[/red]", style="bold")
        sys.exit(1)

    console.print(anchor(clock=resolve_clock(now)).isoformat())


def ago_command(n: int, now: str | None = None, overflow: str | None = None) -> None:
    """Print the dates n days, months and years ago as a table."""
    clock = resolve_clock(now)
    policy = resolve_overflow(overflow)

    try:
        result = get(n, clock=clock, overflow=policy)
    except InvalidArgumentError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except (ValueError, OverflowError) as e:
        console.print(f"[red]Date out of range: {e}[/red]", style="bold")
        sys.exit(1)

    table = Table(title=f"{n} ago from {today(clock=clock).isoformat()}")
    table.add_column("Field", style="cyan")
    table.add_column("Date", justify="right")

    labels = [f.name for f in fields(result) if f.name != "kind"]
    for label, value in zip(labels, result.as_dates()):
        table.add_row(label, value.isoformat())

    console.print(table)


def separate_command(value: str | None = None, now: str | None = None) -> None:
    """Print the day, month and year of a date (default: today)."""
    target = parse_date_option(value) if value is not None else None
    parts = separate(target, clock=resolve_clock(now))

    console.print(f"day: {parts.day}")
    console.print(f"month: {parts.month}")
    console.print(f"year: {parts.year}")
