"""Admin commands for initializing and editing the config file."""

import sys
import tomllib

from rich.console import Console
from rich.table import Table

from datesugar.config import create_default_config, get_config_path, load_config, set_option

console = Console()


def init_command(force: bool = False) -> None:
    """Create the default config file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'datesugar init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print(f"[dim]Config: {config_path}[/dim]")


def show_config() -> None:
    """Print the effective configuration."""
    config_path = get_config_path()
    try:
        config = load_config(config_path)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Could not read {config_path}: {e}[/red]", style="bold")
        sys.exit(1)

    table = Table(title="Configuration")
    table.add_column("Option", style="cyan")
    table.add_column("Value")
    for key, value in sorted(config.items()):
        table.add_row(key, str(value))

    console.print(table)
    if not config_path.exists():
        console.print(f"[dim]Using defaults, no file at {config_path}[/dim]")


def config_command(key: str | None = None, value: str | None = None) -> None:
    """Show the configuration, or set one option."""
    if key is None:
        show_config()
        return

    if value is None:
        console.print(f"[red]Missing value for '{key}'[/red]", style="bold")
        sys.exit(1)

    try:
        config = set_option(key, value)
    except KeyError:
        console.print(f"[red]Unknown option '{key}'[/red]", style="bold")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] {key} = {config[key]}")
