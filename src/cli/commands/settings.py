"""Settings CLI command."""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from cli.config import load_config, update_config

console = Console()


@click.command()
@click.option("--name", help="Your name, used in the greeting")
@click.option("--reminder-time", help="Daily reminder time (HH:MM, 24h)")
@click.option("--reminder/--no-reminder", "reminder_enabled", default=None, help="Daily reminder on/off")
@click.option("--timezone", "tz_name", help="IANA timezone for day boundaries ('local' for host time)")
@click.option("--dark-mode/--light-mode", "dark_mode", default=None, help="Display preference")
def settings(
    name: Optional[str],
    reminder_time: Optional[str],
    reminder_enabled: Optional[bool],
    tz_name: Optional[str],
    dark_mode: Optional[bool],
):
    """Show or change preferences."""
    updates: dict = {}
    if name is not None:
        updates.setdefault("profile", {})["user_name"] = name
    if reminder_time is not None:
        updates.setdefault("reminder", {})["time"] = reminder_time
    if reminder_enabled is not None:
        updates.setdefault("reminder", {})["enabled"] = reminder_enabled
    if tz_name is not None:
        updates.setdefault("display", {})["timezone"] = None if tz_name == "local" else tz_name
    if dark_mode is not None:
        updates.setdefault("display", {})["dark_mode"] = dark_mode

    try:
        config = update_config(updates) if updates else load_config()
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if updates:
        console.print("[green]Settings saved.[/]")

    table = Table(show_header=False)
    table.add_column("Setting", style="dim")
    table.add_column("Value")
    table.add_row("Name", config.profile.user_name or "[dim](not set)[/]")
    table.add_row(
        "Daily reminder",
        f"{'on' if config.reminder.enabled else 'off'} at {config.reminder.time}",
    )
    table.add_row("Timezone", config.display.timezone or "local")
    table.add_row("Dark mode", "on" if config.display.dark_mode else "off")
    table.add_row("Reflections", str(config.paths.reflections_dir))
    console.print(table)
