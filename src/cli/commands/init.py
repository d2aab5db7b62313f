"""Init CLI command."""

import sys
from typing import Optional

import click
from rich.console import Console

from cli.config import find_config, load_config, save_config

console = Console()


@click.command()
@click.option("--name", help="What should we call you?")
def init(name: Optional[str]):
    """Create the reflections directory and a default config."""
    try:
        config = load_config()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    config.paths.reflections_dir.mkdir(parents=True, exist_ok=True)
    console.print(f"[green]✓[/] reflections_dir: {config.paths.reflections_dir}")

    existing = find_config()
    if name is not None:
        config.profile.user_name = name.strip()
    if existing is None or name is not None:
        config.profile.onboarding_done = True
        path = save_config(config, existing)
        console.print(f"[green]✓[/] Config: {path}")

    console.print("\n[bold]Ready![/]")
    console.print("  Run [cyan]peacefully reflect[/] to write your first reflection")
    console.print("  Run [cyan]peacefully growth[/] to see your streak and weekly pattern")
