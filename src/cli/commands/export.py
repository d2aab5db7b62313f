"""Export CLI command."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from cli.utils import get_components
from journal.export import ReflectionExporter
from shared_types import THEME_KEYS

console = Console()


@click.command()
@click.option("-o", "--output", required=True, type=click.Path(), help="Output file path")
@click.option(
    "-f",
    "--format",
    "fmt",
    default="json",
    type=click.Choice(["json", "markdown"]),
    help="Export format",
)
@click.option("-t", "--theme", type=click.Choice([t.value for t in THEME_KEYS]), help="Filter by theme")
@click.option("-d", "--days", type=int, help="Only last N days")
@click.option("-n", "--limit", type=int, help="Max reflections to export")
def export(output: str, fmt: str, theme: Optional[str], days: Optional[int], limit: Optional[int]):
    """Export reflections to file."""
    c = get_components()
    exporter = ReflectionExporter(c["store"])

    output_path = Path(output)

    with console.status(f"Exporting to {fmt}..."):
        if fmt == "json":
            count = exporter.export_json(output_path, theme=theme, days=days, limit=limit)
        else:
            count = exporter.export_markdown(output_path, theme=theme, days=days, limit=limit)

    console.print(f"[green]Exported {count} reflections to {output_path}[/]")
