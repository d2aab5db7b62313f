"""Journey CLI commands: browse, view, edit and delete reflections."""

import sys
from typing import Optional

import click
import structlog
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, preview, theme_text
from journal.dates import local_or_none
from journal.stats import filter_by_theme, theme_counts
from shared_types import THEME_KEYS

console = Console()
logger = structlog.get_logger()

THEME_CHOICE = click.Choice([t.value for t in THEME_KEYS])


def format_date(reflection, tz=None) -> str:
    local = local_or_none(reflection.date, tz)
    if local is None:
        return "?"
    return local.strftime("%Y-%m-%d %H:%M")


def filter_chips(counts: dict[str, int], selected: Optional[str] = None) -> str:
    """``All · N`` followed by one chip per theme with its count."""
    chips = []
    label = f"All · {counts['all']}"
    chips.append(f"[reverse]{label}[/]" if selected is None else label)
    for t in THEME_KEYS:
        label = f"{t.label} · {counts[t.value]}"
        chips.append(f"[reverse]{label}[/]" if selected == t.value else label)
    return "  ".join(chips)


def _not_found(reflection_id: str):
    logger.info("reflection_not_found", id=reflection_id)
    console.print(f"[red]Not found:[/] {reflection_id}")
    sys.exit(1)


def _fail(reflection_id: str, error: Exception):
    logger.warning("reflection_command_failed", id=reflection_id, error=str(error))
    console.print(f"[red]Error:[/] {error}")
    sys.exit(1)


@click.command()
@click.option("-t", "--theme", type=THEME_CHOICE, help="Only show one theme")
@click.option("-n", "--limit", default=20, help="Max reflections to show")
def journey(theme: Optional[str], limit: int):
    """List reflections, newest first."""
    c = get_components()
    reflections = c["store"].list_reflections()

    console.print(filter_chips(theme_counts(reflections), theme))

    selected = filter_by_theme(reflections, theme)[:limit]
    if not selected:
        if theme:
            console.print(f"[yellow]No reflections for {theme_text(theme)}.[/]")
        else:
            console.print("[yellow]No reflections yet. Run 'peacefully reflect' to write one.[/]")
        return

    table = Table(show_header=True)
    table.add_column("ID", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Theme")
    table.add_column("Words", justify="right")
    table.add_column("Reflection")

    for r in selected:
        table.add_row(
            r.id,
            format_date(r, c["tz"]),
            theme_text(r.theme),
            str(r.word_count),
            preview(r.content),
        )

    console.print(table)


@click.command()
@click.argument("reflection_id")
def view(reflection_id: str):
    """View a single reflection."""
    c = get_components()
    try:
        reflection = c["store"].get(reflection_id)
    except ValueError as e:
        _fail(reflection_id, e)

    if reflection is None:
        _not_found(reflection_id)

    console.print(f"\n{theme_text(reflection.theme)}  [dim]{format_date(reflection, c['tz'])}[/]")
    if reflection.prompt:
        console.print(f"[italic]{reflection.prompt}[/]")
    console.print()
    console.print(reflection.content)
    console.print(f"\n[dim]{reflection.word_count} words[/]")


@click.command()
@click.argument("reflection_id")
@click.option("--content", help="New content (opens editor if omitted)")
@click.option("-t", "--theme", type=THEME_CHOICE, help="Change theme")
def edit(reflection_id: str, content: Optional[str], theme: Optional[str]):
    """Edit a reflection. Its date never changes."""
    c = get_components()
    store = c["store"]

    try:
        current = store.get(reflection_id)
    except ValueError as e:
        _fail(reflection_id, e)

    if current is None:
        _not_found(reflection_id)

    if content is None and theme is None:
        content = click.edit(current.content)
        if content is None:
            console.print("[yellow]No changes.[/]")
            return

    try:
        updated = store.update(reflection_id, content=content, theme=theme)
    except ValueError as e:
        _fail(reflection_id, e)

    if updated is None:
        _not_found(reflection_id)

    console.print(f"[green]Updated:[/] {updated.id} · {updated.word_count} words")


@click.command()
@click.argument("reflection_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def delete(reflection_id: str, yes: bool):
    """Delete a reflection."""
    c = get_components()

    if not yes:
        if not click.confirm(f"Delete reflection {reflection_id}?"):
            return

    try:
        deleted = c["store"].delete(reflection_id)
    except ValueError as e:
        _fail(reflection_id, e)

    if not deleted:
        _not_found(reflection_id)

    console.print(f"[green]Deleted:[/] {reflection_id}")


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def reset(yes: bool):
    """Delete every reflection."""
    c = get_components()

    if not yes:
        if not click.confirm("Delete ALL reflections? This cannot be undone"):
            return

    removed = c["store"].reset()
    console.print(f"[green]Removed {removed} reflections.[/]")
