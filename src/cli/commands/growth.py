"""Growth CLI commands: summary stats, weekly theme chart, streaks."""

import click
from rich.console import Console
from rich.table import Table

from cli.utils import THEME_STYLES, get_components
from journal.dates import resolve_now
from journal.stats import compute_stats
from journal.streak import get_current_streak, get_longest_streak, unique_reflection_days
from journal.weekly import WeekView, build_week_view
from shared_types import THEME_KEYS

console = Console()

BAR_WIDTH = 24


def _days(n: int) -> str:
    return f"{n} day{'s' if n != 1 else ''}"


def render_week_chart(view: WeekView) -> Table:
    """Horizontal stacked bars, one row per weekday, segments per theme."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Day", style="dim", width=2)
    table.add_column("Bar")
    table.add_column("Count", justify="right", style="dim")

    scale = BAR_WIDTH / view.max_bar
    for label, day, total in zip(view.day_labels, view.days, view.totals):
        segments = []
        for t in THEME_KEYS:
            if day[t]:
                width = max(1, round(day[t] * scale))
                segments.append(f"[{THEME_STYLES[t]}]{'█' * width}[/]")
        table.add_row(label, "".join(segments) or "[dim]·[/]", str(total) if total else "")
    return table


@click.command()
@click.option(
    "-w",
    "--week",
    "week_offset",
    default=0,
    type=click.IntRange(max=0),
    help="Week offset: 0 = this week, -1 = last week",
)
def growth(week_offset: int):
    """Show reflection stats and the weekly pattern by theme."""
    c = get_components()
    tz = c["tz"]
    now = resolve_now(tz=tz)
    reflections = c["store"].list_reflections()

    stats = compute_stats(reflections, now=now, tz=tz)

    summary = Table(title="Growth", show_header=False)
    summary.add_column("Stat", style="dim")
    summary.add_column("Value", justify="right", style="bold")
    summary.add_row("Reflections", str(stats.total))
    summary.add_row("This week", str(stats.this_week))
    summary.add_row("Consistency", _days(stats.current_streak))
    summary.add_row("Longest streak", _days(stats.longest_streak))
    summary.add_row("Total words written", f"{stats.total_words:,}")
    console.print(summary)

    view = build_week_view(reflections, week_offset, now=now, tz=tz)
    back = "‹" if view.can_go_back else " "
    forward = "›" if view.can_go_forward else " "
    console.print(f"\n[bold]Weekly Reflections Pattern[/]  {back} {view.label} {forward}")

    if not view.has_data:
        console.print("[dim]No data logged this week[/]")
    else:
        console.print(render_week_chart(view))
        legend = "  ".join(
            f"[{THEME_STYLES[t]}]■[/] {t.label} {n}" for t, n in view.theme_totals().items() if n
        )
        console.print(legend)

    hints = []
    if view.can_go_back:
        hints.append(f"previous: -w {view.week_offset - 1}")
    if view.can_go_forward:
        hints.append(f"next: -w {view.week_offset + 1}")
    if hints:
        console.print(f"[dim]{' | '.join(hints)}[/]")


@click.command()
def streak():
    """Show current and longest streak."""
    c = get_components()
    tz = c["tz"]
    reflections = c["store"].list_reflections()

    current = get_current_streak(reflections, tz=tz)
    longest = get_longest_streak(reflections, tz=tz)
    active = len(unique_reflection_days(reflections, tz))

    console.print(f"[bold]Current streak:[/] {_days(current)}")
    console.print(f"[bold]Longest streak:[/] {_days(longest)}")
    console.print(f"[dim]Active days: {active}[/]")
    if current == 0 and reflections:
        console.print("[yellow]Write a reflection today to start a new streak.[/]")
