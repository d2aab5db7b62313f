"""Reflect CLI command: write today's reflection."""

import sys

import click
import structlog
from rich.console import Console

from cli.utils import get_components, theme_text
from journal.dates import resolve_now
from journal.models import Reflection
from journal.prompts import greeting, random_prompt
from journal.streak import get_current_streak
from shared_types import DEFAULT_THEME, THEME_KEYS

console = Console()
logger = structlog.get_logger()


def strip_prompt_header(text: str, prompt_text: str) -> str:
    """Drop the first ``# {prompt}`` line the editor template inserted."""
    lines = text.splitlines()
    header = f"# {prompt_text}"
    for i, line in enumerate(lines):
        if line.strip() == header:
            del lines[i]
            break
    return "\n".join(lines)


@click.command()
@click.option(
    "-t",
    "--theme",
    default=DEFAULT_THEME.value,
    type=click.Choice([t.value for t in THEME_KEYS]),
    help="Theme for this reflection",
)
@click.option("--prompt", "prompt_text", help="Prompt to write against (random if omitted)")
@click.argument("content", required=False)
def reflect(theme: str, prompt_text: str, content: str):
    """Save a reflection. Opens editor if no content provided."""
    c = get_components()
    config = c["config"]
    now = resolve_now(tz=c["tz"])

    prompt_text = prompt_text or random_prompt(theme)

    if not content:
        name = config.profile.user_name or "there"
        console.print(f"[bold]{greeting(now.hour)}, {name}[/]")
        console.print(f"{theme_text(theme)}  [italic]{prompt_text}[/]")
        content = click.edit(f"\n# {prompt_text}\n", require_save=True)
        if content:
            content = strip_prompt_header(content, prompt_text)
        if not content or not content.strip():
            console.print("[yellow]No content provided, cancelled.[/]")
            return

    try:
        reflection = Reflection.new(content, theme=theme, prompt=prompt_text, now=now)
        c["store"].save(reflection)
    except ValueError as e:
        logger.warning("reflection_rejected", theme=theme, error=str(e))
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    streak = get_current_streak(c["store"].list_reflections(), now=now, tz=c["tz"])
    console.print(
        f"[green]Saved:[/] {reflection.id} · {theme_text(reflection.theme)} · "
        f"{reflection.word_count} words"
    )
    console.print(f"[dim]Consistency: {streak} day{'s' if streak != 1 else ''}[/]")
