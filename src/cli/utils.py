"""Shared CLI utilities."""

import sys

import structlog
from rich.console import Console

from shared_types import Theme

console = Console()
logger = structlog.get_logger()

THEME_STYLES = {
    Theme.PATIENCE: "sky_blue2",
    Theme.GRATITUDE: "light_salmon3",
    Theme.GROWTH: "dark_sea_green",
    Theme.REFLECTION: "grey70",
    Theme.HOPE: "khaki3",
}


def get_components():
    """Load config and open the reflection store.

    Exits with an error message if the config can't be loaded.
    """
    from cli.config import get_tz, load_config
    from journal import ReflectionStore

    try:
        config = load_config()
        tz = get_tz(config)
    except ValueError as e:
        logger.error("config_load_failed", error=str(e))
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    store = ReflectionStore(config.paths.reflections_dir)

    return {
        "config": config,
        "tz": tz,
        "store": store,
    }


def theme_text(theme: str) -> str:
    """Rich markup for a theme label; unknown keys are shown raw."""
    key = Theme.parse(theme)
    if key is None:
        return f"[dim]{theme or '?'}[/]"
    return f"[{THEME_STYLES[key]}]{key.label}[/]"


def preview(text: str, length: int = 60) -> str:
    flat = " ".join(text.split())
    return flat if len(flat) <= length else flat[: length - 1] + "…"
