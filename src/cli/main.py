"""CLI entry point for Peacefully."""

import sys
from pathlib import Path

import click

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import (
    delete,
    edit,
    export,
    growth,
    init,
    journey,
    reflect,
    reset,
    settings,
    streak,
    view,
)
from cli.config import load_config
from cli.logging_config import setup_logging


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def cli(verbose: bool, json_logs: bool):
    """Peacefully - a quiet daily reflection journal."""
    try:
        log_cfg = load_config()
    except ValueError:
        # Commands report config errors themselves
        setup_logging(json_mode=json_logs, level="DEBUG" if verbose else "WARNING")
        return

    setup_logging(
        json_mode=json_logs or log_cfg.logging.json_mode,
        level="DEBUG" if verbose else log_cfg.logging.level,
        log_file=log_cfg.paths.log_file if log_cfg.logging.to_file else None,
    )


cli.add_command(init)
cli.add_command(reflect)
cli.add_command(journey)
cli.add_command(view)
cli.add_command(edit)
cli.add_command(delete)
cli.add_command(reset)
cli.add_command(growth)
cli.add_command(streak)
cli.add_command(export)
cli.add_command(settings)


if __name__ == "__main__":
    cli()
