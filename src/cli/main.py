"""CLI entry point for moodlog."""

import sys
from pathlib import Path

import click

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import add, delete, edit, export, init, list_entries, register, report, support
from cli.config import get_paths, load_config_model
from cli.logging_config import setup_logging


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
def cli(verbose: bool, json_logs: bool):
    """Mood journal - record how you feel and see your mood trends."""
    try:
        config = load_config_model()
    except ValueError as e:
        click.echo(f"Config error: {e}", err=True)
        sys.exit(1)

    log_cfg = config.logging
    setup_logging(
        json_mode=json_logs or log_cfg.json_mode,
        level="DEBUG" if verbose else log_cfg.level,
        log_file=get_paths(config.to_dict())["log_file"],
        file_level=log_cfg.file_level,
    )


cli.add_command(init)
cli.add_command(register)
cli.add_command(add)
cli.add_command(list_entries)
cli.add_command(edit)
cli.add_command(delete)
cli.add_command(report)
cli.add_command(export)
cli.add_command(support)


if __name__ == "__main__":
    cli()
