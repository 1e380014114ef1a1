"""Mood journal export CLI command."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from cli.commands._options import user_options
from cli.utils import open_journal

console = Console()


@click.command()
@user_options
@click.option("-o", "--output", required=True, type=click.Path(), help="Output file path")
@click.option(
    "-f",
    "--format",
    "fmt",
    default="json",
    type=click.Choice(["json", "markdown"]),
    help="Export format",
)
@click.option("-d", "--days", type=int, help="Only last N days")
def export(username: str, password: Optional[str], output: str, fmt: str, days: Optional[int]):
    """Export journal entries to file."""
    from journal.export import MoodJournalExporter

    _, journal = open_journal(username, password)
    exporter = MoodJournalExporter(journal.entries)

    output_path = Path(output)

    with console.status(f"Exporting to {fmt}..."):
        if fmt == "json":
            count = exporter.export_json(output_path, days=days)
        else:
            count = exporter.export_markdown(output_path, days=days)

    console.print(f"[green]Exported {count} entries to {output_path}[/]")
