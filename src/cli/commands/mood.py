"""Mood report CLI command."""

from typing import Optional

import click
from rich.console import Console

from cli.commands._options import user_options
from cli.utils import open_journal

console = Console()


@click.command()
@user_options
@click.option("--no-save", is_flag=True, help="Only display; don't write the report file")
def report(username: str, password: Optional[str], no_save: bool):
    """Show weekly, monthly and overall mood statistics."""
    c, journal = open_journal(username, password)

    if not len(journal):
        console.print("[yellow]No entries to analyze.[/]")
        return

    report_cfg = c["config_model"].report
    save = report_cfg.save and not no_save

    result = journal.report(save=save, max_blocks=report_cfg.max_blocks)

    console.print("\n[bold]========== MOOD REPORT ==========[/]\n")
    console.print(result["rendered_text"], markup=False, highlight=False)

    if not save:
        return
    if result["saved"]:
        console.print(f"[green]✓ Report saved to {result['report_path']}[/]")
    else:
        console.print(f"[yellow]⚠ Could not save report to {result['report_path']}[/]")
