"""Mood journal entry CLI commands."""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.commands._options import user_options
from cli.utils import open_journal

console = Console()

MOOD_CHOICES_HINT = "Mood (Happy, Sad, Calm, Angry, Neutral)"

CATEGORY_STYLE = {
    "Excellent": "green",
    "Good": "cyan",
    "Moderate": "yellow",
    "Low": "red",
}


@click.command()
@user_options
@click.option("-m", "--mood", help=MOOD_CHOICES_HINT)
@click.option("-r", "--reflection", help="Tell me about your day")
@click.option("--event", help="What event caused you to feel this emotion?")
@click.option("--response", help="How did you respond to the situation?")
def add(
    username: str,
    password: Optional[str],
    mood: Optional[str],
    reflection: Optional[str],
    event: Optional[str],
    response: Optional[str],
):
    """Add a mood journal entry. Prompts for anything not given."""
    from journal.notes import compose_emotion_notes

    _, journal = open_journal(username, password)

    if mood is None:
        mood = click.prompt(MOOD_CHOICES_HINT, default="", show_default=False)
    if reflection is None:
        reflection = click.prompt("Tell me about your day", default="", show_default=False)
    if event is None:
        event = click.prompt(
            "What event caused you to feel such emotion?", default="", show_default=False
        )
    if response is None:
        response = click.prompt(
            "How did you respond to the situation or emotion you experienced?",
            default="",
            show_default=False,
        )

    try:
        entry = journal.add(mood, reflection, compose_emotion_notes(event, response))
    except ValueError as e:
        console.print(f"[red]Entry not saved:[/] {escape(str(e))}")
        sys.exit(1)
    console.print(
        f"[green]✓ Entry added:[/] {entry.date}  {escape(entry.mood)} "
        f"(rating {entry.rating}, {entry.category})"
    )


@click.command("list")
@user_options
def list_entries(username: str, password: Optional[str]):
    """List entries, newest first."""
    from journal.notes import format_emotion_notes

    _, journal = open_journal(username, password)

    if not len(journal):
        console.print("[yellow]No entries found.[/]")
        return

    table = Table(show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Date & Time", style="cyan")
    table.add_column("Mood")
    table.add_column("Rating", justify="right")
    table.add_column("Category")
    table.add_column("Reflection")

    for index, e in journal.sorted_for_display():
        style = CATEGORY_STYLE.get(e.category, "dim")
        table.add_row(
            str(index + 1),
            escape(e.date),
            escape(e.mood),
            str(e.rating),
            f"[{style}]{e.category}[/]",
            f"{escape(e.reflection)}\n[dim]{escape(format_emotion_notes(e.emotion_notes))}[/]",
        )

    console.print(table)


@click.command()
@user_options
@click.argument("number", type=int)
@click.option("-m", "--mood", help="New mood (blank keeps current)")
@click.option("-r", "--reflection", help="New reflection (blank keeps current)")
@click.option("-n", "--notes", "emotion_notes", help="New emotion notes (blank keeps current)")
def edit(
    username: str,
    password: Optional[str],
    number: int,
    mood: Optional[str],
    reflection: Optional[str],
    emotion_notes: Optional[str],
):
    """Edit entry NUMBER (as shown by `list`)."""
    from journal.entry import EntryNotFoundError

    _, journal = open_journal(username, password)

    try:
        entry = journal.get(number - 1)
    except EntryNotFoundError:
        console.print("[red]Invalid selection.[/]")
        sys.exit(1)

    console.print(f"Editing entry - {entry.date}")
    if mood is None:
        mood = click.prompt(
            f"New mood (leave blank to keep '{entry.mood}')", default="", show_default=False
        )
    if reflection is None:
        reflection = click.prompt(
            "New reflection (leave blank to keep old)", default="", show_default=False
        )
    if emotion_notes is None:
        emotion_notes = click.prompt(
            "New emotion notes (leave blank to keep old)", default="", show_default=False
        )

    try:
        entry = journal.edit(
            number - 1, mood=mood, reflection=reflection, emotion_notes=emotion_notes
        )
    except ValueError as e:
        console.print(f"[red]Entry not updated:[/] {escape(str(e))}")
        sys.exit(1)
    console.print(
        f"[green]✓ Entry updated:[/] {escape(entry.mood)} "
        f"(rating {entry.rating}, {entry.category})"
    )


@click.command()
@user_options
@click.argument("number", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def delete(username: str, password: Optional[str], number: int, yes: bool):
    """Delete entry NUMBER (as shown by `list`)."""
    from journal.entry import EntryNotFoundError

    _, journal = open_journal(username, password)

    try:
        entry = journal.get(number - 1)
    except EntryNotFoundError:
        console.print("[red]Invalid selection.[/]")
        sys.exit(1)

    if not yes and not click.confirm(f"Delete entry from {entry.date}?"):
        console.print("[yellow]Deletion canceled.[/]")
        return

    journal.delete(number - 1)
    console.print("[green]✓ Entry deleted.[/]")
