"""Account registration CLI command."""

import sys

import click
from rich.console import Console
from rich.markup import escape

from accounts import UserExistsError
from cli.utils import get_components

console = Console()


@click.command()
@click.option("-u", "--user", "username", prompt="Username", help="Username (e.g. university email)")
@click.option(
    "-p",
    "--password",
    prompt="Create password",
    hide_input=True,
    confirmation_prompt=True,
    help="Password",
)
def register(username: str, password: str):
    """Register a new journal user."""
    c = get_components()

    try:
        c["users"].register(username, password)
    except UserExistsError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Invalid credentials:[/] {escape(str(e))}")
        sys.exit(1)

    console.print("[green]✓[/] Registration successful!")
    console.print(
        "\n[bold]NON-DISCLOSURE & CONSENT[/]\n"
        "Everything you record is kept confidential and stays on this machine.\n"
        "Nothing is shared externally."
    )
