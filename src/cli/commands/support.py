"""Support and guidance information."""

import click
from rich.console import Console
from rich.panel import Panel

console = Console()

HOTLINES = [
    (
        "National Center for Mental Health",
        ["0917-899-8727 (Globe/TM)", "0908-639-2672 (Smart/TNT)", "1553 (Landline)"],
    ),
    ("HOPELINE", ["0917-558-4673 (Globe/TM)", "0918-873-4673 (Smart/TNT)"]),
    ("In Touch Crisis Line", ["0917-800-1123"]),
    ("CIT-U Guidance Office", ["411-2000 local 132"]),
]

ENCOURAGEMENT = (
    "You are not alone.\n"
    "Your feelings are valid.\n"
    "You deserve peace and healing.\n"
    "Thank you for being here."
)


def format_hotlines() -> str:
    lines = []
    for name, numbers in HOTLINES:
        lines.append(f"{name}:")
        lines.extend(f"  • {n}" for n in numbers)
        lines.append("")
    return "\n".join(lines).rstrip()


@click.command()
@click.option("--yes", "-y", "talk", is_flag=True, help="Show hotlines without asking")
def support(talk: bool):
    """Support and guidance contacts."""
    if not talk:
        talk = click.confirm("Do you wish to talk to someone?", default=True)

    if talk:
        console.print(Panel(format_hotlines(), title="HOTLINES & EMERGENCY CONTACTS"))
    else:
        console.print(Panel(ENCOURAGEMENT, title="SUPPORT & GUIDANCE"))
