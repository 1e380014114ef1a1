"""Shared CLI utilities."""

import sys
from typing import Optional

import click
import structlog
from rich.console import Console
from rich.markup import escape

console = Console()
logger = structlog.get_logger()


def get_components(username: Optional[str] = None) -> dict:
    """Initialize components from config.

    Args:
        username: If given, also open that user's journal storage.
    """
    from accounts import UserStore
    from cli.config import get_paths, load_config, load_config_model
    from journal import MoodJournalStorage

    try:
        config_model = load_config_model()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)
    config = config_model.to_dict()
    paths = get_paths(config)

    storage = MoodJournalStorage(paths["data_dir"], username) if username is not None else None

    return {
        "config": config,
        "config_model": config_model,
        "paths": paths,
        "users": UserStore(paths["users_file"]),
        "storage": storage,
    }


def login(users, username: str, password: Optional[str], max_attempts: int = 3) -> bool:
    """Authenticate ``username``, prompting for the password when not supplied.

    A password passed on the command line gets a single attempt.
    """
    from accounts import NoAccountsError, UnknownUserError

    attempts = 1 if password is not None else max_attempts
    for _ in range(attempts):
        if password is None:
            entered = click.prompt("Password", hide_input=True, default="", show_default=False)
        else:
            entered = password
        if not entered.strip():
            console.print("[yellow]Password cannot be empty.[/]")
            continue
        try:
            if users.authenticate(username, entered):
                return True
        except NoAccountsError:
            console.print("[red]No accounts found.[/] Run [bold]moodlog register[/] first.")
            return False
        except UnknownUserError:
            console.print(f"[red]Username does not exist:[/] {escape(username)}")
            return False
        console.print("[red]Incorrect password.[/]")
        if password is not None:
            return False

    console.print("[red]Too many failed login attempts. Try again later.[/]")
    logger.warning("login_locked_out", user=username)
    return False


def open_journal(username: str, password: Optional[str]):
    """Log in and load the user's journal, exiting on failure.

    Returns:
        (components dict, MoodJournal)
    """
    from journal import MoodJournal

    c = get_components(username)
    if not login(c["users"], username, password, c["config_model"].auth.max_login_attempts):
        sys.exit(1)
    return c, MoodJournal(c["storage"])
