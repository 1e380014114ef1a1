"""Shared click options for commands that open a user's journal."""

import click


def user_options(func):
    """Add --user and --password (env MOODLOG_USER / MOODLOG_PASSWORD)."""
    func = click.option(
        "-p",
        "--password",
        envvar="MOODLOG_PASSWORD",
        default=None,
        help="Password (prompted if omitted)",
    )(func)
    func = click.option(
        "-u",
        "--user",
        "username",
        envvar="MOODLOG_USER",
        required=True,
        help="Journal owner",
    )(func)
    return func
