"""Output helpers for user-facing messages."""

import click


def user_output(message: str, nl: bool = True) -> None:
    """Write a message for the user to stderr.

    stdout stays free for the inline picker.
    """
    click.echo(message, nl=nl, err=True)
