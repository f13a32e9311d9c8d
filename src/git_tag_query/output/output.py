"""User-facing output routed through click."""

import click


def user_output(message: str) -> None:
    """Write a message for the user to stderr.

    Stdout stays reserved for machine-readable results.
    """
    click.echo(message, err=True)
