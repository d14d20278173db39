"""User-facing output helpers for CLI commands."""

import click


def user_output(message: str = "") -> None:
    """Print a message for the user on stderr, keeping stdout for data."""
    click.echo(message, err=True)
