"""Output helpers for the gittag CLI.

user_output() is for status and error messages (stderr).
machine_output() is for results other programs may consume (stdout).
"""

import sys

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a message for the user to stderr."""
    click.echo(message, file=sys.stderr, nl=nl)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    """Write a result to stdout."""
    click.echo(message, nl=nl)
