"""Output utilities for CLI commands with clear intent.

- user_output: messages for the person at the terminal (stderr)
- machine_output: the report itself (stdout), safe to pipe or capture
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a diagnostic or error message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write report output to stdout."""
    click.echo(message, nl=nl)
