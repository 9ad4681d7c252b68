"""User-facing output helpers.

Diagnostics go to stderr so stdout stays free for machine-readable output.
"""

import click


def user_output(message: str) -> None:
    """Print a diagnostic line to stderr."""
    click.echo(message, err=True)


def highlight(text: str) -> str:
    return click.style(text, fg="cyan")


def warn(message: str) -> None:
    user_output(click.style(message, fg="yellow"))


def success(message: str) -> None:
    user_output(click.style(message, fg="green"))
