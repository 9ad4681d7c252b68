"""Option helpers shared by the install commands."""

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

from borrowr.cli.output import highlight, user_output
from borrowr.integrations.prompter.abc import Prompter

F = TypeVar("F", bound=Callable[..., Any])


def cwd_option(func: F) -> F:
    return click.option(
        "-c",
        "--cwd",
        "cwd_option",
        type=click.Path(path_type=Path, file_okay=False),
        default=None,
        help="The working directory. Defaults to the current directory.",
    )(func)


def overwrite_confirmer(prompter: Prompter) -> Callable[[Path], bool]:
    """Build the per-file overwrite prompt used by the installer."""

    def confirm(path: Path) -> bool:
        if prompter.confirm(f"File {path} already exists. Would you like to overwrite?", False):
            return True
        user_output(
            f"Skipped {path}. To overwrite, run with the "
            f"{click.style('--overwrite', fg='green')} flag."
        )
        return False

    return confirm


def confirm_plan(prompter: Prompter, heading: str, lines: list[str], question: str) -> bool:
    """Show the install plan and ask whether to proceed."""
    message = heading + "\n"
    for line in lines:
        message += f" - {highlight(line)}\n"
    message += f"\n{question}"
    return prompter.confirm(message, True)
