"""Error boundary handling for CLI commands.

Well-known borrowr errors are reported as a single line without a stack
trace. Anything else bubbles up normally.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from borrowr.cli.output import user_output, warn
from borrowr.core.errors import BorrowrError, NothingSelectedError

F = TypeVar("F", bound=Callable[..., Any])


def cli_error_boundary(func: F) -> F:
    """Decorator that turns BorrowrError into a clean message and exit code.

    - NothingSelectedError: message shown, exit 0
    - any other BorrowrError: "Error: ..." in red, exit 1

    When the click context object has debug enabled the error is re-raised
    so the full traceback is shown.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx: BorrowrContext):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except NothingSelectedError as e:
            warn(str(e))
            raise SystemExit(0) from None
        except BorrowrError as e:
            click_ctx = click.get_current_context(silent=True)
            if click_ctx is not None and getattr(click_ctx.obj, "debug", False):
                raise
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
