import logging

import click

from borrowr import __version__
from borrowr.cli.alias import AliasedGroup
from borrowr.cli.commands.add import add_cmd
from borrowr.cli.commands.import_cmd import import_cmd
from borrowr.cli.commands.init import init_cmd
from borrowr.cli.commands.remote import remote_group
from borrowr.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(cls=AliasedGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "-v", "--version", message="%(version)s")
@click.option("--debug", is_flag=True, help="Show debug logs and full tracebacks.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Borrow components from remote registries into your project."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)
    ctx.call_on_close(ctx.obj.transport.close)


cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(import_cmd)
cli.add_alias("i", "import")
cli.add_command(remote_group)


def main() -> None:
    """CLI entry point used by the `borrowr` console script."""
    cli()
