"""Command aliases (e.g. `borrowr i` for `borrowr import`)."""

import click


class AliasedGroup(click.Group):
    """Click Group that resolves registered aliases to their command.

    Aliases are shown next to the command name in help output instead of as
    separate rows.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._aliases: dict[str, str] = {}

    def add_alias(self, alias: str, command_name: str) -> None:
        self._aliases[alias] = command_name

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self._aliases.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        _, cmd, remaining = super().resolve_command(ctx, args)
        # Report the canonical name so usage lines read "borrowr import"
        return (cmd.name if cmd is not None else None), cmd, remaining

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        aliases_by_command: dict[str, list[str]] = {}
        for alias, command_name in self._aliases.items():
            aliases_by_command.setdefault(command_name, []).append(alias)

        rows = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            label = ", ".join([name, *aliases_by_command.get(name, [])])
            rows.append((label, cmd.get_short_help_str(limit=formatter.width)))

        if rows:
            with formatter.section("Commands"):
                formatter.write_dl(rows)
