"""Prompter implementation using click prompts."""

import click

from borrowr.integrations.prompter.abc import Prompter


def parse_selection(answer: str, choices: list[str]) -> list[str] | None:
    """Parse a multiselect answer such as "1,3 4" or "a".

    Returns:
        Selected choices in choice order, or None if the answer is invalid
    """
    tokens = answer.replace(",", " ").split()
    if [token.lower() for token in tokens] == ["a"]:
        return list(choices)

    picked: set[int] = set()
    for token in tokens:
        if not token.isdigit():
            return None
        number = int(token)
        if number < 1 or number > len(choices):
            return None
        picked.add(number - 1)
    return [choice for i, choice in enumerate(choices) if i in picked]


class ClickPrompter(Prompter):
    """Production implementation reading answers from the terminal."""

    def confirm(self, message: str, default: bool) -> bool:
        return click.confirm(message, default=default, err=True)

    def text(self, message: str, default: str | None) -> str:
        answer = click.prompt(message, default=default or "", show_default=bool(default), err=True)
        return str(answer).strip()

    def multiselect(
        self, message: str, choices: list[str], preselected: list[str]
    ) -> list[str]:
        click.echo(message, err=True)
        for i, choice in enumerate(choices, start=1):
            marker = "*" if choice in preselected else " "
            click.echo(f"  [{marker}] {i}. {choice}", err=True)

        hint = "Numbers separated by commas, 'a' for all"
        if preselected:
            hint += ", blank keeps the marked ones"
        while True:
            answer = click.prompt(hint, default="", show_default=False, err=True)
            if not answer.strip():
                return [choice for choice in choices if choice in preselected]
            selection = parse_selection(answer, choices)
            if selection is not None:
                return selection
            click.echo(click.style("Invalid selection, try again.", fg="yellow"), err=True)
