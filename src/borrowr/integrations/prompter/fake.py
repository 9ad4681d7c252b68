"""Fake prompter for testing.

FakePrompter returns scripted answers and records every message it was asked.
"""

from borrowr.integrations.prompter.abc import Prompter


class FakePrompter(Prompter):
    """In-memory fake with scripted answers.

    Answers are consumed in order. When a script runs out, confirm() returns
    the prompt's default, text() returns the default (or ""), and
    multiselect() returns the preselection.
    """

    def __init__(
        self,
        *,
        confirms: list[bool] | None = None,
        texts: list[str] | None = None,
        selections: list[list[str]] | None = None,
    ) -> None:
        self._confirms = list(confirms or [])
        self._texts = list(texts or [])
        self._selections = list(selections or [])
        self._confirm_messages: list[str] = []
        self._text_messages: list[str] = []
        self._multiselect_calls: list[tuple[str, list[str], list[str]]] = []

    @property
    def confirm_messages(self) -> list[str]:
        """Messages passed to confirm(), in call order."""
        return self._confirm_messages

    @property
    def text_messages(self) -> list[str]:
        """Messages passed to text(), in call order."""
        return self._text_messages

    @property
    def multiselect_calls(self) -> list[tuple[str, list[str], list[str]]]:
        """(message, choices, preselected) for every multiselect() call."""
        return self._multiselect_calls

    def confirm(self, message: str, default: bool) -> bool:
        self._confirm_messages.append(message)
        if not self._confirms:
            return default
        return self._confirms.pop(0)

    def text(self, message: str, default: str | None) -> str:
        self._text_messages.append(message)
        if not self._texts:
            return default or ""
        return self._texts.pop(0)

    def multiselect(
        self, message: str, choices: list[str], preselected: list[str]
    ) -> list[str]:
        self._multiselect_calls.append((message, list(choices), list(preselected)))
        if not self._selections:
            return [choice for choice in choices if choice in preselected]
        return self._selections.pop(0)
