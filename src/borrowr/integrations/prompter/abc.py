"""Interactive prompt abstraction.

Commands never call click prompts directly. Going through Prompter lets tests
script the answers and keeps non-interactive flags easy to honour.
"""

from abc import ABC, abstractmethod


class Prompter(ABC):
    """Abstract interactive prompts for dependency injection."""

    @abstractmethod
    def confirm(self, message: str, default: bool) -> bool:
        """Ask a yes/no question."""
        ...

    @abstractmethod
    def text(self, message: str, default: str | None) -> str:
        """Ask for a line of text. Returns "" when the user enters nothing."""
        ...

    @abstractmethod
    def multiselect(
        self, message: str, choices: list[str], preselected: list[str]
    ) -> list[str]:
        """Ask the user to pick any number of choices.

        Returns:
            Selected choices in the order they appear in choices
        """
        ...
