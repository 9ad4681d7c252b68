from borrowr.integrations.prompter.abc import Prompter
from borrowr.integrations.prompter.fake import FakePrompter
from borrowr.integrations.prompter.real import ClickPrompter

__all__ = ["ClickPrompter", "FakePrompter", "Prompter"]
