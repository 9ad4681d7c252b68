"""Exception taxonomy for borrowr.

Every error the CLI knows how to report derives from BorrowrError. The CLI
error boundary turns these into a single "Error: ..." line and exit code 1,
except NothingSelectedError which exits cleanly.
"""

from pathlib import Path


class BorrowrError(Exception):
    """Base class for all well-known borrowr failures."""


class InvalidBlockSpecError(BorrowrError):
    """A block spec string could not be parsed."""

    def __init__(self, spec: str, reason: str) -> None:
        self.spec = spec
        super().__init__(f"Invalid block-spec: {spec!r}. {reason}.")


class ConfigurationMissingError(BorrowrError):
    """No configuration, or a required section of it, was found."""


class ConfigurationInvalidError(BorrowrError):
    """Configuration exists but does not match the expected schema."""


class TransportError(BorrowrError):
    """A single HTTP request failed."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        super().__init__(f"Request to {url} failed: {detail}")


class RegistryFetchError(BorrowrError):
    """An index document or a registry file could not be retrieved."""

    def __init__(self, url: str, detail: str | None = None) -> None:
        self.url = url
        message = f"Failed to fetch registry from {url}."
        if detail:
            message += f"\n{detail}"
        super().__init__(message)


class NothingSelectedError(BorrowrError):
    """The user selected nothing to install. Not a failure."""


class InstallError(BorrowrError):
    """Writing a file or creating its directory failed."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"Failed to install {path}: {detail}")


class InstallDependenciesError(BorrowrError):
    """The package manager failed to install declared dependencies."""

    def __init__(self, command: list[str], detail: str) -> None:
        self.command = command
        cmd_str = " ".join(command)
        super().__init__(f"Failed to install dependencies\nCommand: {cmd_str}\n{detail}")
