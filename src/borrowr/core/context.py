"""Application context with dependency injection.

BorrowrContext holds every collaborator a command needs. It is created once
at the CLI entry point and threaded through commands via click's context
object, so nothing in borrowr relies on process-wide state.
"""

from dataclasses import dataclass
from pathlib import Path

from borrowr.integrations.config_store import ConfigStore, RealConfigStore
from borrowr.integrations.package_manager import PackageManager, RealPackageManager
from borrowr.integrations.prompter import ClickPrompter, Prompter
from borrowr.integrations.transport import RealRegistryTransport, RegistryTransport


@dataclass(frozen=True)
class BorrowrContext:
    """Immutable context holding all dependencies for borrowr operations.

    Attributes:
        config_store: Reads and writes .borrowrrc configuration
        transport: Fetches registry indexes and raw files
        package_manager: Installs declared package dependencies
        prompter: Interactive confirmations and selections
        cwd: Current working directory at CLI invocation
        debug: Re-raise errors with full tracebacks instead of one-line messages
    """

    config_store: ConfigStore
    transport: RegistryTransport
    package_manager: PackageManager
    prompter: Prompter
    cwd: Path
    debug: bool

    @staticmethod
    def for_test(
        config_store: ConfigStore | None = None,
        transport: RegistryTransport | None = None,
        package_manager: PackageManager | None = None,
        prompter: Prompter | None = None,
        cwd: Path | None = None,
        debug: bool = False,
    ) -> "BorrowrContext":
        """Create test context with fakes for anything not provided.

        Example:
            >>> from borrowr.integrations.transport import FakeRegistryTransport
            >>> transport = FakeRegistryTransport(documents={url: text})
            >>> ctx = BorrowrContext.for_test(transport=transport, cwd=tmp_path)
        """
        from borrowr.integrations.config_store import FakeConfigStore
        from borrowr.integrations.package_manager import FakePackageManager
        from borrowr.integrations.prompter import FakePrompter
        from borrowr.integrations.transport import FakeRegistryTransport

        return BorrowrContext(
            config_store=config_store if config_store is not None else FakeConfigStore(),
            transport=transport if transport is not None else FakeRegistryTransport(),
            package_manager=(
                package_manager if package_manager is not None else FakePackageManager()
            ),
            prompter=prompter if prompter is not None else FakePrompter(),
            cwd=cwd if cwd is not None else Path("/fake/project"),
            debug=debug,
        )


def create_context(*, debug: bool) -> BorrowrContext:
    """Create production context with real implementations.

    Called once at CLI entry point.
    """
    return BorrowrContext(
        config_store=RealConfigStore(),
        transport=RealRegistryTransport(),
        package_manager=RealPackageManager(),
        prompter=ClickPrompter(),
        cwd=Path.cwd(),
        debug=debug,
    )
