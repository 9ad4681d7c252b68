"""Write fetched registry payloads onto the local filesystem.

Conflict policy when a destination file already exists and overwrite is off:

- Entries the user explicitly selected prompt through confirm_overwrite and
  are skipped when the user declines.
- Entries pulled in only as registry dependencies are skipped without a
  prompt, leaving the existing file untouched.

Installation is not atomic. Files are written one at a time, so an interrupt
can leave a partial set of files on disk.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from borrowr.core.errors import InstallError
from borrowr.registry.models import FetchedPayload

logger = logging.getLogger(__name__)


def _never_confirm(path: Path) -> bool:
    return False


@dataclass(frozen=True)
class InstallOptions:
    """How and where a payload is written.

    Attributes:
        target_root: Directory all destinations are relative to
        overwrite: Replace existing files without asking
        path_prefix_to_strip: Removed from each declared file path (e.g. "cli/")
        extra_prefix_segments: Directories inserted below target_root, used to
            namespace files per remote
        selected_ids: Ids the user asked for explicitly
        confirm_overwrite: Asked before replacing a file of a selected entry
    """

    target_root: Path
    overwrite: bool = False
    path_prefix_to_strip: str = ""
    extra_prefix_segments: tuple[str, ...] = ()
    selected_ids: frozenset[str] = frozenset()
    confirm_overwrite: Callable[[Path], bool] = _never_confirm


@dataclass(frozen=True)
class InstallReport:
    """Outcome of install_payload."""

    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    processed_ids: list[str] = field(default_factory=list)


def _is_plain_segment(segment: str) -> bool:
    return segment not in ("", ".", "..") and "/" not in segment and "\\" not in segment


def destination_for(file_path: str, options: InstallOptions) -> Path:
    """Compute where a declared registry file is written.

    Raises:
        InstallError: If the path is empty after stripping or escapes target_root
    """
    relative = file_path.replace(options.path_prefix_to_strip, "", 1)

    segments = [segment for segment in relative.split("/") if segment]
    if not segments:
        raise InstallError(options.target_root, f"empty destination for {file_path!r}")
    if ".." in segments or not all(map(_is_plain_segment, options.extra_prefix_segments)):
        raise InstallError(options.target_root / relative, "path escapes the target directory")

    destination = options.target_root.joinpath(*options.extra_prefix_segments, *segments)
    if not destination.resolve().is_relative_to(options.target_root.resolve()):
        raise InstallError(destination, "path escapes the target directory")
    return destination


def install_payload(payload: FetchedPayload, options: InstallOptions) -> InstallReport:
    """Write every file of every entry in payload.

    Args:
        payload: Fetched entries with raw file content
        options: Destination and conflict handling

    Returns:
        InstallReport listing written and skipped paths

    Raises:
        InstallError: If a directory cannot be created or a file cannot be written
    """
    report = InstallReport()

    for entry_id, fetched in payload.items():
        explicitly_selected = entry_id in options.selected_ids
        logger.debug("Installing %s (selected=%s)", entry_id, explicitly_selected)

        for file_path, content in zip(fetched.files, fetched.raw_files, strict=True):
            destination = destination_for(file_path, options)

            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise InstallError(destination.parent, str(e)) from e

            if destination.exists() and not options.overwrite:
                if not explicitly_selected:
                    logger.debug("Keeping existing %s from dependency %s", destination, entry_id)
                    report.skipped.append(destination)
                    continue
                if not options.confirm_overwrite(destination):
                    report.skipped.append(destination)
                    continue

            try:
                with open(destination, "w", encoding="utf-8", newline="") as f:
                    f.write(content)
            except OSError as e:
                raise InstallError(destination, str(e)) from e

            logger.debug("Wrote %s", destination)
            report.written.append(destination)

        report.processed_ids.append(entry_id)

    return report
