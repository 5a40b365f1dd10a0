"""Infrastructure: best-effort recursive directory copy.

Failure policy
--------------
* The root is all-or-nothing: if the source cannot be stat'ed or the
  destination cannot be created, :class:`~fat_framework.exceptions.CopyError`
  is raised and nothing is copied.
* Below the root every entry is independent: an ``OSError`` while copying
  a file, a symlink or a whole subdirectory is logged, recorded as a
  :class:`~fat_framework.core.models.CopyFailure`, and the walk moves on to
  the next sibling.

Permission bits of files and directories are mirrored from the source.
A directory's own bits are applied after its children are written, so
read-only source directories can still be filled.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
from pathlib import Path

from fat_framework.core.models import CopyFailure, CopyReport
from fat_framework.exceptions import CopyError

_LOGGER: logging.Logger = logging.getLogger(__name__)


class _CopyState:
    """Mutable counters accumulated during one walk."""

    def __init__(self) -> None:
        self.copied_files: int = 0
        self.failures: list[CopyFailure] = []

    def fail(self, path: Path, exc: OSError) -> None:
        _LOGGER.warning("Failed to copy %s: %s", path, exc)
        self.failures.append(CopyFailure(path=path, reason=str(exc)))


def copy_file(source: Path, destination: Path) -> None:
    """Copy bytes and permission bits of one regular file."""
    shutil.copyfile(source, destination)
    os.chmod(destination, stat.S_IMODE(os.stat(source).st_mode))


def _copy_symlink(source: Path, destination: Path) -> None:
    if destination.is_symlink() or destination.exists():
        destination.unlink()
    os.symlink(os.readlink(source), destination)


def _copy_dir(source: Path, destination: Path, state: _CopyState) -> None:
    """Copy the contents of *source*; raises only for *source* itself."""
    mode = stat.S_IMODE(os.stat(source).st_mode)
    # Owner needs write access while children are being created.
    os.makedirs(destination, mode=mode | stat.S_IRWXU, exist_ok=True)

    with os.scandir(source) as iterator:
        entries = sorted(iterator, key=lambda entry: entry.name)

    for entry in entries:
        child_source = source / entry.name
        child_destination = destination / entry.name
        try:
            if entry.is_symlink():
                _copy_symlink(child_source, child_destination)
            elif entry.is_dir():
                _copy_dir(child_source, child_destination, state)
            else:
                copy_file(child_source, child_destination)
                state.copied_files += 1
                _LOGGER.debug("Copied %s", child_destination)
        except OSError as exc:
            state.fail(child_source, exc)

    os.chmod(destination, mode)


def copy_tree(source: Path, destination: Path) -> CopyReport:
    """Mirror *source* into *destination* and report per-entry failures.

    Raises
    ------
    CopyError
        When the source root cannot be stat'ed or listed, or the
        destination root cannot be created.
    """
    state = _CopyState()
    try:
        _copy_dir(source, destination, state)
    except OSError as exc:
        raise CopyError(
            f"Failed to copy {source} to {destination}: {exc}",
        ) from exc

    return CopyReport(
        destination=destination,
        copied_files=state.copied_files,
        failures=tuple(state.failures),
    )


class FileTreeCopier:
    """Concrete :class:`~fat_framework.core.protocols.TreeCopier`."""

    def copy_tree(self, source: Path, destination: Path) -> CopyReport:
        return copy_tree(source, destination)
