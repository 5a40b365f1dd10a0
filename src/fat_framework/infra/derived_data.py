"""Infrastructure: locate a project's build output inside Xcode DerivedData.

Xcode names each DerivedData entry ``<ProjectName>-<generated hash>``, so
the project is found by prefix match on the immediate subdirectories.

Rules
-----
* Read-only: nothing under DerivedData is created or modified here.
* Entries are scanned in sorted order so the match is deterministic.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fat_framework.core.models import BuildLocation, Platform
from fat_framework.exceptions import DerivedDataNotFoundError, ProjectNotFoundError

_LOGGER: logging.Logger = logging.getLogger(__name__)

USERS_ROOT: Path = Path("/Users")
"""Parent of the macOS home directories."""

DERIVED_DATA_SUBPATH: Path = Path("Library/Developer/Xcode/DerivedData")


def derived_data_root(user: str, users_root: Path | None = None) -> Path:
    """Return ``/Users/<user>/Library/Developer/Xcode/DerivedData``."""
    return (users_root or USERS_ROOT) / user / DERIVED_DATA_SUBPATH


def find_project_build_dir(
    user: str,
    project_prefix: str,
    *,
    users_root: Path | None = None,
) -> Path:
    """Return the first DerivedData entry whose name starts with *project_prefix*.

    Raises
    ------
    DerivedDataNotFoundError
        When the DerivedData folder does not exist or cannot be listed.
    ProjectNotFoundError
        When no subdirectory matches the prefix.
    """
    root = derived_data_root(user, users_root)
    if not root.is_dir():
        raise DerivedDataNotFoundError(
            f"Can't find Xcode derived data folder: {root}",
            hint="Check -user and build the project in Xcode at least once.",
        )

    try:
        entries = sorted(root.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        raise DerivedDataNotFoundError(
            f"Failed to read contents of derived data folder {root}: {exc}",
        ) from exc

    for entry in entries:
        if entry.name.startswith(project_prefix) and entry.is_dir():
            _LOGGER.debug("Matched project %r to %s", project_prefix, entry)
            return entry

    raise ProjectNotFoundError(
        f"No derived data folder starting with {project_prefix!r} in {root}",
        hint="Check -project; it must be a prefix of the Xcode project name.",
    )


def resolve_build_locations(
    user: str,
    project_prefix: str,
    configuration: str = "Release",
    *,
    users_root: Path | None = None,
) -> tuple[BuildLocation, BuildLocation]:
    """Return the (simulator, device) build locations for a project."""
    project_dir = find_project_build_dir(
        user, project_prefix, users_root=users_root,
    )
    return (
        BuildLocation(project_dir, configuration, Platform.SIMULATOR),
        BuildLocation(project_dir, configuration, Platform.DEVICE),
    )
