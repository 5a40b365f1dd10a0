"""Domain models for fat-framework.

All models are **frozen** dataclasses — immutable value objects.  Path
properties only compute new :class:`~pathlib.Path` values; none of them
touch the filesystem.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


# ---------------------------------------------------------------------------
# Build locations
# ---------------------------------------------------------------------------

class Platform(str, enum.Enum):
    """Xcode SDK suffix used in ``Build/Products/<config>-<platform>``."""

    SIMULATOR = "iphonesimulator"
    DEVICE = "iphoneos"


@dataclass(frozen=True, slots=True)
class BuildLocation:
    """Where Xcode put the products of one configuration/platform pair."""

    project_dir: Path
    """Project entry inside DerivedData (e.g. ``MyLib-abcdef``)."""

    configuration: str
    """Build configuration name (e.g. ``Release``)."""

    platform: Platform

    @property
    def products_dir(self) -> Path:
        return (
            self.project_dir
            / "Build"
            / "Products"
            / f"{self.configuration}-{self.platform.value}"
        )


# ---------------------------------------------------------------------------
# Framework bundle
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FrameworkBundle:
    """A ``<name>.framework`` directory holding a binary and ``Info.plist``.

    Every path is derived from :attr:`name`, so two bundles with the same
    name under different parents always have the same internal layout.
    """

    name: str
    parent_dir: Path

    @property
    def bundle_dir(self) -> Path:
        return self.parent_dir / f"{self.name}.framework"

    @property
    def binary_path(self) -> Path:
        return self.bundle_dir / self.name

    @property
    def info_plist_path(self) -> Path:
        return self.bundle_dir / "Info.plist"


# ---------------------------------------------------------------------------
# Property-list document
# ---------------------------------------------------------------------------

class PlistEncoding(enum.Enum):
    """On-disk serialization of a property list."""

    XML = "xml"
    BINARY = "binary"


@dataclass(frozen=True, slots=True)
class PlistDocument:
    """Top-level plist dictionary plus the encoding it was read from.

    ``data`` keeps the key order of the source file; values are whatever
    :mod:`plistlib` produces (str, int, float, bool, bytes, datetime,
    list, dict).
    """

    data: dict[str, Any]
    encoding: PlistEncoding


# ---------------------------------------------------------------------------
# Tree copy report
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CopyFailure:
    """One entry that could not be copied."""

    path: Path
    """Source path of the entry."""

    reason: str


@dataclass(frozen=True, slots=True)
class CopyReport:
    """Outcome of a best-effort tree copy."""

    destination: Path
    copied_files: int = 0
    failures: tuple[CopyFailure, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.failures


# ---------------------------------------------------------------------------
# Pipeline request / outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MergeRequest:
    """Input of :meth:`FatFrameworkService.build`."""

    framework_name: str
    simulator: BuildLocation
    device: BuildLocation
    output_dir: Path


@dataclass(frozen=True, slots=True)
class MergeOutcome:
    """Result of a successful pipeline run."""

    bundle: FrameworkBundle
    """The merged bundle as copied into the output directory."""

    copy_report: CopyReport
