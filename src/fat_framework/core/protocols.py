"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
The orchestration service depends ONLY on these protocols — never on
concrete implementations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from fat_framework.core.models import CopyReport, PlistDocument


class BinaryMerger(Protocol):
    """Contract for multi-architecture binary combiners (e.g. ``lipo``)."""

    def merge_into(
        self,
        simulator_binary: Path,
        device_binary: Path,
        scratch_path: Path,
    ) -> None:
        """Replace *device_binary* with a fat binary of both inputs.

        The combined binary is first written to *scratch_path*, then
        moved over *device_binary*.  *simulator_binary* is never
        modified.

        Raises
        ------
        MergeToolError
            When the tool cannot start, exits non-zero, or the move fails.
        """
        ...  # pragma: no cover


class MetadataStore(Protocol):
    """Contract for reading and writing ``Info.plist`` documents."""

    def load(self, path: Path) -> PlistDocument:
        """Read *path*, recording its encoding.

        Raises
        ------
        MetadataError
            When the file is missing, unreadable or malformed.
        """
        ...  # pragma: no cover

    def save(self, path: Path, document: PlistDocument) -> None:
        """Overwrite *path* using ``document.encoding``.

        Raises
        ------
        MetadataError
            When serialization or the write fails.
        """
        ...  # pragma: no cover


class TreeCopier(Protocol):
    """Contract for best-effort recursive directory copies."""

    def copy_tree(self, source: Path, destination: Path) -> CopyReport:
        """Mirror *source* into *destination*.

        Raises
        ------
        CopyError
            Only for failures at the root; per-entry failures are
            returned in the report.
        """
        ...  # pragma: no cover
