"""Core / service layer — domain models, protocols and orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem, subprocess or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from fat_framework.core.fat_framework_service import FatFrameworkService
from fat_framework.core.metadata import (
    FAT_SUPPORTED_PLATFORMS,
    SUPPORTED_PLATFORMS_KEY,
    with_supported_platforms,
)
from fat_framework.core.models import (
    BuildLocation,
    CopyFailure,
    CopyReport,
    FrameworkBundle,
    MergeOutcome,
    MergeRequest,
    Platform,
    PlistDocument,
    PlistEncoding,
)
from fat_framework.core.protocols import BinaryMerger, MetadataStore, TreeCopier

__all__: list[str] = [
    "FAT_SUPPORTED_PLATFORMS",
    "SUPPORTED_PLATFORMS_KEY",
    "BinaryMerger",
    "BuildLocation",
    "CopyFailure",
    "CopyReport",
    "FatFrameworkService",
    "FrameworkBundle",
    "MergeOutcome",
    "MergeRequest",
    "MetadataStore",
    "Platform",
    "PlistDocument",
    "PlistEncoding",
    "TreeCopier",
    "with_supported_platforms",
]
