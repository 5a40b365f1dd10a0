"""Custom exception hierarchy for fat-framework.

All exceptions that cross layer boundaries must inherit from
:class:`FatFrameworkError`.  Raw ``OSError``, ``subprocess`` and
``plistlib`` exceptions must never propagate beyond the infrastructure
layer — they are caught there and re-raised as a typed subclass defined
here, with the original exception chained.

Hierarchy
---------
FatFrameworkError
├── ConfigurationError
├── LookupFailedError
│   ├── DerivedDataNotFoundError
│   └── ProjectNotFoundError
├── MergeToolError
├── MetadataError
└── CopyError
"""

from __future__ import annotations


class FatFrameworkError(Exception):
    """Base exception for all fat-framework errors.

    Every fatal condition maps to a subclass of this exception so that
    the CLI error boundary can render a single clean line instead of a
    stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(FatFrameworkError):
    """Raised when a required command-line flag is missing or empty."""


# --- Build output lookup ---------------------------------------------------

class LookupFailedError(FatFrameworkError):
    """Raised when the Xcode build output cannot be located."""


class DerivedDataNotFoundError(LookupFailedError):
    """Raised when the DerivedData folder is missing or unreadable."""


class ProjectNotFoundError(LookupFailedError):
    """Raised when no DerivedData entry matches the project prefix."""


# --- Merge tool ------------------------------------------------------------

class MergeToolError(FatFrameworkError):
    """Raised when ``lipo`` cannot run, fails, or its output cannot be moved."""


# --- Metadata --------------------------------------------------------------

class MetadataError(FatFrameworkError):
    """Raised when ``Info.plist`` cannot be read, parsed or written."""


# --- Copy ------------------------------------------------------------------

class CopyError(FatFrameworkError):
    """Raised when the copy cannot start at the root of the tree.

    Failures of individual entries below the root are reported through
    :class:`~fat_framework.core.models.CopyReport` instead.
    """
