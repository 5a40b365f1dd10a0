"""Exit-code constants used by the CLI layer.

Every exit path uses one of these values; no other module passes raw
integers to :func:`sys.exit`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The fat framework was created (per-entry copy failures included)."""

GENERAL_ERROR: int = 1
"""A FatFrameworkError was caught and its message displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
