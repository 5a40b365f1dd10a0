"""Shared Rich console and logging setup for the CLI layer.

All user-facing output goes to stderr through :data:`console`, the same
stream the original build helper used for its diagnostics.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def get_rich_console() -> Console:
    """Create a Rich console instance targeting stderr."""
    return Console(stderr=True)


console: Console = get_rich_console()


def configure_logging(verbose: bool = False) -> None:
    """Route :mod:`logging` records from the infra layer through Rich.

    ``verbose`` lowers the threshold from WARNING to DEBUG so that the
    ``lipo`` command line and every copied entry are shown.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
