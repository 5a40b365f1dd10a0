"""``fat-framework doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising whether
the machine can run the merge: a recent Python, ``lipo`` on PATH, and
macOS (where Xcode and DerivedData live).

This module lives in the CLI layer — it may import from ``infra`` and
renders via Rich.  It only collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from rich.markup import escape
from rich.table import Table

from fat_framework.cli import exit_codes
from fat_framework.cli.console import console
from fat_framework.infra.lipo_tool import DEFAULT_LIPO, LipoStatus, detect_lipo
from fat_framework.version import __version__

_OK: str = "[green]OK[/green]"
_WARN: str = "[yellow]WARN[/yellow]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _lipo_check(status_obj: LipoStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for the lipo row."""
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return "lipo", path_str, _OK
    return "lipo", "not found", _WARN


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row.

    Anything but macOS is a warning: DerivedData and lipo only exist there.
    """
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, _OK if system_raw == "Darwin" else _WARN


def _fat_framework_version_check() -> tuple[str, str, str]:
    return "fat-framework", __version__, _OK


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(lipo: str = DEFAULT_LIPO) -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    *lipo* is the executable probed on PATH (the value of ``-lipo``).

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  Warnings do not fail.
    """
    lipo_status = detect_lipo(lipo)
    checks = [
        _fat_framework_version_check(),
        _python_version_check(),
        _lipo_check(lipo_status),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    table = Table(
        title="fat-framework doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, escape(value), status)

    console.print()
    console.print(table)
    console.print()

    if not lipo_status.found and lipo_status.install_hint:
        console.print(f"[yellow]{escape(lipo)} is not installed.[/yellow]")
        console.print(f"  [bold]{escape(lipo_status.install_hint)}[/bold]\n")

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
