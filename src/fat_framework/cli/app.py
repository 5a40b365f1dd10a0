"""CLI application entry point and command routing for fat-framework.

This module is the **sole error boundary** for the entire application.
It catches :class:`~fat_framework.exceptions.FatFrameworkError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering a
one-line message via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  service and the infrastructure adapters.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from rich.markup import escape

from fat_framework.cli import exit_codes
from fat_framework.cli.config import DEFAULT_BUILD_CONFIG, MergeConfig, config_from_args
from fat_framework.cli.console import configure_logging, console
from fat_framework.exceptions import FatFrameworkError
from fat_framework.infra.lipo_tool import DEFAULT_LIPO
from fat_framework.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Flags keep the single-dash spelling of the Xcode helper this tool
    replaces (``-user``, ``-project`` ...).  The CLI supports:

    * ``fat-framework -user U -project P -framework F -output DIR``
    * ``fat-framework doctor`` — environment diagnostics
    * ``fat-framework --version``
    """
    parser = argparse.ArgumentParser(
        prog="fat-framework",
        description=(
            "Merge the simulator and device builds of an Xcode static "
            "framework into one fat framework."
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging (lipo command line, copied files).",
    )
    parser.add_argument(
        "-user",
        default="",
        help="the OS X user to get to the Xcode derived data path",
    )
    parser.add_argument(
        "-project",
        default="",
        help="the name of the Xcode project",
    )
    parser.add_argument(
        "-buildconfig",
        default=DEFAULT_BUILD_CONFIG,
        help="the scheme build config for the framework (default: %(default)s)",
    )
    parser.add_argument(
        "-framework",
        default="",
        help="the name of the static library framework",
    )
    parser.add_argument(
        "-output",
        default="",
        help="the output folder where to copy the result framework",
    )
    parser.add_argument(
        "-lipo",
        default=DEFAULT_LIPO,
        help="the lipo executable to run (default: %(default)s)",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="merge",
        choices=("merge", "doctor"),
        help="'merge' (default) or 'doctor' to run diagnostics.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_merge(config: MergeConfig) -> int:
    """Dispatch the merge pipeline.

    Flow:
    1. Locate the project in DerivedData.
    2. Merge both binaries into the device bundle with lipo.
    3. Patch the device bundle's Info.plist.
    4. Copy the bundle to the output folder.
    """
    from fat_framework.core.fat_framework_service import FatFrameworkService
    from fat_framework.core.models import MergeRequest
    from fat_framework.infra.derived_data import resolve_build_locations
    from fat_framework.infra.lipo_tool import LipoMerger
    from fat_framework.infra.plist_store import PlistStore
    from fat_framework.infra.tree_copier import FileTreeCopier

    simulator, device = resolve_build_locations(
        config.user,
        config.project,
        config.build_config,
    )
    console.print(
        f"[bold]Merging[/bold] {escape(config.framework)}.framework  "
        f"{escape(str(simulator.project_dir))}"
    )

    service = FatFrameworkService(
        LipoMerger(config.lipo),
        PlistStore(),
        FileTreeCopier(),
    )
    outcome = service.build(
        MergeRequest(
            framework_name=config.framework,
            simulator=simulator,
            device=device,
            output_dir=config.output,
        )
    )

    for failure in outcome.copy_report.failures:
        console.print(
            f"[yellow]Copy failed:[/yellow] {escape(str(failure.path))}: "
            f"{escape(failure.reason)}"
        )

    console.print(
        f"[bold green]Created fat library with simulator support.[/bold green]  "
        f"{escape(str(outcome.bundle.bundle_dir))}"
    )
    return exit_codes.SUCCESS


def _handle_doctor(lipo: str) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from fat_framework.cli.doctor import run_doctor

    return run_doctor(lipo)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the fat-framework CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    FatFrameworkError
        For any fatal condition; :func:`cli` turns it into an exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "doctor":
        return _handle_doctor(args.lipo or DEFAULT_LIPO)

    # Validated before anything touches the filesystem.
    config = config_from_args(args)
    return _handle_merge(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except FatFrameworkError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
