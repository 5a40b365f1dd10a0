"""Allow ``python -m fat_framework`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m fat_framework`` behaves identically to the ``fat-framework``
console script.
"""

from __future__ import annotations

from fat_framework.cli.app import cli

if __name__ == "__main__":
    cli()
