"""Validated command-line configuration for the merge command."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from fat_framework.exceptions import ConfigurationError
from fat_framework.infra.lipo_tool import DEFAULT_LIPO

DEFAULT_BUILD_CONFIG: str = "Release"

_USAGE_HINT: str = (
    "Usage: fat-framework -user <name> -project <prefix> "
    "-framework <Name> -output <dir> [-buildconfig Release]"
)

_REQUIRED: tuple[str, ...] = ("user", "project", "framework", "output")


@dataclass(frozen=True, slots=True)
class MergeConfig:
    """Everything the merge command needs, checked before any I/O."""

    user: str
    project: str
    framework: str
    output: Path
    build_config: str = DEFAULT_BUILD_CONFIG
    lipo: str = DEFAULT_LIPO


def config_from_args(args: argparse.Namespace) -> MergeConfig:
    """Build a :class:`MergeConfig` from parsed arguments.

    Raises
    ------
    ConfigurationError
        For the first required flag that is missing or empty.
    """
    for name in _REQUIRED:
        if not getattr(args, name, None):
            raise ConfigurationError(f"{name} must be set", hint=_USAGE_HINT)

    return MergeConfig(
        user=args.user,
        project=args.project,
        framework=args.framework,
        output=Path(args.output),
        build_config=args.buildconfig or DEFAULT_BUILD_CONFIG,
        lipo=args.lipo or DEFAULT_LIPO,
    )
