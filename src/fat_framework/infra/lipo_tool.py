"""Infrastructure: ``lipo`` detection and invocation.

This module is the **only** place in the codebase that starts the merge
tool.  Every failure — tool missing, non-zero exit, failed move of the
output — is re-raised as :class:`~fat_framework.exceptions.MergeToolError`.

Rules
-----
* Arguments are passed as a list; no shell.
* No retries and no timeout: ``lipo`` runs to completion.
* Detection via :func:`shutil.which` only.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from fat_framework.exceptions import MergeToolError

_LOGGER: logging.Logger = logging.getLogger(__name__)

DEFAULT_LIPO: str = "lipo"

INSTALL_HINT: str = "Install the Xcode command line tools: xcode-select --install"


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LipoStatus:
    """Result of a ``lipo`` detection probe."""

    found: bool
    path: Path | None
    install_hint: str | None


def detect_lipo(executable: str = DEFAULT_LIPO) -> LipoStatus:
    """Probe PATH for *executable*.

    Always returns a :class:`LipoStatus`; the caller decides whether a
    missing tool is fatal.
    """
    result = shutil.which(executable)
    if result is not None:
        return LipoStatus(found=True, path=Path(result).resolve(), install_hint=None)
    return LipoStatus(found=False, path=None, install_hint=INSTALL_HINT)


# ---------------------------------------------------------------------------
# Merger
# ---------------------------------------------------------------------------

class LipoMerger:
    """Concrete :class:`~fat_framework.core.protocols.BinaryMerger` using ``lipo``.

    Satisfies the protocol structurally — no explicit inheritance.
    """

    def __init__(self, executable: str = DEFAULT_LIPO) -> None:
        self._executable: str = executable

    def build_command(self, inputs: list[Path], output: Path) -> list[str]:
        """Return ``lipo -create <inputs...> -output <output>``."""
        return [
            self._executable,
            "-create",
            *(str(path) for path in inputs),
            "-output",
            str(output),
        ]

    def create(self, inputs: list[Path], output: Path) -> None:
        """Combine *inputs* into one multi-architecture binary at *output*."""
        command = self.build_command(inputs, output)
        _LOGGER.debug("Running %s", " ".join(command))

        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise MergeToolError(
                f"Failed to run {self._executable} to combine static libraries: {exc}",
                hint=INSTALL_HINT,
            ) from exc

        if completed.returncode != 0:
            detail = (completed.stderr or completed.stdout or "").strip()
            message = (
                f"Failed to run {self._executable} to combine static libraries: "
                f"exit status {completed.returncode}"
            )
            if detail:
                message = f"{message}: {detail}"
            raise MergeToolError(message)

    def merge_into(
        self,
        simulator_binary: Path,
        device_binary: Path,
        scratch_path: Path,
    ) -> None:
        """Replace *device_binary* with the fat binary of both inputs."""
        self.create([simulator_binary, device_binary], scratch_path)

        try:
            os.replace(scratch_path, device_binary)
        except OSError as exc:
            raise MergeToolError(
                f"Failed to move combined static library to {device_binary}: {exc}",
            ) from exc
        _LOGGER.debug("Moved %s over %s", scratch_path, device_binary)
