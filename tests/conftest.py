"""Shared pytest fixtures and configuration for the fat-framework test suite.

Guidelines
----------
* No test runs a real ``lipo``; ``subprocess.run`` is patched at the
  infra boundary with :func:`fake_lipo_run`.
* Filesystem tests build DerivedData trees under ``tmp_path``.
* ``USERS_ROOT`` is redirected so nothing under ``/Users`` is read.
"""

from __future__ import annotations

import plistlib
import subprocess
from pathlib import Path
from typing import Any

import pytest

from fat_framework.infra import derived_data


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def fake_lipo_run(command: list[str], **_kwargs: Any) -> subprocess.CompletedProcess[str]:
    """Stand-in for ``lipo -create A B -output OUT``.

    Writes ``FAT:`` followed by the input contents joined with ``|``.
    """
    inputs = command[2:-2]
    output = Path(command[-1])
    output.write_bytes(b"FAT:" + b"|".join(Path(p).read_bytes() for p in inputs))
    return subprocess.CompletedProcess(command, 0, stdout="", stderr="")


def write_framework(
    products_dir: Path,
    name: str,
    binary: bytes,
    platforms: list[str],
    *,
    fmt: plistlib.PlistFormat = plistlib.FMT_XML,
) -> Path:
    """Create ``<products_dir>/<name>.framework`` and return its path."""
    bundle = products_dir / f"{name}.framework"
    (bundle / "Headers").mkdir(parents=True)
    (bundle / name).write_bytes(binary)
    (bundle / "Headers" / f"{name}.h").write_text("#import <Foundation/Foundation.h>\n")
    (bundle / "Info.plist").write_bytes(
        plistlib.dumps(
            {
                "CFBundleIdentifier": f"com.example.{name}",
                "CFBundleName": name,
                "CFBundleSupportedPlatforms": platforms,
                "MinimumOSVersion": "13.0",
            },
            fmt=fmt,
            sort_keys=False,
        )
    )
    return bundle


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def users_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect ``/Users`` to an empty directory under ``tmp_path``."""
    root = tmp_path / "Users"
    root.mkdir()
    monkeypatch.setattr(derived_data, "USERS_ROOT", root)
    return root


@pytest.fixture
def project_dir(users_root: Path) -> Path:
    """A DerivedData entry for ``MyLib`` with both platform builds."""
    project = derived_data.derived_data_root("jane", users_root) / "MyLib-abcdef"
    products = project / "Build" / "Products"
    write_framework(products / "Release-iphonesimulator", "MyLib", b"x86_64", ["iPhoneSimulator"])
    write_framework(products / "Release-iphoneos", "MyLib", b"arm64", ["iPhoneOS"])
    return project
