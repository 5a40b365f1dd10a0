"""Tests for the best-effort tree copy (infra/tree_copier.py).

Per-entry failures are injected by patching ``copy_file`` — permission
tricks are unreliable when the suite runs as root.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

import pytest

from fat_framework.exceptions import CopyError
from fat_framework.infra import tree_copier
from fat_framework.infra.tree_copier import FileTreeCopier, copy_tree


def _mode(path: Path) -> int:
    return stat.S_IMODE(os.stat(path).st_mode)


def _relative_files(root: Path) -> dict[str, bytes]:
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file() and not path.is_symlink()
    }


@pytest.fixture
def source(tmp_path: Path) -> Path:
    root = tmp_path / "src" / "MyLib.framework"
    (root / "Headers").mkdir(parents=True)
    (root / "Modules" / "deep").mkdir(parents=True)
    (root / "MyLib").write_bytes(b"\xca\xfe\xba\xbe fat")
    (root / "Info.plist").write_bytes(b"<plist/>")
    (root / "Headers" / "MyLib.h").write_text("// header\n")
    (root / "Modules" / "module.modulemap").write_text("framework module MyLib {}\n")
    (root / "Modules" / "deep" / "x.txt").write_text("x")
    os.chmod(root / "MyLib", 0o755)
    os.chmod(root / "Info.plist", 0o640)
    os.chmod(root / "Headers", 0o750)
    return root


# ---------------------------------------------------------------------------
# Structural mirror
# ---------------------------------------------------------------------------

class TestMirror:
    def test_paths_and_contents(self, source: Path, tmp_path: Path) -> None:
        destination = tmp_path / "out" / "nested" / "MyLib.framework"
        report = copy_tree(source, destination)

        assert report.ok
        assert report.destination == destination
        assert report.copied_files == 5
        assert _relative_files(destination) == _relative_files(source)

    def test_permission_bits(self, source: Path, tmp_path: Path) -> None:
        destination = tmp_path / "out" / "MyLib.framework"
        copy_tree(source, destination)

        for relative in ("MyLib", "Info.plist", "Headers", "Modules/deep/x.txt"):
            assert _mode(destination / relative) == _mode(source / relative), relative
        assert _mode(destination) == _mode(source)

    def test_read_only_directory(self, source: Path, tmp_path: Path) -> None:
        os.chmod(source / "Modules" / "deep", 0o555)
        destination = tmp_path / "out" / "MyLib.framework"
        try:
            report = copy_tree(source, destination)
            assert report.ok
            assert (destination / "Modules" / "deep" / "x.txt").read_text() == "x"
            assert _mode(destination / "Modules" / "deep") == 0o555
        finally:
            os.chmod(source / "Modules" / "deep", 0o755)
            if (destination / "Modules" / "deep").exists():
                os.chmod(destination / "Modules" / "deep", 0o755)

    def test_symlink_recreated(self, source: Path, tmp_path: Path) -> None:
        os.symlink("MyLib", source / "Current")
        destination = tmp_path / "out" / "MyLib.framework"
        copy_tree(source, destination)

        assert (destination / "Current").is_symlink()
        assert os.readlink(destination / "Current") == "MyLib"

    def test_existing_destination_is_overwritten(self, source: Path, tmp_path: Path) -> None:
        destination = tmp_path / "out" / "MyLib.framework"
        destination.mkdir(parents=True)
        (destination / "MyLib").write_bytes(b"stale")

        copy_tree(source, destination)
        assert (destination / "MyLib").read_bytes() == (source / "MyLib").read_bytes()

    def test_copier_class_delegates(self, source: Path, tmp_path: Path) -> None:
        report = FileTreeCopier().copy_tree(source, tmp_path / "out")
        assert report.ok


# ---------------------------------------------------------------------------
# Failure policy
# ---------------------------------------------------------------------------

class TestFailures:
    def test_entry_failure_is_reported_and_siblings_copied(
        self,
        source: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        real_copy_file = tree_copier.copy_file

        def flaky_copy_file(src: Path, dst: Path) -> None:
            if src.name == "Info.plist":
                raise PermissionError(13, "Permission denied", str(src))
            real_copy_file(src, dst)

        monkeypatch.setattr(tree_copier, "copy_file", flaky_copy_file)
        destination = tmp_path / "out" / "MyLib.framework"

        with caplog.at_level(logging.WARNING, logger="fat_framework.infra.tree_copier"):
            report = copy_tree(source, destination)

        assert not report.ok
        assert [failure.path for failure in report.failures] == [source / "Info.plist"]
        assert "Permission denied" in report.failures[0].reason
        assert not (destination / "Info.plist").exists()
        assert (destination / "MyLib").exists()
        assert (destination / "Headers" / "MyLib.h").exists()
        assert "Info.plist" in caplog.text

    def test_subdirectory_failure_is_not_fatal(
        self, source: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        real_copy_dir = tree_copier._copy_dir

        def flaky_copy_dir(src: Path, dst: Path, state: object) -> None:
            if src.name == "Modules":
                raise OSError("disk error")
            real_copy_dir(src, dst, state)  # type: ignore[arg-type]

        monkeypatch.setattr(tree_copier, "_copy_dir", flaky_copy_dir)
        report = copy_tree(source, tmp_path / "out")

        assert [failure.path.name for failure in report.failures] == ["Modules"]
        assert (tmp_path / "out" / "Headers" / "MyLib.h").exists()

    def test_missing_source_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(CopyError) as exc_info:
            copy_tree(tmp_path / "missing", tmp_path / "out")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_uncreatable_destination_is_fatal(self, source: Path, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(CopyError):
            copy_tree(source, blocker / "MyLib.framework")
