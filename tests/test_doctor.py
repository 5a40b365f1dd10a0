"""Tests for the ``fat-framework doctor`` command (cli/doctor.py).

lipo detection and platform probes are mocked — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

from fat_framework.cli import exit_codes
from fat_framework.cli.doctor import _lipo_check, _os_check, _python_version_check, run_doctor
from fat_framework.infra.lipo_tool import INSTALL_HINT, LipoStatus


def _lipo_found() -> LipoStatus:
    return LipoStatus(found=True, path=Path("/usr/bin/lipo"), install_hint=None)


def _lipo_missing() -> LipoStatus:
    return LipoStatus(found=False, path=None, install_hint=INSTALL_HINT)


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestChecks:
    def test_python_version(self) -> None:
        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status or "FAIL" in status

    def test_lipo_found(self) -> None:
        label, value, status = _lipo_check(_lipo_found())
        assert (label, value) == ("lipo", "/usr/bin/lipo")
        assert "OK" in status

    def test_lipo_missing(self) -> None:
        assert "WARN" in _lipo_check(_lipo_missing())[2]

    @patch("fat_framework.cli.doctor.platform.system", return_value="Darwin")
    def test_macos_ok(self, _mock_system: MagicMock) -> None:
        _label, value, status = _os_check()
        assert "macOS" in value
        assert "OK" in status

    @patch("fat_framework.cli.doctor.platform.system", return_value="Linux")
    def test_other_os_warns(self, _mock_system: MagicMock) -> None:
        assert "WARN" in _os_check()[2]


# ---------------------------------------------------------------------------
# run_doctor
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("fat_framework.cli.doctor.platform.system", return_value="Darwin")
    @patch("fat_framework.cli.doctor.detect_lipo")
    def test_all_ok(self, mock_detect: MagicMock, _mock_system: MagicMock, capsys) -> None:
        mock_detect.return_value = _lipo_found()
        assert run_doctor() == exit_codes.SUCCESS
        assert "All checks passed" in capsys.readouterr().err

    @patch("fat_framework.cli.doctor.detect_lipo")
    def test_missing_lipo_is_warning(self, mock_detect: MagicMock, capsys) -> None:
        mock_detect.return_value = _lipo_missing()
        assert run_doctor() == exit_codes.SUCCESS
        assert "xcode-select --install" in capsys.readouterr().err

    @patch(
        "fat_framework.cli.doctor._python_version_check",
        return_value=("Python", "3.8.0", "[red]FAIL (>=3.10 required)[/red]"),
    )
    @patch("fat_framework.cli.doctor.detect_lipo")
    def test_failure(self, mock_detect: MagicMock, _mock_python: MagicMock) -> None:
        mock_detect.return_value = _lipo_found()
        assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch("fat_framework.cli.doctor.detect_lipo")
    def test_probes_chosen_executable_once(self, mock_detect: MagicMock, capsys) -> None:
        mock_detect.return_value = _lipo_missing()

        assert run_doctor("/opt/xcode/lipo") == exit_codes.SUCCESS

        mock_detect.assert_called_once_with("/opt/xcode/lipo")
        assert "/opt/xcode/lipo is not installed" in capsys.readouterr().err

    @patch("fat_framework.cli.doctor.detect_lipo")
    def test_lipo_flag_is_forwarded(self, mock_detect: MagicMock) -> None:
        from fat_framework.cli.app import main

        mock_detect.return_value = _lipo_found()
        main(["-lipo", "/opt/xcode/lipo", "doctor"])
        mock_detect.assert_called_once_with("/opt/xcode/lipo")
