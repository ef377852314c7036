"""Tests for ``op`` detection (infra/op_detector.py).

All tests mock :func:`shutil.which` — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from op_wrap.infra.op_detector import (
    OpStatus,
    _platform_install_commands,
    detect_op,
    install_hint,
)


class TestDetectOp:
    @patch("op_wrap.infra.op_detector.shutil.which", return_value="/usr/bin/op")
    def test_found(self, _mock_which: MagicMock) -> None:
        status = detect_op()

        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.status_text == str(status.path)
        assert status.install_commands == ()

    @patch("op_wrap.infra.op_detector.shutil.which", return_value=None)
    def test_not_found(self, _mock_which: MagicMock) -> None:
        status = detect_op("op")
        assert status.found is False
        assert status.path is None
        assert status.status_text == "op not found"
        assert len(status.install_commands) > 0

    @patch("op_wrap.infra.op_detector.shutil.which", return_value=None)
    def test_custom_path_probed(self, mock_which: MagicMock) -> None:
        detect_op("/opt/1password/op")
        mock_which.assert_called_once_with("/opt/1password/op")


class TestInstallHint:
    def test_mentions_override(self) -> None:
        assert "OP_WRAP_OP_PATH" in install_hint()


class TestPlatformCommands:
    @pytest.mark.parametrize(
        ("system", "expected"),
        [
            ("Windows", "winget install AgileBits.1Password.CLI"),
            ("Linux", "sudo apt install 1password-cli"),
            ("Darwin", "brew install --cask 1password-cli"),
        ],
    )
    def test_platforms(self, system: str, expected: str) -> None:
        with patch("op_wrap.infra.op_detector.platform.system", return_value=system):
            assert expected in _platform_install_commands()

    def test_unknown_platform_links_docs(self) -> None:
        with patch("op_wrap.infra.op_detector.platform.system", return_value="Plan9"):
            assert "developer.1password.com" in _platform_install_commands()[0]


class TestOpStatus:
    def test_frozen(self) -> None:
        status = OpStatus(found=True, path=None, status_text="x", install_commands=())
        with pytest.raises(AttributeError):
            status.found = False  # type: ignore[misc]
