"""
Tests for platform detection — WSL refinement of Linux.
"""

from pathlib import Path
from unittest.mock import patch

from ai_switch.core.services.platform_detect import is_wsl, resolve_platform


class TestIsWsl:
    def test_not_linux(self, tmp_path: Path):
        assert is_wsl(environ={"WSL_DISTRO_NAME": "Ubuntu"}, system="darwin") is False

    def test_distro_env_var(self, tmp_path: Path):
        missing = tmp_path / "nope"
        assert is_wsl(
            environ={"WSL_DISTRO_NAME": "Ubuntu"},
            proc_version_path=str(missing),
            system="linux",
        ) is True

    def test_proc_version_microsoft(self, tmp_path: Path):
        proc = tmp_path / "version"
        proc.write_text("Linux version 5.15.90.1-microsoft-standard-WSL2")
        assert is_wsl(environ={}, proc_version_path=str(proc), system="linux") is True

    def test_plain_linux(self, tmp_path: Path):
        proc = tmp_path / "version"
        proc.write_text("Linux version 6.5.0-generic (buildd@ubuntu)")
        assert is_wsl(environ={}, proc_version_path=str(proc), system="linux") is False

    def test_unreadable_proc_version(self, tmp_path: Path):
        assert is_wsl(
            environ={},
            proc_version_path=str(tmp_path / "missing"),
            system="linux",
        ) is False


class TestResolvePlatform:
    def test_wsl(self):
        with patch("ai_switch.core.services.platform_detect.is_wsl", return_value=True):
            assert resolve_platform() == "wsl"

    def test_native(self):
        with patch("ai_switch.core.services.platform_detect.is_wsl", return_value=False), \
             patch("ai_switch.core.services.platform_detect.sys.platform", "darwin"):
            assert resolve_platform() == "darwin"
