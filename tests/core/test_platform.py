"""
Unit tests for the platform detection module.

Tests cover:
- PlatformInfo archive and executable conventions
- OS detection with mocking
- Architecture detection and normalization
- Cache behavior
"""

import logging

import pytest
from unittest.mock import Mock, patch

from playdatekit.core.cache import ToolPathCache
from playdatekit.core.exceptions import UnsupportedPlatformError
from playdatekit.core.platform import (
    Architecture,
    DownloadedFileType,
    OperatingSystem,
    PlatformInfo,
    _detect_architecture,
    _detect_os,
    clear_platform_cache,
    detect_platform,
)
from playdatekit.tools.language_server import LanguageServerResolver


class TestPlatformInfo:
    """Tests for PlatformInfo dataclass."""

    def test_platform_string(self, linux_x64):
        """Test platform string generation for Linux x64."""
        assert linux_x64.platform_string() == "linux-x86_64"
        assert str(linux_x64) == "linux-x86_64"

    def test_unix_uses_gzip_tar(self, linux_x64, mac_arm64):
        """Test Mac and Linux releases are tarballs."""
        for info in (linux_x64, mac_arm64):
            assert info.downloaded_file_type() is DownloadedFileType.GZIP_TAR
            assert info.archive_extension() == "tar.gz"
            assert info.executable_suffix() == ""

    def test_windows_uses_zip(self, windows_x64):
        """Test Windows releases are zip files with .exe binaries."""
        assert windows_x64.is_windows
        assert windows_x64.downloaded_file_type() is DownloadedFileType.ZIP
        assert windows_x64.archive_extension() == "zip"
        assert windows_x64.executable_suffix() == ".exe"

    def test_frozen(self, linux_x64):
        """Test PlatformInfo is immutable."""
        with pytest.raises(AttributeError):
            linux_x64.os = OperatingSystem.MAC


class TestOSDetection:
    """Tests for operating system detection."""

    @pytest.mark.parametrize(
        "system,expected",
        [
            ("Darwin", OperatingSystem.MAC),
            ("Linux", OperatingSystem.LINUX),
            ("Windows", OperatingSystem.WINDOWS),
        ],
    )
    def test_detect_os(self, system, expected):
        with patch("platform.system", return_value=system):
            assert _detect_os() is expected

    def test_unsupported_os(self):
        """Test unknown OS raises error."""
        with patch("platform.system", return_value="FreeBSD"):
            with pytest.raises(UnsupportedPlatformError, match="freebsd"):
                _detect_os()


class TestArchitectureDetection:
    """Tests for architecture detection and normalization."""

    @pytest.mark.parametrize(
        "machine,expected",
        [
            ("x86_64", Architecture.X86_64),
            ("AMD64", Architecture.X86_64),
            ("arm64", Architecture.AARCH64),
            ("aarch64", Architecture.AARCH64),
            ("i686", Architecture.X86),
        ],
    )
    def test_detect_architecture(self, machine, expected):
        with patch("platform.machine", return_value=machine):
            assert _detect_architecture() is expected

    @pytest.mark.parametrize("machine", ["riscv64", "armv7l", "ppc64le"])
    def test_unrecognized_architecture_is_x86(self, machine, caplog):
        """Test unknown architectures do not fail detection."""
        with caplog.at_level(logging.WARNING, logger="playdatekit.core.platform"):
            with patch("platform.machine", return_value=machine):
                assert _detect_architecture() is Architecture.X86

        assert machine in caplog.text

    def test_unrecognized_architecture_rejected_for_download(self, make_worktree):
        """Test the language server download still fails fast on such machines."""
        clear_platform_cache()
        try:
            with patch("platform.system", return_value="Linux"), patch(
                "platform.machine", return_value="riscv64"
            ):
                info = detect_platform()
        finally:
            clear_platform_cache()

        release_query = Mock()
        resolver = LanguageServerResolver(
            "/work", ToolPathCache(), platform=info, release_query=release_query
        )

        with pytest.raises(UnsupportedPlatformError, match="unsupported platform x86"):
            resolver.resolve("playdate-lua-language-server", make_worktree())
        release_query.assert_not_called()


class TestPlatformCache:
    """Tests for detect_platform caching."""

    def test_detect_platform_cached(self):
        """Test detection runs only once until the cache is cleared."""
        clear_platform_cache()
        try:
            with patch("platform.system", return_value="Linux") as mock_system, patch(
                "platform.machine", return_value="x86_64"
            ):
                first = detect_platform()
                second = detect_platform()

            assert first is second
            assert first == PlatformInfo(OperatingSystem.LINUX, Architecture.X86_64)
            assert mock_system.call_count == 1
        finally:
            clear_platform_cache()
