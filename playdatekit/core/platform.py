"""
Platform detection for PlaydateKit.

Resolves the current operating system and CPU architecture into the identifiers
needed to pick downloadable assets, archive formats and executable suffixes.

Usage:
    from playdatekit.core.platform import detect_platform

    platform_info = detect_platform()
    print(f"Platform string: {platform_info.platform_string()}")
    print(f"Archive format: {platform_info.archive_extension()}")
"""

import enum
import functools
import logging
import platform
from dataclasses import dataclass

from playdatekit.core.exceptions import UnsupportedPlatformError

logger = logging.getLogger(__name__)


class OperatingSystem(enum.Enum):
    """Operating systems the Playdate SDK ships for."""

    MAC = "mac"
    LINUX = "linux"
    WINDOWS = "windows"


class Architecture(enum.Enum):
    """CPU architectures."""

    AARCH64 = "aarch64"
    X86_64 = "x86_64"
    X86 = "x86"


class DownloadedFileType(enum.Enum):
    """Archive formats understood by the download primitive."""

    GZIP_TAR = "tar.gz"
    ZIP = "zip"


@dataclass(frozen=True)
class PlatformInfo:
    """
    Operating system and CPU architecture of the host.

    Attributes:
        os: Operating system
        arch: CPU architecture
    """

    os: OperatingSystem
    arch: Architecture

    def platform_string(self) -> str:
        """
        Get canonical platform string (e.g., 'linux-x86_64', 'mac-aarch64').

        Example:
            >>> PlatformInfo(OperatingSystem.LINUX, Architecture.X86_64).platform_string()
            'linux-x86_64'
        """
        return f"{self.os.value}-{self.arch.value}"

    @property
    def is_windows(self) -> bool:
        return self.os is OperatingSystem.WINDOWS

    def downloaded_file_type(self) -> DownloadedFileType:
        """Archive format used for release downloads on this platform."""
        if self.is_windows:
            return DownloadedFileType.ZIP
        return DownloadedFileType.GZIP_TAR

    def archive_extension(self) -> str:
        """File extension of release archives ('tar.gz' or 'zip')."""
        return self.downloaded_file_type().value

    def executable_suffix(self) -> str:
        """Suffix appended to executable names ('.exe' on Windows)."""
        return ".exe" if self.is_windows else ""

    def __str__(self) -> str:
        return self.platform_string()


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformInfo for the running interpreter

    Raises:
        UnsupportedPlatformError: If the operating system is not Mac, Linux or Windows
    """
    return PlatformInfo(os=_detect_os(), arch=_detect_architecture())


def _detect_os() -> OperatingSystem:
    """
    Detect operating system.

    Raises:
        UnsupportedPlatformError: If OS is not supported
    """
    system = platform.system().lower()

    if system == "darwin":
        return OperatingSystem.MAC
    elif system == "linux":
        return OperatingSystem.LINUX
    elif system == "windows":
        return OperatingSystem.WINDOWS
    else:
        raise UnsupportedPlatformError(f"Unsupported operating system: {system}")


def _detect_architecture() -> Architecture:
    """
    Detect CPU architecture.

    Machines outside the model (e.g. armv7l, riscv64) are reported as X86,
    which operations needing a native download reject.
    """
    machine = platform.machine().lower()

    # Normalize architecture names
    if machine in ("x86_64", "amd64", "x64"):
        return Architecture.X86_64
    elif machine in ("aarch64", "arm64"):
        return Architecture.AARCH64
    elif machine in ("i386", "i686", "x86"):
        return Architecture.X86
    else:
        logger.warning(f"Unrecognized architecture {machine!r}, treating it as x86")
        return Architecture.X86


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    """
    detect_platform.cache_clear()


__all__ = [
    "OperatingSystem",
    "Architecture",
    "DownloadedFileType",
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
]
