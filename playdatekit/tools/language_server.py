"""
Language server resolution.

Finds a runnable lua-language-server: a copy on the search path wins, then a
path resolved earlier in this process, and finally the latest GitHub release
is downloaded and extracted once.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from playdatekit.core.cache import ToolPathCache
from playdatekit.core.download import ArchiveFetcher, fetch_archive
from playdatekit.core.exceptions import AssetNotFoundError, UnsupportedPlatformError
from playdatekit.core.interfaces import (
    InstallationStatus,
    StatusCallback,
    Worktree,
    ignore_status,
)
from playdatekit.core.platform import (
    Architecture,
    OperatingSystem,
    PlatformInfo,
    detect_platform,
)
from playdatekit.core.releases import GithubRelease, latest_github_release

logger = logging.getLogger(__name__)

LANGUAGE_SERVER_BINARY = "lua-language-server"
LANGUAGE_SERVER_REPOSITORY = "LuaLS/lua-language-server"

_ASSET_OS_NAMES = {
    OperatingSystem.MAC: "darwin",
    OperatingSystem.LINUX: "linux",
    OperatingSystem.WINDOWS: "win32",
}

_ASSET_ARCH_NAMES = {
    Architecture.AARCH64: "arm64",
    Architecture.X86_64: "x64",
}


def asset_name(version: str, platform: PlatformInfo) -> str:
    """
    Build the release asset file name for a platform.

    Example:
        >>> asset_name("3.13.5", PlatformInfo(OperatingSystem.LINUX, Architecture.X86_64))
        'lua-language-server-3.13.5-linux-x64.tar.gz'

    Raises:
        UnsupportedPlatformError: For 32-bit x86
    """
    arch = _ASSET_ARCH_NAMES.get(platform.arch)
    if arch is None:
        raise UnsupportedPlatformError(f"unsupported platform {platform.arch.value}")

    return (
        f"{LANGUAGE_SERVER_BINARY}-{version}-{_ASSET_OS_NAMES[platform.os]}"
        f"-{arch}.{platform.archive_extension()}"
    )


class LanguageServerResolver:
    """
    Resolves the lua-language-server executable.

    Example:
        >>> resolver = LanguageServerResolver(Path("/work"), ToolPathCache())
        >>> resolver.resolve("playdate-lua-language-server", worktree)
        '/work/lua-language-server-3.13.5/bin/lua-language-server'
    """

    def __init__(
        self,
        work_dir: Path,
        cache: ToolPathCache,
        platform: Optional[PlatformInfo] = None,
        repository: str = LANGUAGE_SERVER_REPOSITORY,
        status_callback: StatusCallback = ignore_status,
        release_query: Callable[..., GithubRelease] = latest_github_release,
        fetch: ArchiveFetcher = fetch_archive,
    ):
        """
        Initialize language server resolver.

        Args:
            work_dir: Directory releases are extracted into
            cache: Process-lifetime path cache
            platform: Platform information (auto-detected if None)
            repository: GitHub repository publishing the releases
            status_callback: Receives installation status updates
            release_query: Function returning the latest qualifying release
            fetch: Download-and-extract primitive
        """
        self.work_dir = Path(work_dir)
        self.cache = cache
        self.platform = platform
        self.repository = repository
        self.status_callback = status_callback
        self.release_query = release_query
        self.fetch = fetch

    def resolve(self, server_id: str, worktree: Worktree) -> str:
        """
        Get a runnable path to the language server.

        Args:
            server_id: Language server id, used for status reporting
            worktree: Worktree whose search path is consulted first

        Returns:
            Path to the lua-language-server executable

        Raises:
            UnsupportedPlatformError: On 32-bit x86, before any network call
            ReleaseQueryError: If the release index cannot be queried
            ReleaseNotFoundError: If no release qualifies
            AssetNotFoundError: If the release lacks this platform's asset
            DownloadError: If the archive download fails
        """
        path = worktree.which(LANGUAGE_SERVER_BINARY)
        if path:
            logger.debug(f"Using {LANGUAGE_SERVER_BINARY} from PATH: {path}")
            return path

        cached = self.cache.get(LANGUAGE_SERVER_BINARY)
        if cached:
            return cached

        platform = self.platform or detect_platform()
        if platform.arch not in _ASSET_ARCH_NAMES:
            raise UnsupportedPlatformError(
                f"unsupported platform {platform.arch.value}"
            )

        self.status_callback(server_id, InstallationStatus.CHECKING_FOR_UPDATE)
        release = self.release_query(
            self.repository, require_assets=True, pre_release=False
        )

        expected_name = asset_name(release.version, platform)
        asset = release.find_asset(expected_name)
        if asset is None:
            raise AssetNotFoundError(expected_name)

        version_dir = self.work_dir / f"{LANGUAGE_SERVER_BINARY}-{release.version}"
        binary_path = (
            version_dir / "bin" / f"{LANGUAGE_SERVER_BINARY}{platform.executable_suffix()}"
        )

        self.status_callback(server_id, InstallationStatus.DOWNLOADING)
        logger.info(f"Fetching {expected_name} into {version_dir}")
        self.fetch(asset.download_url, version_dir, platform.downloaded_file_type())

        return self.cache.put(LANGUAGE_SERVER_BINARY, str(binary_path))
