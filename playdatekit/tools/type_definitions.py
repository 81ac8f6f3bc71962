"""
Playdate type-definition (luacats) resolution.

The installed SDK version is read from `pdc --version` and used to fetch the
matching playdate-luacats source archive. Its `library` directory is handed to
the language server as a workspace library.
"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, List

from playdatekit.core.cache import ToolPathCache
from playdatekit.core.download import ArchiveFetcher, fetch_archive
from playdatekit.core.exceptions import (
    DownloadError,
    ToolInvocationError,
    ToolNotFoundError,
)
from playdatekit.core.interfaces import Worktree
from playdatekit.core.platform import DownloadedFileType

logger = logging.getLogger(__name__)

COMPILER_BINARY = "pdc"
CACHE_KEY = "playdate-luacats"

# Only this tag variant is published for now.
# TODO: fall back to later luacats suffixes once a second one exists upstream
LUACATS_SUFFIX = "luacats1"
LUACATS_ARCHIVE_URL = (
    "https://github.com/notpeter/playdate-luacats/archive/refs/tags/{tag}.tar.gz"
)

CommandRunner = Callable[[List[str]], bytes]
"""Runs a command and returns its standard output."""


def run_command(args: List[str]) -> bytes:
    """
    Run a command and capture its standard output.

    Raises:
        ToolInvocationError: If the process cannot be started
    """
    try:
        result = subprocess.run(args, capture_output=True, check=False)
    except OSError as e:
        raise ToolInvocationError(f"failed to run {' '.join(args)}: {e}") from e
    return result.stdout


def luacats_tag(sdk_version: str) -> str:
    """Tag name of the luacats release for an SDK version (e.g. 'v2.5.0-luacats1')."""
    return f"v{sdk_version}-{LUACATS_SUFFIX}"


def luacats_directory(sdk_version: str) -> str:
    """Directory the luacats source archive extracts to."""
    return f"playdate-luacats-{sdk_version}-{LUACATS_SUFFIX}"


class TypeDefinitionsResolver:
    """
    Resolves the luacats library directory matching the installed SDK.

    Example:
        >>> resolver = TypeDefinitionsResolver(Path("/work"), ToolPathCache())
        >>> resolver.resolve(worktree)
        '/work/playdate-luacats-2.5.0-luacats1/library'
    """

    def __init__(
        self,
        work_dir: Path,
        cache: ToolPathCache,
        runner: CommandRunner = run_command,
        fetch: ArchiveFetcher = fetch_archive,
    ):
        """
        Initialize type-definitions resolver.

        Args:
            work_dir: Directory archives are extracted into
            cache: Process-lifetime path cache
            runner: Runs `pdc --version`
            fetch: Download-and-extract primitive
        """
        self.work_dir = Path(work_dir)
        self.cache = cache
        self.runner = runner
        self.fetch = fetch

    def sdk_version(self, worktree: Worktree) -> str:
        """
        Get the SDK version reported by pdc.

        Raises:
            ToolNotFoundError: If pdc is not on the search path
            ToolInvocationError: If pdc cannot be run
        """
        pdc_path = worktree.which(COMPILER_BINARY)
        if not pdc_path:
            raise ToolNotFoundError(COMPILER_BINARY)

        output = self.runner([pdc_path, "--version"])
        version = output.decode("utf-8", errors="replace").strip()
        logger.debug(f"{COMPILER_BINARY} reports SDK version {version!r}")
        return version

    def resolve(self, worktree: Worktree) -> str:
        """
        Get the absolute path of the luacats `library` directory.

        Returns:
            Library directory path

        Raises:
            ToolNotFoundError: If pdc is not on the search path
            ToolInvocationError: If pdc cannot be run
            DownloadError: If the archive for the SDK's tag cannot be fetched
        """
        cached = self.cache.get(CACHE_KEY)
        if cached:
            return cached

        version = self.sdk_version(worktree)
        tag = luacats_tag(version)
        version_dir = self.work_dir.absolute() / luacats_directory(version)
        url = LUACATS_ARCHIVE_URL.format(tag=tag)

        try:
            self.fetch(url, version_dir, DownloadedFileType.GZIP_TAR, strip_root=True)
        except DownloadError as e:
            raise DownloadError(
                f"failed to download playdate-luacats tag {tag}: {e}"
            ) from e

        library_path = str(version_dir / "library")
        logger.info(f"Playdate type definitions: {library_path}")
        return self.cache.put(CACHE_KEY, library_path)
