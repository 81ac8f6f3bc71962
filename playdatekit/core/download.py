"""
Download primitive for PlaydateKit.

Provides "fetch archive at URL, extract to directory" with the idempotency the
resolvers rely on: fetching into a destination that already holds an extracted
archive is a no-op. Failures are never retried.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Optional

import requests
from requests.exceptions import RequestException

from playdatekit.core.exceptions import DownloadError
from playdatekit.core.filesystem import extract_archive, flatten_single_root
from playdatekit.core.platform import DownloadedFileType

logger = logging.getLogger(__name__)

ArchiveFetcher = Callable[..., Path]
"""Signature of fetch_archive(url, destination, file_type, strip_root=False)."""


def download_file(
    url: str,
    destination: Path,
    session: Optional[requests.Session] = None,
) -> Path:
    """
    Download file from URL to destination.

    Args:
        url: URL to download from
        destination: Local path to save file
        session: Optional requests session

    Returns:
        Path to downloaded file

    Raises:
        DownloadError: If the request fails
        ValueError: If URL or destination is invalid
    """
    if not url:
        raise ValueError("URL cannot be empty")

    if not destination:
        raise ValueError("Destination path cannot be empty")

    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)

    http = session or requests
    logger.info(f"Downloading from {url}")

    try:
        response = http.get(url, stream=True, allow_redirects=True)
        response.raise_for_status()

        with open(destination, "wb") as f:
            for chunk in response.iter_content(chunk_size=8192):
                if chunk:
                    f.write(chunk)
    except RequestException as e:
        if destination.exists():
            destination.unlink()
        raise DownloadError(f"failed to download {url}: {e}") from e

    logger.info(f"Download complete: {destination}")
    return destination


def fetch_archive(
    url: str,
    destination: Path,
    file_type: DownloadedFileType,
    strip_root: bool = False,
    session: Optional[requests.Session] = None,
) -> Path:
    """
    Download an archive and extract it into destination, exactly once.

    If destination already exists and is not empty the call returns without
    touching the network. Extraction happens in a staging directory that is
    renamed into place, so an interrupted fetch never leaves a destination that
    looks complete.

    Args:
        url: Archive URL
        destination: Directory that will hold the extracted contents
        file_type: Archive format
        strip_root: Hoist the contents of a single top-level directory
        session: Optional requests session

    Returns:
        destination

    Raises:
        DownloadError: If the download fails
        ArchiveExtractionError: If the archive cannot be extracted

    Example:
        >>> fetch_archive(
        ...     "https://example.com/lua-language-server-3.13.5-linux-x64.tar.gz",
        ...     Path("lua-language-server-3.13.5"),
        ...     DownloadedFileType.GZIP_TAR,
        ... )
    """
    destination = Path(destination)

    if destination.is_dir() and any(destination.iterdir()):
        logger.debug(f"Already extracted, skipping download: {destination}")
        return destination

    destination.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.TemporaryDirectory(
        prefix=f".{destination.name}-", dir=destination.parent
    ) as tmp:
        staging = Path(tmp)
        archive_path = staging / f"archive.{file_type.value}"
        extract_dir = staging / "contents"

        download_file(url, archive_path, session=session)

        logger.info(f"Extracting to {destination}...")
        extract_archive(archive_path, extract_dir, file_type)
        if strip_root:
            flatten_single_root(extract_dir)

        if destination.exists():
            # Left over as an empty directory
            destination.rmdir()
        shutil.move(str(extract_dir), str(destination))

    return destination
