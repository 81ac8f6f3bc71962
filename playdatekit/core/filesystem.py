"""
Archive extraction utilities for PlaydateKit.

Extracts the .tar.gz and .zip archives published for the language server and
the type-definition packages. All member paths are validated to prevent
directory traversal.
"""

import shutil
import sys
import tarfile
import zipfile
from pathlib import Path
from typing import Union

from playdatekit.core.exceptions import ArchiveExtractionError, InsecureArchiveError
from playdatekit.core.platform import DownloadedFileType


def is_relative_to(path: Path, parent: Path) -> bool:
    """Check if path is relative to parent."""
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


def _validate_archive_path(path: str, destination: Path) -> None:
    """
    Validate that an archive member path is safe to extract.

    Raises:
        InsecureArchiveError: If path attempts directory traversal
    """
    member_path = (destination / path).resolve()

    if not is_relative_to(member_path, destination.resolve()):
        raise InsecureArchiveError(
            f"Archive member '{path}' attempts directory traversal. "
            "This is a security risk and extraction has been blocked."
        )


def extract_archive(
    archive_path: Union[str, Path],
    destination: Union[str, Path],
    file_type: DownloadedFileType,
) -> None:
    """
    Extract an archive to a destination directory.

    Args:
        archive_path: Path to the archive file
        destination: Directory to extract to
        file_type: Archive format

    Raises:
        ArchiveExtractionError: If extraction fails
        InsecureArchiveError: If archive contains malicious paths

    Example:
        >>> extract_archive('lua-language-server.tar.gz', '/tmp/lls', DownloadedFileType.GZIP_TAR)
    """
    archive_path = Path(archive_path)
    destination = Path(destination)

    if not archive_path.exists():
        raise ArchiveExtractionError(f"Archive not found: {archive_path}")

    destination.mkdir(parents=True, exist_ok=True)

    try:
        if file_type is DownloadedFileType.ZIP:
            _extract_zip(archive_path, destination)
        else:
            _extract_tar_gz(archive_path, destination)
    except InsecureArchiveError:
        raise
    except Exception as e:
        raise ArchiveExtractionError(f"Failed to extract {archive_path}: {e}") from e


def _extract_zip(archive_path: Path, destination: Path) -> None:
    """Extract a ZIP archive."""
    with zipfile.ZipFile(archive_path, "r") as zf:
        members = zf.namelist()

        # Validate all paths first
        for member in members:
            _validate_archive_path(member, destination)

        zf.extractall(destination)


def _extract_tar_gz(archive_path: Path, destination: Path) -> None:
    """Extract a .tar.gz archive."""
    with tarfile.open(archive_path, "r:gz") as tar:
        for member in tar.getmembers():
            _validate_archive_path(member.name, destination)

        # Extract with filter for security (Python 3.12+)
        # For older Python, we've already validated paths above
        if sys.version_info >= (3, 12):
            tar.extractall(destination, filter="data")
        else:
            tar.extractall(destination)


def flatten_single_root(directory: Path) -> None:
    """
    Hoist the contents of a lone top-level directory into its parent.

    Source archives (e.g. GitHub tag tarballs) wrap everything in one
    directory; this makes `directory` hold that directory's contents instead.
    Does nothing if `directory` does not contain exactly one subdirectory.
    """
    entries = list(directory.iterdir())
    if len(entries) != 1 or not entries[0].is_dir():
        return

    # Renamed first so a child with the same name cannot collide with it
    root = entries[0].rename(directory / f".{entries[0].name}.root")
    for item in root.iterdir():
        shutil.move(str(item), str(directory / item.name))
    root.rmdir()
