"""
Core functionality for PlaydateKit.

This package contains the foundational modules that other components depend on.
"""

from .platform import (
    OperatingSystem,
    Architecture,
    DownloadedFileType,
    PlatformInfo,
    detect_platform,
    clear_platform_cache,
)

from .interfaces import (
    Worktree,
    LocalWorktree,
    InstallationStatus,
    StatusCallback,
)

from .environment import EnvironmentProber, SDK_PATH_ENV_VAR

from .cache import ToolPathCache

from .exceptions import (
    PlaydateKitError,
    NotFoundError,
    ToolNotFoundError,
    SdkNotFoundError,
    ReleaseNotFoundError,
    AssetNotFoundError,
    ValidationError,
    ConfigParseError,
    InvalidRequestError,
    InvalidConnectionError,
    MissingFieldError,
    UnsupportedServerError,
    UnsupportedAdapterError,
    TransportError,
    DownloadError,
    ReleaseQueryError,
    ArchiveExtractionError,
    InsecureArchiveError,
    ToolInvocationError,
    UnsupportedPlatformError,
)

__all__ = [
    "OperatingSystem",
    "Architecture",
    "DownloadedFileType",
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
    "Worktree",
    "LocalWorktree",
    "InstallationStatus",
    "StatusCallback",
    "EnvironmentProber",
    "SDK_PATH_ENV_VAR",
    "ToolPathCache",
    "PlaydateKitError",
    "NotFoundError",
    "ToolNotFoundError",
    "SdkNotFoundError",
    "ReleaseNotFoundError",
    "AssetNotFoundError",
    "ValidationError",
    "ConfigParseError",
    "InvalidRequestError",
    "InvalidConnectionError",
    "MissingFieldError",
    "UnsupportedServerError",
    "UnsupportedAdapterError",
    "TransportError",
    "DownloadError",
    "ReleaseQueryError",
    "ArchiveExtractionError",
    "InsecureArchiveError",
    "ToolInvocationError",
    "UnsupportedPlatformError",
]
