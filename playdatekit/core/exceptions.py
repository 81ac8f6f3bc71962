"""
Centralized exception hierarchy for PlaydateKit.

Every public entry point either succeeds or raises one of these exceptions.
Messages always carry the name of the missing executable, the attempted
asset/tag/URL or the underlying error text so the host can show them as-is.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class PlaydateKitError(Exception):
    """Base exception for all PlaydateKit errors."""

    pass


# ============================================================================
# Not Found
# ============================================================================


class NotFoundError(PlaydateKitError):
    """Base exception when a tool, SDK, release or asset is absent."""

    pass


class ToolNotFoundError(NotFoundError):
    """Raised when a required executable is not on the search path."""

    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(f"{executable} command not found in PATH")


class SdkNotFoundError(NotFoundError):
    """Raised when the Playdate SDK location cannot be determined."""

    pass


class ReleaseNotFoundError(NotFoundError):
    """Raised when a repository has no release matching the query."""

    pass


class AssetNotFoundError(NotFoundError):
    """Raised when a release has no asset with the expected name."""

    def __init__(self, asset_name: str):
        self.asset_name = asset_name
        super().__init__(f"no asset found matching {asset_name!r}")


# ============================================================================
# Validation
# ============================================================================


class ValidationError(PlaydateKitError):
    """Base exception for malformed input."""

    pass


class ConfigParseError(ValidationError):
    """Raised when a debug configuration cannot be parsed."""

    pass


class InvalidRequestError(ValidationError):
    """Raised when a debug request type is neither 'launch' nor 'attach'."""

    def __init__(self, request: str):
        self.request = request
        super().__init__(
            f"Invalid request type '{request}'. Expected 'launch' or 'attach'"
        )


class MissingFieldError(ValidationError):
    """Raised when a required configuration field is unset."""

    pass


class InvalidConnectionError(ValidationError):
    """Raised when a debug connection override is out of range."""

    def __init__(self, field_name: str, value):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Invalid debug connection {field_name}: {value!r}")


class UnsupportedServerError(ValidationError):
    """Raised for a language server id this extension does not provide."""

    def __init__(self, server_id: str):
        self.server_id = server_id
        super().__init__(f"Unsupported language server ID: {server_id}")


class UnsupportedAdapterError(ValidationError):
    """Raised for a debug adapter name this extension does not provide."""

    def __init__(self, adapter_name: str):
        self.adapter_name = adapter_name
        super().__init__(f"Unsupported adapter name: {adapter_name}")


# ============================================================================
# Transport
# ============================================================================


class TransportError(PlaydateKitError):
    """Base exception for network and archive failures."""

    pass


class DownloadError(TransportError):
    """Raised when a download fails."""

    pass


class ReleaseQueryError(TransportError):
    """Raised when the release index cannot be queried."""

    pass


class ArchiveExtractionError(TransportError):
    """Raised when a downloaded archive cannot be extracted."""

    pass


class InsecureArchiveError(ArchiveExtractionError):
    """Archive contains insecure paths (directory traversal attempt)."""

    pass


# ============================================================================
# Process / Platform
# ============================================================================


class ToolInvocationError(PlaydateKitError):
    """Raised when a located executable cannot be run."""

    pass


class UnsupportedPlatformError(PlaydateKitError):
    """Raised when the operating system or CPU architecture is not supported."""

    pass
