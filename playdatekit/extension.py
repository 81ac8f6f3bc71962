"""
Playdate editor extension.

`PlaydateExtension` is the object the editor talks to. It owns the
process-lifetime tool caches and routes each host request (language server
command, settings, code labels, debug adapter) to the component that handles it.

Example:
    >>> extension = PlaydateExtension(work_dir=Path("/work"))
    >>> command = extension.language_server_command(
    ...     PlaydateExtension.LSP_SERVER_ID, worktree
    ... )
    >>> print(command.command)
"""

import functools
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from playdatekit.core.cache import ToolPathCache
from playdatekit.core.download import ArchiveFetcher, fetch_archive
from playdatekit.core.environment import EnvironmentProber
from playdatekit.core.exceptions import (
    SdkNotFoundError,
    UnsupportedAdapterError,
    UnsupportedServerError,
)
from playdatekit.core.interfaces import StatusCallback, Worktree, ignore_status
from playdatekit.core.platform import PlatformInfo
from playdatekit.core.releases import GITHUB_API_URL, latest_github_release
from playdatekit.debug.config import PlaydateDebugConfig, RequestKind, classify_request
from playdatekit.debug.resolver import (
    DebugAdapterBinary,
    DebugConfigResolver,
    DebugTaskDefinition,
)
from playdatekit.lsp import labels, settings
from playdatekit.tools.language_server import (
    LANGUAGE_SERVER_REPOSITORY,
    LanguageServerResolver,
)
from playdatekit.tools.type_definitions import (
    CommandRunner,
    TypeDefinitionsResolver,
    run_command,
)

logger = logging.getLogger(__name__)


@dataclass
class Command:
    """A process the editor should spawn."""

    command: str
    args: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)


class PlaydateExtension:
    """Language intelligence and debugging for Playdate projects."""

    ADAPTER_NAME = "Playdate"
    LSP_SERVER_ID = "playdate-lua-language-server"

    def __init__(
        self,
        work_dir: Optional[Path] = None,
        platform: Optional[PlatformInfo] = None,
        status_callback: StatusCallback = ignore_status,
        language_server_repository: str = LANGUAGE_SERVER_REPOSITORY,
        github_api_url: str = GITHUB_API_URL,
        fetch: ArchiveFetcher = fetch_archive,
        runner: CommandRunner = run_command,
    ):
        """
        Initialize extension.

        Args:
            work_dir: Directory downloads are extracted into (default: cwd)
            platform: Platform information (auto-detected if None)
            status_callback: Receives language server installation status
            language_server_repository: GitHub repository of lua-language-server
            github_api_url: Base URL of the GitHub REST API
            fetch: Download-and-extract primitive
            runner: Runs `pdc --version`
        """
        self.work_dir = Path(work_dir or Path.cwd()).absolute()
        self.platform = platform
        self.cache = ToolPathCache()

        self.language_server = LanguageServerResolver(
            self.work_dir,
            self.cache,
            platform=platform,
            repository=language_server_repository,
            status_callback=status_callback,
            release_query=functools.partial(
                latest_github_release, api_url=github_api_url
            ),
            fetch=fetch,
        )
        self.type_definitions = TypeDefinitionsResolver(
            self.work_dir, self.cache, runner=runner, fetch=fetch
        )
        self.debug_resolver = DebugConfigResolver(platform=platform)

        logger.debug(f"Initialized Playdate extension in {self.work_dir}")

    # ------------------------------------------------------------------
    # Language server
    # ------------------------------------------------------------------

    def language_server_command(self, server_id: str, worktree: Worktree) -> Command:
        """
        Get the command that starts the language server.

        Raises:
            UnsupportedServerError: For any server id but LSP_SERVER_ID
        """
        if server_id != self.LSP_SERVER_ID:
            raise UnsupportedServerError(server_id)

        return Command(command=self.language_server.resolve(server_id, worktree))

    def language_server_initialization_options(
        self, server_id: str, worktree: Worktree
    ) -> Optional[Dict[str, Any]]:
        """Static settings sent when the language server starts."""
        if server_id != self.LSP_SERVER_ID:
            return None

        return settings.initialization_options().to_dict()

    def language_server_workspace_configuration(
        self, server_id: str, worktree: Worktree
    ) -> Optional[Dict[str, Any]]:
        """
        Settings for a workspace, including SDK and type-definition libraries.

        A missing SDK is tolerated; failing to resolve the type definitions is
        not.

        Raises:
            ToolNotFoundError: If pdc is not on the search path
            ToolInvocationError: If pdc cannot be run
            DownloadError: If the type definitions cannot be fetched
        """
        if server_id != self.LSP_SERVER_ID:
            return None

        try:
            sdk_path: Optional[str] = self._prober(worktree).detect_sdk_path()
        except SdkNotFoundError as e:
            logger.warning(f"Continuing without Playdate SDK libraries: {e}")
            sdk_path = None

        type_definitions_path = self.type_definitions.resolve(worktree)

        return settings.workspace_configuration(
            sdk_path, type_definitions_path
        ).to_dict()

    def label_for_completion(
        self, server_id: str, completion: labels.Completion
    ) -> Optional[labels.CodeLabel]:
        return labels.label_for_completion(completion)

    def label_for_symbol(
        self, server_id: str, symbol: labels.Symbol
    ) -> Optional[labels.CodeLabel]:
        return labels.label_for_symbol(symbol)

    # ------------------------------------------------------------------
    # Debug adapter
    # ------------------------------------------------------------------

    def get_dap_binary(
        self,
        adapter_name: str,
        config: DebugTaskDefinition,
        user_provided_debug_adapter_path: Optional[str],
        worktree: Worktree,
    ) -> DebugAdapterBinary:
        """
        Resolve a debug task into the binary and connection to use.

        The Playdate Simulator is its own debug server, so a user-provided
        adapter path is not used.

        Raises:
            UnsupportedAdapterError: For any adapter but ADAPTER_NAME
            ValidationError: If the configuration is malformed or incomplete
            SdkNotFoundError: If no SDK path is given and none can be detected
        """
        if adapter_name != self.ADAPTER_NAME:
            raise UnsupportedAdapterError(adapter_name)

        return self.debug_resolver.build_session_spec(config, worktree)

    def dap_request_kind(
        self, adapter_name: str, config: Dict[str, Any]
    ) -> RequestKind:
        """
        Tell the editor whether a configuration launches or attaches.

        Raises:
            UnsupportedAdapterError: For any adapter but ADAPTER_NAME
            ConfigParseError: If the configuration is malformed
            InvalidRequestError: If request is not 'launch' or 'attach'
        """
        if adapter_name != self.ADAPTER_NAME:
            raise UnsupportedAdapterError(adapter_name)

        return classify_request(PlaydateDebugConfig.from_dict(config))

    def _prober(self, worktree: Worktree) -> EnvironmentProber:
        return EnvironmentProber(worktree, platform=self.platform)
