"""Debug session resolution.

Turns an editor debug task into a DebugAdapterBinary: the command that starts
the Playdate Simulator (launch only), the TCP parameters of the simulator's
debug server, and the fully-resolved configuration for the session.
"""

import ipaddress
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from playdatekit.core.environment import EnvironmentProber
from playdatekit.core.exceptions import InvalidConnectionError, MissingFieldError
from playdatekit.core.interfaces import Worktree
from playdatekit.core.platform import PlatformInfo
from playdatekit.debug.config import PlaydateDebugConfig, RequestKind, classify_request

logger = logging.getLogger(__name__)

DEFAULT_HOST = 0x7F000001  # 127.0.0.1
DEFAULT_PORT = 55934
DEFAULT_TIMEOUT_MS = 5000

MAX_HOST = 2**32 - 1
MAX_PORT = 65535


def _check_field(name: str, value: Any, maximum: Optional[int]) -> None:
    if value is None:
        return
    # bool is an int subclass but never a valid address, port or timeout
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConnectionError(name, value)
    if value < 0 or (maximum is not None and value > maximum):
        raise InvalidConnectionError(name, value)


@dataclass
class TcpConnection:
    """
    Caller-supplied connection override; unset fields keep their defaults.

    Attributes:
        host: IPv4 address as a 32-bit integer
        port: TCP port (0-65535)
        timeout: Connection timeout in milliseconds

    Raises:
        InvalidConnectionError: If a field has the wrong type or is out of range
    """

    host: Optional[int] = None
    port: Optional[int] = None
    timeout: Optional[int] = None

    def __post_init__(self):
        _check_field("host", self.host, MAX_HOST)
        _check_field("port", self.port, MAX_PORT)
        _check_field("timeout", self.timeout, None)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TcpConnection":
        return cls(
            host=data.get("host"), port=data.get("port"), timeout=data.get("timeout")
        )


@dataclass
class TcpArguments:
    """Resolved connection to the simulator's debug server."""

    host: int = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: Optional[int] = DEFAULT_TIMEOUT_MS

    @property
    def host_address(self) -> str:
        """Host as a dotted IPv4 string."""
        return str(ipaddress.IPv4Address(self.host))

    def to_dict(self) -> Dict[str, Any]:
        return {"host": self.host, "port": self.port, "timeout": self.timeout}


def resolve_connection(override: Optional[TcpConnection] = None) -> TcpArguments:
    """Merge a connection override with the defaults, field by field."""
    if override is None:
        return TcpArguments()

    return TcpArguments(
        host=override.host if override.host is not None else DEFAULT_HOST,
        port=override.port if override.port is not None else DEFAULT_PORT,
        timeout=override.timeout if override.timeout is not None else DEFAULT_TIMEOUT_MS,
    )


@dataclass
class DebugTaskDefinition:
    """A debug task as handed over by the editor."""

    label: str
    adapter: str
    config: str
    tcp_connection: Optional[TcpConnection] = None


@dataclass
class StartDebuggingRequestArguments:
    """Arguments of the session's launch/attach request."""

    configuration: str
    request: RequestKind

    def to_dict(self) -> Dict[str, Any]:
        return {"configuration": self.configuration, "request": self.request.value}


@dataclass
class DebugAdapterBinary:
    """Everything the editor needs to start a Playdate debug session."""

    request_args: StartDebuggingRequestArguments
    command: Optional[str] = None
    arguments: List[str] = field(default_factory=list)
    envs: Dict[str, str] = field(default_factory=dict)
    cwd: Optional[str] = None
    connection: Optional[TcpArguments] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "command": self.command,
            "arguments": list(self.arguments),
            "envs": dict(self.envs),
            "cwd": self.cwd,
            "connection": self.connection.to_dict() if self.connection else None,
            "request_args": self.request_args.to_dict(),
        }


class DebugConfigResolver:
    """
    Resolves Playdate debug tasks.

    Example:
        >>> resolver = DebugConfigResolver()
        >>> task = DebugTaskDefinition("Run", "Playdate", '{"request": "launch"}')
        >>> binary = resolver.build_session_spec(task, worktree)
        >>> binary.arguments
        ['/proj/builds/Game.pdx']
    """

    def __init__(self, platform: Optional[PlatformInfo] = None):
        """
        Initialize debug configuration resolver.

        Args:
            platform: Platform information (auto-detected if None)
        """
        self.platform = platform

    def resolve_config(self, text: str, worktree: Worktree) -> PlaydateDebugConfig:
        """
        Parse a configuration and fill in the SDK path and worktree root.

        Raises:
            ConfigParseError: If the configuration is malformed
            SdkNotFoundError: If sdkPath is absent and cannot be detected
        """
        return self._complete(PlaydateDebugConfig.from_json(text), worktree)

    def _complete(
        self, config: PlaydateDebugConfig, worktree: Worktree
    ) -> PlaydateDebugConfig:
        if config.sdk_path is None:
            config.sdk_path = self._prober(worktree).detect_sdk_path()

        config.substitute_worktree_root(worktree.root_path())
        return config

    def build_session_spec(
        self, definition: DebugTaskDefinition, worktree: Worktree
    ) -> DebugAdapterBinary:
        """
        Build the debug adapter binary for a task.

        Args:
            definition: Debug task from the editor
            worktree: Worktree the task runs in

        Returns:
            Fully resolved DebugAdapterBinary

        Raises:
            ConfigParseError: If the configuration is malformed
            InvalidRequestError: If request is not 'launch' or 'attach'
            SdkNotFoundError: If the SDK cannot be detected
            MissingFieldError: If a launch has no gamePath
        """
        config = PlaydateDebugConfig.from_json(definition.config)
        # Validation errors take precedence over SDK detection
        request = classify_request(config)
        config = self._complete(config, worktree)
        connection = resolve_connection(definition.tcp_connection)

        command: Optional[str] = None
        arguments: List[str] = []

        if request is RequestKind.LAUNCH:
            if config.game_path is None:
                raise MissingFieldError(
                    "No game_path specified in launch configuration"
                )
            # The simulator always comes from the detected SDK, not sdkPath
            prober = self._prober(worktree)
            command = prober.simulator_path(prober.detect_sdk_path())
            arguments = [config.game_path]
            logger.info(f"Launching {command} {config.game_path}")
        else:
            logger.info(
                f"Attaching to {connection.host_address}:{connection.port}"
            )

        return DebugAdapterBinary(
            command=command,
            arguments=arguments,
            cwd=None,
            connection=connection,
            request_args=StartDebuggingRequestArguments(
                configuration=config.to_json(), request=request
            ),
        )

    def _prober(self, worktree: Worktree) -> EnvironmentProber:
        return EnvironmentProber(worktree, platform=self.platform)
