"""Debug configuration model for the Playdate adapter.

Parses the partial configuration written by the user (or the editor), applies
defaults and worktree-root substitution, and serialises the resolved result
for the debug session.
"""

import enum
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from playdatekit.core.exceptions import ConfigParseError, InvalidRequestError

WORKTREE_ROOT_PLACEHOLDER = "$ZED_WORKTREE_ROOT"
DEFAULT_GAME_PATH = f"{WORKTREE_ROOT_PLACEHOLDER}/builds/Game.pdx"
DEFAULT_SOURCE_PATH = f"{WORKTREE_ROOT_PLACEHOLDER}/source"


class RequestKind(enum.Enum):
    """How the debug session reaches the simulator."""

    LAUNCH = "launch"
    ATTACH = "attach"


@dataclass
class PlaydateDebugConfig:
    """Playdate debug configuration.

    Attributes:
        request: 'launch' or 'attach' (validated by classify_request)
        game_path: Path of the .pdx bundle to run
        source_path: Path of the Lua sources
        sdk_path: Playdate SDK root
    """

    request: str
    game_path: Optional[str] = DEFAULT_GAME_PATH
    source_path: Optional[str] = DEFAULT_SOURCE_PATH
    sdk_path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "PlaydateDebugConfig":
        """Parse a configuration object.

        A missing `gamePath`/`sourcePath` key takes the default; an explicit
        null leaves the field unset.

        Raises:
            ConfigParseError: If data is not an object or a field has the wrong type
        """
        if not isinstance(data, dict):
            raise ConfigParseError(
                "Failed to parse debug configuration: expected an object, "
                f"got {type(data).__name__}"
            )

        if "request" not in data:
            raise ConfigParseError(
                "Failed to parse debug configuration: missing field `request`"
            )

        request = data["request"]
        if not isinstance(request, str):
            raise ConfigParseError(
                "Failed to parse debug configuration: `request` must be a string"
            )

        return cls(
            request=request,
            game_path=_optional_str(data, "gamePath", DEFAULT_GAME_PATH),
            source_path=_optional_str(data, "sourcePath", DEFAULT_SOURCE_PATH),
            sdk_path=_optional_str(data, "sdkPath", None),
        )

    @classmethod
    def from_json(cls, text: str) -> "PlaydateDebugConfig":
        """Parse a JSON configuration string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigParseError(
                f"Failed to parse debug configuration: {e}"
            ) from e
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, str]:
        """Convert to the JSON shape, omitting unset fields."""
        result = {"request": self.request}
        if self.game_path is not None:
            result["gamePath"] = self.game_path
        if self.source_path is not None:
            result["sourcePath"] = self.source_path
        if self.sdk_path is not None:
            result["sdkPath"] = self.sdk_path
        return result

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def substitute_worktree_root(self, root_path: str) -> None:
        """Replace the worktree-root placeholder in source and game paths."""
        if self.source_path is not None:
            self.source_path = substitute_placeholder(self.source_path, root_path)
        if self.game_path is not None:
            self.game_path = substitute_placeholder(self.game_path, root_path)


def _optional_str(data: dict, key: str, default: Optional[str]) -> Optional[str]:
    if key not in data:
        return default
    value = data[key]
    if value is not None and not isinstance(value, str):
        raise ConfigParseError(
            f"Failed to parse debug configuration: `{key}` must be a string"
        )
    return value


def substitute_placeholder(path: str, root_path: str) -> str:
    """Replace every occurrence of the worktree-root placeholder in path.

    Plain substring replacement; no escaping.
    """
    return path.replace(WORKTREE_ROOT_PLACEHOLDER, root_path)


def classify_request(config: PlaydateDebugConfig) -> RequestKind:
    """Determine launch vs. attach.

    Only the exact strings 'launch' and 'attach' are accepted.

    Raises:
        InvalidRequestError: For any other value
    """
    if config.request == "launch":
        return RequestKind.LAUNCH
    if config.request == "attach":
        return RequestKind.ATTACH
    raise InvalidRequestError(config.request)
