"""lua-language-server settings for Playdate projects.

Settings are built as a typed tree and converted to the `{"Lua": {...}}`
payload the language server expects. Two variants exist:

- initialization options, sent before anything about the workspace is known;
- workspace configuration, which adds the SDK's CoreLibs and the luacats type
  definitions to the library path.

Both are rebuilt on every request because the SDK may be installed between
calls.

Example:
    >>> settings = workspace_configuration("/sdk", "/cache/typedefs")
    >>> settings.to_dict()["Lua"]["workspace"]["library"]
    ['/sdk/CoreLibs', '/cache/typedefs']
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

LUA_RUNTIME_VERSION = "Lua 5.4"

# Compound assignment operators added by the Playdate Lua dialect
PLAYDATE_OPERATORS = [
    "+=",
    "-=",
    "*=",
    "/=",
    "//=",
    "%=",
    "<<=",
    ">>=",
    "&=",
    "|=",
    "^=",
]

PLAYDATE_GLOBALS = ["playdate", "import"]


class Severity(enum.Enum):
    """Diagnostic severities accepted by lua-language-server."""

    ERROR = "Error"
    WARNING = "Warning"
    INFORMATION = "Information"
    HINT = "Hint"


class BuiltinState(enum.Enum):
    """Whether a standard library module is available."""

    DEFAULT = "default"
    ENABLE = "enable"
    DISABLE = "disable"


class CallSnippet(enum.Enum):
    """Completion behaviour for function calls."""

    DISABLE = "Disable"
    BOTH = "Both"
    REPLACE = "Replace"


def _playdate_builtins() -> Dict[str, BuiltinState]:
    # Not available on the device
    return {
        "io": BuiltinState.DISABLE,
        "os": BuiltinState.DISABLE,
        "package": BuiltinState.DISABLE,
    }


@dataclass
class RuntimeSettings:
    version: str = LUA_RUNTIME_VERSION
    special: Dict[str, str] = field(default_factory=lambda: {"import": "require"})
    builtin: Dict[str, BuiltinState] = field(default_factory=_playdate_builtins)
    nonstandard_symbol: List[str] = field(
        default_factory=lambda: list(PLAYDATE_OPERATORS)
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "special": dict(self.special),
            "builtin": {name: state.value for name, state in self.builtin.items()},
            "nonstandardSymbol": list(self.nonstandard_symbol),
        }


@dataclass
class DiagnosticsSettings:
    globals: List[str] = field(default_factory=lambda: list(PLAYDATE_GLOBALS))
    disable: List[str] = field(default_factory=list)
    severity: Dict[str, Severity] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"globals": list(self.globals)}
        if self.disable:
            result["disable"] = list(self.disable)
        result["severity"] = {
            name: severity.value for name, severity in self.severity.items()
        }
        return result


@dataclass
class WorkspaceSettings:
    library: List[str] = field(default_factory=list)
    check_third_party: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "library": list(self.library),
            "checkThirdParty": self.check_third_party,
        }


@dataclass
class CompletionSettings:
    call_snippet: CallSnippet = CallSnippet.REPLACE

    def to_dict(self) -> Dict[str, Any]:
        return {"callSnippet": self.call_snippet.value}


@dataclass
class LuaSettings:
    """Complete lua-language-server settings tree."""

    runtime: RuntimeSettings = field(default_factory=RuntimeSettings)
    diagnostics: DiagnosticsSettings = field(default_factory=DiagnosticsSettings)
    workspace: WorkspaceSettings = field(default_factory=WorkspaceSettings)
    completion: CompletionSettings = field(default_factory=CompletionSettings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Lua": {
                "runtime": self.runtime.to_dict(),
                "diagnostics": self.diagnostics.to_dict(),
                "workspace": self.workspace.to_dict(),
                "completion": self.completion.to_dict(),
            }
        }


def initialization_options() -> LuaSettings:
    """Static settings used before the workspace has been probed."""
    return LuaSettings(
        diagnostics=DiagnosticsSettings(
            severity={
                "duplicate-set-field": Severity.HINT,
                "unknown-symbol": Severity.WARNING,
            }
        ),
    )


def library_paths(sdk_path: Optional[str], type_definitions_path: str) -> List[str]:
    """SDK CoreLibs (when an SDK was detected) followed by the type definitions."""
    paths = []
    if sdk_path is not None:
        paths.append(f"{sdk_path}/CoreLibs")
    paths.append(type_definitions_path)
    return paths


def workspace_configuration(
    sdk_path: Optional[str], type_definitions_path: str
) -> LuaSettings:
    """
    Live settings for a workspace.

    Args:
        sdk_path: Detected SDK root, or None if detection failed
        type_definitions_path: luacats library directory
    """
    return LuaSettings(
        diagnostics=DiagnosticsSettings(
            disable=["duplicate-set-field"],
            severity={"unknown-symbol": Severity.HINT},
        ),
        workspace=WorkspaceSettings(
            library=library_paths(sdk_path, type_definitions_path)
        ),
    )
