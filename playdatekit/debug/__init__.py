"""
Debug adapter configuration for the Playdate Simulator.
"""

from playdatekit.debug.config import (
    PlaydateDebugConfig,
    RequestKind,
    WORKTREE_ROOT_PLACEHOLDER,
    classify_request,
    substitute_placeholder,
)
from playdatekit.debug.resolver import (
    DebugAdapterBinary,
    DebugConfigResolver,
    DebugTaskDefinition,
    StartDebuggingRequestArguments,
    TcpArguments,
    TcpConnection,
    resolve_connection,
)

__all__ = [
    "PlaydateDebugConfig",
    "RequestKind",
    "WORKTREE_ROOT_PLACEHOLDER",
    "classify_request",
    "substitute_placeholder",
    "DebugAdapterBinary",
    "DebugConfigResolver",
    "DebugTaskDefinition",
    "StartDebuggingRequestArguments",
    "TcpArguments",
    "TcpConnection",
    "resolve_connection",
]
