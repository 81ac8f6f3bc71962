"""
Implementation of 'debug' and 'request-kind' commands.
"""

import ipaddress
import json
import logging

from playdatekit.cli.utils import (
    make_extension,
    make_worktree,
    print_json,
    read_config_argument,
)
from playdatekit.core.exceptions import ConfigParseError
from playdatekit.debug.resolver import DebugTaskDefinition, TcpConnection
from playdatekit.extension import PlaydateExtension

logger = logging.getLogger(__name__)


def _parse_host(value):
    if value is None:
        return None
    try:
        return int(ipaddress.IPv4Address(value))
    except ValueError as e:
        raise ConfigParseError(f"invalid host address {value!r}: {e}") from e


def run(args) -> int:
    """
    Resolve a debug configuration and print the debug adapter binary.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    connection = None
    if args.host is not None or args.port is not None or args.timeout is not None:
        connection = TcpConnection(
            host=_parse_host(args.host), port=args.port, timeout=args.timeout
        )

    definition = DebugTaskDefinition(
        label="pdkit",
        adapter=PlaydateExtension.ADAPTER_NAME,
        config=read_config_argument(args.debug_config),
        tcp_connection=connection,
    )

    extension = make_extension(args)
    binary = extension.get_dap_binary(
        PlaydateExtension.ADAPTER_NAME, definition, None, make_worktree(args)
    )

    print_json(binary.to_dict())
    return 0


def run_request_kind(args) -> int:
    """Print 'launch' or 'attach' for a debug configuration."""
    text = read_config_argument(args.debug_config)
    try:
        config = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"invalid debug configuration: {e}") from e

    extension = make_extension(args)
    kind = extension.dap_request_kind(PlaydateExtension.ADAPTER_NAME, config)

    print(kind.value)
    return 0
