"""
Implementation of 'lsp-command' and 'lsp-config' commands.
"""

import logging

from playdatekit.cli.utils import make_extension, make_worktree, print_json
from playdatekit.extension import PlaydateExtension

logger = logging.getLogger(__name__)


def run_command(args) -> int:
    """Resolve lua-language-server and print its path."""
    extension = make_extension(args)
    command = extension.language_server_command(
        PlaydateExtension.LSP_SERVER_ID, make_worktree(args)
    )

    print(command.command)
    return 0


def run_config(args) -> int:
    """Print initialization options or workspace settings as JSON."""
    extension = make_extension(args)
    worktree = make_worktree(args)

    if args.initialization:
        payload = extension.language_server_initialization_options(
            PlaydateExtension.LSP_SERVER_ID, worktree
        )
    else:
        payload = extension.language_server_workspace_configuration(
            PlaydateExtension.LSP_SERVER_ID, worktree
        )

    print_json(payload)
    return 0
