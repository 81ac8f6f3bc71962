"""
Shared utilities for CLI commands.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

from playdatekit.config.settings import DEFAULT_CONFIG_FILE, load_config
from playdatekit.core.interfaces import InstallationStatus, LocalWorktree
from playdatekit.extension import PlaydateExtension

logger = logging.getLogger(__name__)


def log_status(server_id: str, status: InstallationStatus) -> None:
    """Status callback that reports installation progress on the log."""
    if status is InstallationStatus.CHECKING_FOR_UPDATE:
        logger.info(f"{server_id}: checking for updates...")
    elif status is InstallationStatus.DOWNLOADING:
        logger.info(f"{server_id}: downloading...")


def make_worktree(args) -> LocalWorktree:
    """Worktree for the --project-root directory and the process environment."""
    return LocalWorktree(Path(args.project_root))


def make_extension(args) -> PlaydateExtension:
    """
    Create the extension from the configuration file.

    An explicit --config must exist; the default playdatekit.yaml is optional.
    """
    if args.config:
        config = load_config(Path(args.config), required=True)
    else:
        config = load_config(Path(args.project_root) / DEFAULT_CONFIG_FILE)

    return PlaydateExtension(
        work_dir=config.resolved_work_dir(),
        status_callback=log_status,
        language_server_repository=config.language_server_repository,
        github_api_url=config.github_api_url,
    )


def read_config_argument(value: str) -> str:
    """
    Read a debug configuration argument.

    Args:
        value: '-' for stdin, a path to a JSON file, or inline JSON

    Returns:
        JSON text
    """
    if value == "-":
        return sys.stdin.read()

    path = Path(value)
    if not value.lstrip().startswith("{") and path.is_file():
        return path.read_text(encoding="utf-8")

    return value


def print_json(data: Any) -> None:
    """Write data to stdout as indented JSON."""
    print(json.dumps(data, indent=2))
