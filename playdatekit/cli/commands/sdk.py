"""
Implementation of 'sdk-path' command.
"""

import logging

from playdatekit.cli.utils import make_worktree
from playdatekit.core.environment import EnvironmentProber

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Print the Playdate SDK path.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    prober = EnvironmentProber(make_worktree(args))
    sdk_path = prober.detect_sdk_path()
    logger.debug(f"Simulator: {prober.simulator_path(sdk_path)}")

    print(sdk_path)
    return 0
