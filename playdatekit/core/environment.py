"""
Environment probing for PlaydateKit.

Discovers installed tools and the Playdate SDK location from the worktree's
shell environment and executable search path.
"""

import logging
from typing import Optional

from playdatekit.core.exceptions import SdkNotFoundError
from playdatekit.core.interfaces import Worktree
from playdatekit.core.platform import OperatingSystem, PlatformInfo, detect_platform

logger = logging.getLogger(__name__)

SDK_PATH_ENV_VAR = "PLAYDATE_SDK_PATH"

# Conventional SDK install locations, relative to the home directory
_SDK_LOCATIONS = {
    OperatingSystem.MAC: "{home}/Developer/PlaydateSDK",
    OperatingSystem.LINUX: "{home}/.local/share/playdate-sdk",
    OperatingSystem.WINDOWS: "{home}\\Documents\\PlaydateSDK",
}

# Simulator executable, relative to the SDK root
_SIMULATOR_LOCATIONS = {
    OperatingSystem.MAC: "{sdk}/bin/Playdate Simulator.app/Contents/MacOS/Playdate Simulator",
    OperatingSystem.LINUX: "{sdk}/bin/PlaydateSimulator",
    OperatingSystem.WINDOWS: "{sdk}\\bin\\PlaydateSimulator.exe",
}


class EnvironmentProber:
    """
    Reads environment variables and the search path of a worktree.

    Example:
        >>> prober = EnvironmentProber(worktree)
        >>> prober.detect_sdk_path()
        '/home/user/.local/share/playdate-sdk'
    """

    def __init__(self, worktree: Worktree, platform: Optional[PlatformInfo] = None):
        """
        Initialize environment prober.

        Args:
            worktree: Worktree supplying environment and executable lookup
            platform: Platform information (auto-detected if None)
        """
        self.worktree = worktree
        self.platform = platform or detect_platform()

    def lookup_env_var(self, name: str) -> Optional[str]:
        """
        Find an environment variable in the worktree's shell environment.

        The first occurrence wins when a name appears more than once.
        """
        for key, value in self.worktree.shell_env():
            if key == name:
                return value
        return None

    def which(self, executable_name: str) -> Optional[str]:
        """Look up an executable on the worktree's search path."""
        path = self.worktree.which(executable_name)
        logger.debug(f"which({executable_name}) -> {path}")
        return path

    def home_dir(self) -> Optional[str]:
        """
        Get the user's home directory.

        Uses HOME on Mac/Linux and USERPROFILE on Windows, with the other
        variable as fallback.
        """
        if self.platform.os is OperatingSystem.WINDOWS:
            names = ("USERPROFILE", "HOME")
        else:
            names = ("HOME", "USERPROFILE")

        for name in names:
            value = self.lookup_env_var(name)
            if value:
                return value
        return None

    def detect_sdk_path(self) -> str:
        """
        Detect the Playdate SDK path.

        1. A non-empty PLAYDATE_SDK_PATH wins.
        2. Otherwise the platform's conventional install location under the
           home directory is returned. It is not checked for existence.

        Returns:
            SDK root path

        Raises:
            SdkNotFoundError: If there is no override and no home directory
        """
        override = self.lookup_env_var(SDK_PATH_ENV_VAR)
        if override:
            logger.debug(f"Using SDK path from {SDK_PATH_ENV_VAR}: {override}")
            return override

        home = self.home_dir()
        if home is None:
            raise SdkNotFoundError(
                f"Playdate SDK not found: {SDK_PATH_ENV_VAR} is not set and "
                "no home directory (HOME/USERPROFILE) is available"
            )

        sdk_path = _SDK_LOCATIONS[self.platform.os].format(home=home)
        logger.debug(f"Using conventional SDK path: {sdk_path}")
        return sdk_path

    def simulator_path(self, sdk_path: str) -> str:
        """Path of the Playdate Simulator executable inside an SDK."""
        return _SIMULATOR_LOCATIONS[self.platform.os].format(sdk=sdk_path)
