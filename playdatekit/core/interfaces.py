"""
Host interfaces for PlaydateKit.

The editor's extension runtime is an external collaborator. This module defines
the small surface the core depends on: a worktree (root path, shell environment,
executable lookup) and an installation-status callback.
"""

import enum
import os
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Tuple


class Worktree(ABC):
    """
    Abstract view of an editor worktree.

    Implemented by the host; tests use an in-memory fake.
    """

    @abstractmethod
    def root_path(self) -> str:
        """Absolute path of the worktree root."""
        pass

    @abstractmethod
    def shell_env(self) -> List[Tuple[str, str]]:
        """
        Environment variables of the user's shell for this worktree.

        Returns:
            Ordered list of (name, value) pairs; names may repeat
        """
        pass

    @abstractmethod
    def which(self, binary_name: str) -> Optional[str]:
        """
        Look up an executable on the worktree's search path.

        Returns:
            Path of the first match, or None
        """
        pass


class LocalWorktree(Worktree):
    """
    Worktree backed by the local filesystem and process environment.

    Used by the command-line interface.
    """

    def __init__(self, root: Path, env: Optional[Mapping[str, str]] = None):
        """
        Initialize local worktree.

        Args:
            root: Worktree root directory
            env: Environment mapping (defaults to os.environ)
        """
        self.root = Path(root).resolve()
        self.env = dict(os.environ if env is None else env)

    def root_path(self) -> str:
        return str(self.root)

    def shell_env(self) -> List[Tuple[str, str]]:
        return list(self.env.items())

    def which(self, binary_name: str) -> Optional[str]:
        return shutil.which(binary_name, path=self.env.get("PATH"))


class InstallationStatus(enum.Enum):
    """Installation states reported to the host for a language server."""

    NONE = "none"
    CHECKING_FOR_UPDATE = "checking_for_update"
    DOWNLOADING = "downloading"


StatusCallback = Callable[[str, InstallationStatus], None]
"""Callback(server_id, status) used to report installation progress."""


def ignore_status(server_id: str, status: InstallationStatus) -> None:
    """Default status callback that drops updates."""
    pass
