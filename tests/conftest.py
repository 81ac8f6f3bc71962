"""
Pytest configuration and shared fixtures for PlaydateKit tests.
"""

import tempfile
from pathlib import Path
from typing import Dict, Generator, List, Optional, Tuple

import pytest

from playdatekit.core.interfaces import Worktree
from playdatekit.core.platform import Architecture, OperatingSystem, PlatformInfo


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


class FakeWorktree(Worktree):
    """In-memory worktree with a fixed environment and search path."""

    def __init__(
        self,
        root: str = "/proj",
        env: Optional[List[Tuple[str, str]]] = None,
        binaries: Optional[Dict[str, str]] = None,
    ):
        self.root = root
        self.env = list(env or [])
        self.binaries = dict(binaries or {})
        self.which_calls: List[str] = []

    def root_path(self) -> str:
        return self.root

    def shell_env(self) -> List[Tuple[str, str]]:
        return list(self.env)

    def which(self, binary_name: str) -> Optional[str]:
        self.which_calls.append(binary_name)
        return self.binaries.get(binary_name)


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_worktree():
    """Factory for FakeWorktree instances."""
    return FakeWorktree


@pytest.fixture
def worktree() -> FakeWorktree:
    """Worktree rooted at /proj with only HOME set."""
    return FakeWorktree(root="/proj", env=[("HOME", "/home/u")])


@pytest.fixture
def linux_x64() -> PlatformInfo:
    return PlatformInfo(OperatingSystem.LINUX, Architecture.X86_64)


@pytest.fixture
def mac_arm64() -> PlatformInfo:
    return PlatformInfo(OperatingSystem.MAC, Architecture.AARCH64)


@pytest.fixture
def windows_x64() -> PlatformInfo:
    return PlatformInfo(OperatingSystem.WINDOWS, Architecture.X86_64)


@pytest.fixture
def no_network(monkeypatch):
    """Disable network access for tests."""
    import socket

    def guard(*args, **kwargs):
        raise RuntimeError("Network access not allowed in this test")

    monkeypatch.setattr(socket, "socket", guard)
