"""
Integration tests for the GitHub release index client.

These tests require network access.
"""

import pytest

from playdatekit.core.platform import Architecture, OperatingSystem, PlatformInfo
from playdatekit.core.releases import latest_github_release
from playdatekit.tools.language_server import LANGUAGE_SERVER_REPOSITORY, asset_name


@pytest.mark.integration
class TestLatestReleaseIntegration:
    def test_lua_language_server_has_linux_asset(self):
        release = latest_github_release(LANGUAGE_SERVER_REPOSITORY)
        expected = asset_name(
            release.version, PlatformInfo(OperatingSystem.LINUX, Architecture.X86_64)
        )

        assert not release.prerelease
        assert release.find_asset(expected) is not None
