"""
GitHub release index client.

Queries a repository's releases and returns the latest one that qualifies,
together with its downloadable assets.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import requests
from requests.exceptions import RequestException

from playdatekit.core.exceptions import ReleaseNotFoundError, ReleaseQueryError

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


@dataclass
class ReleaseAsset:
    """A downloadable artifact attached to a release."""

    name: str
    download_url: str


@dataclass
class GithubRelease:
    """A published release of a repository."""

    version: str
    prerelease: bool = False
    assets: List[ReleaseAsset] = field(default_factory=list)

    def find_asset(self, name: str) -> Optional[ReleaseAsset]:
        """Find an asset by exact name."""
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None

    @classmethod
    def from_api(cls, data: dict) -> "GithubRelease":
        """Build a release from a GitHub REST API release object."""
        return cls(
            version=data["tag_name"],
            prerelease=bool(data.get("prerelease", False)),
            assets=[
                ReleaseAsset(name=a["name"], download_url=a["browser_download_url"])
                for a in data.get("assets", [])
            ],
        )


def latest_github_release(
    repo: str,
    require_assets: bool = True,
    pre_release: bool = False,
    api_url: str = GITHUB_API_URL,
    session: Optional[requests.Session] = None,
) -> GithubRelease:
    """
    Get the latest qualifying release of a GitHub repository.

    Args:
        repo: Repository in 'owner/name' form
        require_assets: Skip releases without attached assets
        pre_release: Accept pre-releases
        api_url: Base URL of the GitHub REST API
        session: Optional requests session

    Returns:
        The newest release matching the criteria

    Raises:
        ReleaseQueryError: If the release index cannot be fetched or parsed
        ReleaseNotFoundError: If no release qualifies

    Example:
        >>> release = latest_github_release("LuaLS/lua-language-server")
        >>> print(release.version)
    """
    url = f"{api_url.rstrip('/')}/repos/{repo}/releases"
    http = session or requests
    logger.debug(f"Querying releases: {url}")

    try:
        response = http.get(
            url, headers={"Accept": "application/vnd.github+json"}
        )
        response.raise_for_status()
        data = response.json()
    except (RequestException, ValueError) as e:
        raise ReleaseQueryError(f"failed to query releases of {repo}: {e}") from e

    for item in data:
        if item.get("draft"):
            continue
        if item.get("prerelease") and not pre_release:
            continue
        if require_assets and not item.get("assets"):
            continue
        try:
            release = GithubRelease.from_api(item)
        except (KeyError, TypeError) as e:
            raise ReleaseQueryError(
                f"malformed release data for {repo}: missing {e}"
            ) from e
        logger.debug(f"Latest release of {repo}: {release.version}")
        return release

    raise ReleaseNotFoundError(f"no release found for {repo}")
