"""YAML configuration for PlaydateKit.

This module parses the optional playdatekit.yaml file:

    work_dir: ~/.cache/playdatekit
    language_server:
      repository: LuaLS/lua-language-server
    github:
      api_url: https://api.github.com
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from playdatekit.core.exceptions import PlaydateKitError
from playdatekit.core.releases import GITHUB_API_URL
from playdatekit.tools.language_server import LANGUAGE_SERVER_REPOSITORY

DEFAULT_CONFIG_FILE = "playdatekit.yaml"


class ConfigError(PlaydateKitError):
    """Configuration parsing or validation error."""

    pass


@dataclass
class ExtensionConfig:
    """PlaydateKit configuration."""

    work_dir: Optional[Path] = None  # None: current directory
    language_server_repository: str = LANGUAGE_SERVER_REPOSITORY
    github_api_url: str = GITHUB_API_URL

    def resolved_work_dir(self) -> Path:
        """Absolute directory downloads are extracted into."""
        if self.work_dir is None:
            return Path.cwd()
        return self.work_dir.expanduser().absolute()


def load_config(config_path: Path, required: bool = False) -> ExtensionConfig:
    """
    Parse a playdatekit.yaml configuration file.

    Args:
        config_path: Path to the YAML file
        required: Raise if the file does not exist

    Returns:
        Parsed configuration (defaults if the file is absent and not required)

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        if required:
            raise ConfigError(f"Configuration file not found: {config_path}")
        return ExtensionConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        return ExtensionConfig()

    return _parse_and_validate(data)


def _parse_and_validate(data: dict) -> ExtensionConfig:
    """Parse and validate configuration data."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    unknown = set(data) - {"work_dir", "language_server", "github"}
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    config = ExtensionConfig()

    if data.get("work_dir") is not None:
        config.work_dir = Path(_require_str(data["work_dir"], "work_dir"))

    language_server = _section(data, "language_server", {"repository"})
    if "repository" in language_server:
        repository = _require_str(
            language_server["repository"], "language_server.repository"
        )
        if repository.count("/") != 1:
            raise ConfigError(
                f"language_server.repository must be 'owner/name', got '{repository}'"
            )
        config.language_server_repository = repository

    github = _section(data, "github", {"api_url"})
    if "api_url" in github:
        config.github_api_url = _require_str(github["api_url"], "github.api_url")

    return config


def _section(data: dict, name: str, allowed: set) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    unknown = set(section) - allowed
    if unknown:
        raise ConfigError(
            f"Unknown keys in '{name}': {', '.join(sorted(unknown))}"
        )
    return section


def _require_str(value, field_name: str) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{field_name}' must be a non-empty string")
    return value
