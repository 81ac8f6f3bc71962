"""Configuration loading for PlaydateKit."""

from playdatekit.config.settings import (
    ConfigError,
    ExtensionConfig,
    DEFAULT_CONFIG_FILE,
    load_config,
)

__all__ = [
    "ConfigError",
    "ExtensionConfig",
    "DEFAULT_CONFIG_FILE",
    "load_config",
]
