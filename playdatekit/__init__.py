"""
PlaydateKit - editor integration for the Playdate SDK.

Locates or installs lua-language-server and the Playdate type definitions,
composes language server settings for Playdate projects, and resolves debug
configurations for the Playdate Simulator.
"""

__version__ = "0.1.0"

from playdatekit.extension import Command, PlaydateExtension

__all__ = ["Command", "PlaydateExtension", "__version__"]
