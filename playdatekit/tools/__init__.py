"""
External tool resolution.

Locates or downloads the language server and the Playdate type definitions.
"""

from playdatekit.tools.language_server import (
    LanguageServerResolver,
    LANGUAGE_SERVER_BINARY,
    LANGUAGE_SERVER_REPOSITORY,
    asset_name,
)
from playdatekit.tools.type_definitions import (
    TypeDefinitionsResolver,
    luacats_tag,
    luacats_directory,
)

__all__ = [
    "LanguageServerResolver",
    "LANGUAGE_SERVER_BINARY",
    "LANGUAGE_SERVER_REPOSITORY",
    "asset_name",
    "TypeDefinitionsResolver",
    "luacats_tag",
    "luacats_directory",
]
