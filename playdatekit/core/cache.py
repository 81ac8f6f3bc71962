"""
Process-lifetime cache of resolved tool paths.

Entries are keyed by logical tool name, written once and never evicted. The
cache is not persisted; a restarted process resolves again.
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class ToolPathCache:
    """
    Memoizes resolved paths for the lifetime of an extension instance.

    Example:
        >>> cache = ToolPathCache()
        >>> cache.put("lua-language-server", "/work/lls/bin/lua-language-server")
        >>> cache.get("lua-language-server")
        '/work/lls/bin/lua-language-server'
    """

    def __init__(self):
        self._paths: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        path = self._paths.get(key)
        if path is not None:
            logger.debug(f"Cache hit for {key}: {path}")
        return path

    def put(self, key: str, path: str) -> str:
        """
        Record the resolved path for key.

        The first recorded path for a key is kept; it is returned so callers
        always hand out the cached value.
        """
        return self._paths.setdefault(key, path)

    def __contains__(self, key: str) -> bool:
        return key in self._paths

    def __len__(self) -> int:
        return len(self._paths)
