"""MCP tools that mutate the shared expiring cache.

Registers 'cache_set', 'cache_delete' and 'cache_clear'. Inputs are
validated here before delegating to the ExpiringCache instance.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from core.cache import ExpiringCache
from core.errors import ValidationError


def register(mcp: FastMCP, *, cache: ExpiringCache[str]) -> None:
    @mcp.tool(name="cache_set")
    async def cache_set(
        key: str = "",
        value: str = "",
        ttl_seconds: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Store a value under a key with a time-to-live.

        Replaces any existing entry for the key (and its pending eviction).
        Parameters:
          - key: cache key (required, non-blank).
          - value: string payload to store.
          - ttl_seconds: lifetime in seconds; defaults to the server's default TTL.

        Returns:
          {"key": ..., "ttl_seconds": ...} with the TTL actually applied.

        Raises:
          ValidationError for a blank key or a negative TTL.
        """
        if not key or not key.strip():
            raise ValidationError("Missing cache key")

        if ttl_seconds is not None and ttl_seconds < 0:
            raise ValidationError("ttl_seconds must be non-negative")

        cache.set(key, value, ttl_seconds)
        applied = cache.default_ttl if ttl_seconds is None else float(ttl_seconds)
        return {"key": key, "ttl_seconds": applied}

    @mcp.tool(name="cache_delete")
    async def cache_delete(key: str = "") -> bool:
        """Delete a key and cancel its scheduled eviction.

        Returns:
          True if an entry was removed, False if the key was not stored.
        """
        if not key or not key.strip():
            raise ValidationError("Missing cache key")

        return cache.delete(key)

    @mcp.tool(name="cache_clear")
    async def cache_clear() -> int:
        """Remove every entry and cancel all pending evictions.

        Returns:
          The number of live entries that were cleared.
        """
        removed = cache.size()
        cache.clear()
        return removed
