"""MCP tools that read from the shared expiring cache.

Registers 'cache_get', 'cache_get_lru', 'cache_remaining_ttl',
'cache_size' and 'cache_keys'. Misses are reported as null / -1,
never as errors.
"""

from __future__ import annotations

from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from core.cache import ExpiringCache


def register(mcp: FastMCP, *, cache: ExpiringCache[str]) -> None:
    @mcp.tool(name="cache_get")
    async def cache_get(key: str = "") -> Optional[str]:
        """Return the value stored under key, or null if missing or expired.

        Does not extend the entry's lifetime.
        """
        return cache.get(key)

    @mcp.tool(name="cache_get_lru")
    async def cache_get_lru(key: str = "") -> Optional[str]:
        """Return the value stored under key and restart its lifetime.

        A successful read re-stores the entry with the server's default TTL,
        regardless of the TTL it was originally stored with. Returns null if
        the key is missing or expired.
        """
        return cache.get_lru(key)

    @mcp.tool(name="cache_remaining_ttl")
    async def cache_remaining_ttl(key: str = "") -> float:
        """Return the seconds left before key expires.

        Returns -1 if the key is not stored, and 0 if it is stored but its
        time is already up (the entry is not evicted by this call).
        """
        return cache.get_remaining_ttl(key)

    @mcp.tool(name="cache_size")
    async def cache_size() -> int:
        """Return the number of live (non-expired) entries."""
        return cache.size()

    @mcp.tool(name="cache_keys")
    async def cache_keys() -> List[str]:
        """Return the live (non-expired) keys, sorted."""
        return sorted(cache.keys())
