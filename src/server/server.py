"""Server bootstrap for the TTL cache MCP service.

Creates the FastMCP instance, builds the shared ExpiringCache from config,
wires the cache tools and starts the MCP server (stdio transport).
"""

from mcp.server.fastmcp import FastMCP

from config import CACHE_DEFAULT_TTL, CACHE_SCHEDULER, LOG_LEVEL
from core.cache import ExpiringCache
from core.logging import setup_logging
from core.scheduler import get_scheduler

from tools.read_cache import register as register_read_cache
from tools.write_cache import register as register_write_cache

mcp = FastMCP("ttl-cache-mcp")


def build_cache() -> ExpiringCache:
    return ExpiringCache(default_ttl=CACHE_DEFAULT_TTL, scheduler=get_scheduler(CACHE_SCHEDULER))


def register_tools() -> None:
    cache = build_cache()

    register_read_cache(mcp, cache=cache)
    register_write_cache(mcp, cache=cache)


register_tools()


def main() -> None:
    setup_logging(LOG_LEVEL)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
