import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging with:
    - root logger = INFO, writing to stderr
    - application logs (core, tools, server) = level
    - noisy libraries reduced
    """

    app_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    # stdout carries the MCP stdio transport
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
    handler.setFormatter(formatter)

    # ------------------------------------------------------------------
    # Root logger: safe default
    # ------------------------------------------------------------------
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.INFO)
    root.addHandler(handler)

    # ------------------------------------------------------------------
    # Application logs
    # ------------------------------------------------------------------
    for name in ("core", "tools", "server"):
        logging.getLogger(name).setLevel(app_level)

    # ------------------------------------------------------------------
    # Framework / library logs
    # ------------------------------------------------------------------
    logging.getLogger("mcp").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
