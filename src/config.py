"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (default
TTL, scheduler kind and log level).
"""

from __future__ import annotations

import os


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Cache
CACHE_DEFAULT_TTL = _env_float("CACHE_DEFAULT_TTL", 60.0)
CACHE_SCHEDULER = _env_str("CACHE_SCHEDULER", "thread").lower()

# Logging
LOG_LEVEL = _env_str("LOG_LEVEL", "INFO")
