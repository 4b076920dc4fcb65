from __future__ import annotations


class CacheError(Exception):
    """Base error for the cache server."""


class ValidationError(CacheError):
    """Raised when user input is invalid."""
