"""Configuration-related exceptions."""

from __future__ import annotations

from revcache.exceptions.base import RevcacheError


class ConfigError(RevcacheError, ValueError):
    """Raised when cache configuration is invalid."""
