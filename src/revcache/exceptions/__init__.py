"""Shared exception hierarchy for Revcache."""

from __future__ import annotations

from .base import RevcacheError
from .cache import CacheError, CacheErrorKind, CacheReadError, CacheWriteError
from .config import ConfigError

__all__ = [
    "CacheError",
    "CacheErrorKind",
    "CacheReadError",
    "CacheWriteError",
    "ConfigError",
    "RevcacheError",
]
