"""Configuration loading and validation for the revision cache."""

from __future__ import annotations

from revcache.config.loader import load_config
from revcache.config.model import CacheConfig

__all__ = ["CacheConfig", "load_config"]
