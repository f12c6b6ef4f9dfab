"""Revcache package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from revcache.cache import load, read_cache, save, write_cache
from revcache.types import CacheContainer, FileStatus, FileStatusRecord

__all__ = [
    "CacheContainer",
    "FileStatus",
    "FileStatusRecord",
    "__version__",
    "load",
    "read_cache",
    "save",
    "write_cache",
]

try:
    __version__ = version("revcache")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
