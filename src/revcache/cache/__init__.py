"""Persistent per-revision file-status cache."""

from __future__ import annotations

from revcache.cache.decoder import decode_container, load, read_cache
from revcache.cache.encoder import encode_container, save, write_cache
from revcache.cache.sentinels import is_persistable, persistable_items

__all__ = [
    "decode_container",
    "encode_container",
    "is_persistable",
    "load",
    "persistable_items",
    "read_cache",
    "save",
    "write_cache",
]
