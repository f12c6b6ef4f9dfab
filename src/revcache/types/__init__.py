"""Shared data model for Revcache."""

from .cache import CacheContainer, FileStatus, FileStatusRecord, is_trivial_merge_parent

__all__ = [
    "CacheContainer",
    "FileStatus",
    "FileStatusRecord",
    "is_trivial_merge_parent",
]
