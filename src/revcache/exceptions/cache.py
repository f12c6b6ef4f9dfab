"""Exceptions raised while saving or loading the cache file."""

from __future__ import annotations

from enum import Enum

from revcache.exceptions.base import RevcacheError


class CacheErrorKind(str, Enum):
    """Reason a save or load did not complete."""

    MISSING_DIRECTORY = "missing_directory"
    OPEN_FAILURE = "open_failure"
    REMOVE_FAILURE = "remove_failure"
    RENAME_FAILURE = "rename_failure"
    FORMAT_MISMATCH = "format_mismatch"
    EMPTY_INPUT = "empty_input"
    INVALID_REVISION = "invalid_revision"
    INVALID_RECORD = "invalid_record"
    CORRUPT_DATA = "corrupt_data"


class CacheError(RevcacheError):
    """Base class for cache persistence failures."""

    def __init__(self, kind: CacheErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def __str__(self) -> str:
        return f"[{self.kind.value}] {super().__str__()}"


class CacheWriteError(CacheError):
    """Raised when the cache cannot be written."""


class CacheReadError(CacheError):
    """Raised when an existing cache file cannot be read back."""
