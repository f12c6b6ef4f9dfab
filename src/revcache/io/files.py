"""File-level helpers for staging and replacing the cache file."""

from __future__ import annotations

import logging
from contextlib import suppress
from pathlib import Path

from revcache.exceptions import CacheErrorKind, CacheWriteError

logger = logging.getLogger(__name__)


def temp_path_for(path: Path, suffix: str) -> Path:
    """Return the staging path that sits next to ``path``."""
    return path.with_name(path.name + suffix)


def remove_quietly(path: Path) -> None:
    """Remove ``path`` if present, logging instead of raising on failure."""
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Unable to remove %s: %s", path, exc)


def write_staged(temp_path: Path, payload: bytes) -> None:
    """Write ``payload`` to ``temp_path``, removing it again on any failure."""
    try:
        with temp_path.open("wb") as handle:
            handle.write(payload)
    except OSError as exc:
        with suppress(OSError):
            temp_path.unlink()
        raise CacheWriteError(CacheErrorKind.OPEN_FAILURE, f"cannot write {temp_path}: {exc}") from exc


def replace_file(temp_path: Path, path: Path) -> None:
    """Move ``temp_path`` onto ``path``.

    An existing file at ``path`` is removed first. Not crash safe: a failure
    between the remove and the rename leaves no file at ``path``. The staged
    file is removed whenever the replace fails.
    """
    if path.exists():
        try:
            path.unlink()
        except OSError as exc:
            logger.warning("Access denied to %s: %s", path, exc)
            remove_quietly(temp_path)
            raise CacheWriteError(CacheErrorKind.REMOVE_FAILURE, f"cannot remove {path}: {exc}") from exc

    try:
        temp_path.rename(path)
    except OSError as exc:
        remove_quietly(temp_path)
        raise CacheWriteError(CacheErrorKind.RENAME_FAILURE, f"cannot rename {temp_path} to {path}: {exc}") from exc
