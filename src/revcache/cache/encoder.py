"""Cache serialization and persistence."""

from __future__ import annotations

import logging
import struct
import zlib
from pathlib import Path

from revcache.cache.sentinels import persistable_items
from revcache.config import CacheConfig
from revcache.constants.cache import (
    CACHE_MAGIC,
    CACHE_VERSION,
    COMPRESSION_LEVEL,
    ID_BUFFER_SLACK,
    REVISION_ID_LENGTH,
)
from revcache.exceptions import CacheError, CacheErrorKind, CacheWriteError
from revcache.io import BinaryWriter, replace_file, write_staged
from revcache.types import CacheContainer, FileStatusRecord

logger = logging.getLogger(__name__)


def save(base_path: Path | str, container: CacheContainer, *, config: CacheConfig | None = None) -> bool:
    """Persist ``container`` under ``base_path``; return False if nothing was written."""
    try:
        write_cache(base_path, container, config=config)
    except CacheError as exc:
        logger.warning("Cache not saved: %s", exc)
        return False
    return True


def write_cache(base_path: Path | str, container: CacheContainer, *, config: CacheConfig | None = None) -> Path:
    """Persist ``container`` and return the final cache path.

    Raises:
        CacheWriteError: When the input is empty, the directory is missing,
            or the staged file cannot be written or moved into place.
    """
    config = config or CacheConfig()
    if not container.records:
        raise CacheWriteError(CacheErrorKind.EMPTY_INPUT, "no revisions to save")
    if base_path in ("", Path("")):
        raise CacheWriteError(CacheErrorKind.MISSING_DIRECTORY, "empty cache directory")
    base = Path(base_path)
    if not base.is_dir():
        raise CacheWriteError(CacheErrorKind.MISSING_DIRECTORY, f"directory not found: {base}")

    path = config.cache_path(base)
    temp_path = config.temp_path(base)

    logger.info("Saving cache. Please wait...")
    payload = encode_container(container, level=config.compression_level)
    write_staged(temp_path, payload)
    replace_file(temp_path, path)
    logger.info("Done.")
    return path


def encode_container(container: CacheContainer, *, level: int = COMPRESSION_LEVEL) -> bytes:
    """Serialize and compress ``container``; sentinel revisions are skipped."""
    items = persistable_items(container.records)
    for identifier, _ in items:
        if len(identifier) != REVISION_ID_LENGTH:
            raise CacheWriteError(
                CacheErrorKind.INVALID_REVISION,
                f"revision id must be {REVISION_ID_LENGTH} characters: {identifier!r}",
            )

    writer = BinaryWriter()
    try:
        _write_stream(writer, container, items)
    except (struct.error, UnicodeEncodeError) as exc:
        raise CacheWriteError(CacheErrorKind.INVALID_RECORD, f"value cannot be encoded: {exc}") from exc

    logger.debug(
        "Encoded %d revisions (%d skipped), %d dirs, %d files into %d bytes",
        len(items),
        len(container.records) - len(items),
        len(container.dirs),
        len(container.files),
        len(writer),
    )
    logger.info("Compressing data...")
    return zlib.compress(writer.getvalue(), level)


def _write_stream(writer: BinaryWriter, container: CacheContainer, items: list[tuple[str, FileStatusRecord]]) -> None:
    writer.write_u32(CACHE_MAGIC)
    writer.write_i32(CACHE_VERSION)

    writer.write_i32(len(container.dirs))
    for directory in container.dirs:
        writer.write_string(directory)

    writer.write_i32(len(container.files))
    for name in container.files:
        writer.write_string(name)

    # Identifiers go out as one contiguous block ahead of the records;
    # grouping the high-entropy ids compresses noticeably better.
    writer.write_i32(len(container.records) * REVISION_ID_LENGTH + ID_BUFFER_SLACK)
    writer.write_string("".join(identifier for identifier, _ in items))

    for _, record in items:
        _write_record(writer, record)


def _write_record(writer: BinaryWriter, record: FileStatusRecord) -> None:
    writer.write_int_array(record.names)
    writer.write_int_array(record.dirs)

    writer.write_bool(record.only_modified)
    if not record.only_modified:
        writer.write_int_array(record.status)

    writer.write_bool(not record.has_merge_parent)
    if record.has_merge_parent:
        writer.write_int_array(record.merge_parent)

    writer.write_bool(not record.has_ext_status)
    if record.has_ext_status:
        writer.write_string_array(record.ext_status)
