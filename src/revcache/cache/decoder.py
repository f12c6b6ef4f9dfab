"""Cache loading and validation."""

from __future__ import annotations

import logging
import zlib
from pathlib import Path

from revcache.config import CacheConfig
from revcache.constants.cache import CACHE_MAGIC, CACHE_VERSION, REVISION_ID_LENGTH
from revcache.exceptions import CacheError, CacheErrorKind, CacheReadError
from revcache.io import BinaryReader
from revcache.types import CacheContainer, FileStatusRecord

logger = logging.getLogger(__name__)


def load(base_path: Path | str, *, config: CacheConfig | None = None) -> tuple[CacheContainer, bool]:
    """Load the cache under ``base_path``.

    A missing cache file is the normal cold-start state and counts as
    success. Any other problem yields an empty container and False.
    """
    try:
        return read_cache(base_path, config=config), True
    except CacheError as exc:
        logger.warning("Discarding cache: %s", exc)
        return CacheContainer(), False


def read_cache(base_path: Path | str, *, config: CacheConfig | None = None) -> CacheContainer:
    """Load the cache under ``base_path``, raising ``CacheReadError`` on failure."""
    config = config or CacheConfig()
    if base_path in ("", Path("")):
        raise CacheReadError(CacheErrorKind.MISSING_DIRECTORY, "empty cache directory")
    path = config.cache_path(Path(base_path))
    if not path.exists():
        logger.debug("No cache file at %s", path)
        return CacheContainer()

    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise CacheReadError(CacheErrorKind.OPEN_FAILURE, f"cannot read {path}: {exc}") from exc

    container = decode_container(payload)
    logger.debug("Loaded %d revisions from %s", len(container.records), path)
    return container


def decode_container(payload: bytes) -> CacheContainer:
    """Decompress and parse a cache payload produced by ``encode_container``."""
    try:
        data = zlib.decompress(payload)
    except zlib.error as exc:
        raise CacheReadError(CacheErrorKind.FORMAT_MISMATCH, f"not a compressed cache file: {exc}") from exc

    reader = BinaryReader(data)
    _read_header(reader)

    dirs = [reader.read_string() for _ in range(_read_pool_size(reader))]
    files = [reader.read_string() for _ in range(_read_pool_size(reader))]

    reader.read_i32()  # capacity hint, not needed to parse
    ids = reader.read_string()
    if len(ids) % REVISION_ID_LENGTH:
        raise CacheReadError(
            CacheErrorKind.CORRUPT_DATA,
            f"revision buffer length {len(ids)} is not a multiple of {REVISION_ID_LENGTH}",
        )

    records: dict[str, FileStatusRecord] = {}
    offset = 0
    while not reader.at_end():
        record = _read_record(reader)
        if offset >= len(ids):
            raise CacheReadError(CacheErrorKind.CORRUPT_DATA, "more records than revision ids")
        records[ids[offset : offset + REVISION_ID_LENGTH]] = record
        offset += REVISION_ID_LENGTH

    if offset != len(ids):
        raise CacheReadError(
            CacheErrorKind.CORRUPT_DATA,
            f"{len(ids) // REVISION_ID_LENGTH} revision ids but {offset // REVISION_ID_LENGTH} records",
        )
    return CacheContainer(records=records, dirs=dirs, files=files)


def _read_header(reader: BinaryReader) -> None:
    try:
        magic = reader.read_u32()
        version = reader.read_i32()
    except CacheReadError as exc:
        raise CacheReadError(CacheErrorKind.FORMAT_MISMATCH, "stream too short for header") from exc
    if magic != CACHE_MAGIC:
        raise CacheReadError(CacheErrorKind.FORMAT_MISMATCH, f"bad magic 0x{magic:08X}")
    if version != CACHE_VERSION:
        raise CacheReadError(
            CacheErrorKind.FORMAT_MISMATCH,
            f"unsupported version {version}, expected {CACHE_VERSION}",
        )


def _read_pool_size(reader: BinaryReader) -> int:
    count = reader.read_i32()
    if count < 0:
        raise CacheReadError(CacheErrorKind.CORRUPT_DATA, f"negative pool size {count}")
    return count


def _read_record(reader: BinaryReader) -> FileStatusRecord:
    names = reader.read_int_array()
    dirs = reader.read_int_array()

    only_modified = reader.read_bool()
    status = () if only_modified else reader.read_int_array()

    merge_trivial = reader.read_bool()
    merge_parent = () if merge_trivial else reader.read_int_array()

    ext_empty = reader.read_bool()
    ext_status = () if ext_empty else reader.read_string_array()

    try:
        return FileStatusRecord(
            names=names,
            dirs=dirs,
            only_modified=only_modified,
            status=status,
            merge_parent=merge_parent,
            ext_status=ext_status,
        )
    except ValueError as exc:
        raise CacheReadError(CacheErrorKind.CORRUPT_DATA, str(exc)) from exc
