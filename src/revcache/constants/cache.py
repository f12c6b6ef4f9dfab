"""Constants used by the revision cache container."""

from __future__ import annotations

CACHE_MAGIC: int = 0xA0B0C0D0
CACHE_VERSION: int = 15
CACHE_FILENAME: str = "cache.dat"
CACHE_TEMP_SUFFIX: str = ".tmp"

# zlib level; saving happens at shutdown so speed wins over ratio.
COMPRESSION_LEVEL: int = 1

REVISION_ID_LENGTH: int = 40
# Extra room reserved on top of the identifier buffer; advisory only.
ID_BUFFER_SLACK: int = 1000

ZERO_REVISION: str = "0" * REVISION_ID_LENGTH
CUSTOM_REVISION: str = "*** CUSTOM * CUSTOM * CUSTOM * CUSTOM **"
# Aggregate merge entries are keyed as this prefix followed by the merge revision.
ALL_MERGE_FILES_PREFIX: str = "A"

SENTINEL_REVISIONS: frozenset[str] = frozenset({ZERO_REVISION, CUSTOM_REVISION})
