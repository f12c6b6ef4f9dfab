"""Reserved revision identifiers that never reach disk."""

from __future__ import annotations

from collections.abc import Mapping

from revcache.constants.cache import ALL_MERGE_FILES_PREFIX, SENTINEL_REVISIONS
from revcache.types import FileStatusRecord


def is_persistable(identifier: str) -> bool:
    """Return False for placeholder and synthetic merge-aggregate revisions."""
    if identifier in SENTINEL_REVISIONS:
        return False
    return not identifier.startswith(ALL_MERGE_FILES_PREFIX)


def persistable_items(records: Mapping[str, FileStatusRecord]) -> list[tuple[str, FileStatusRecord]]:
    """Filter ``records`` once, keeping map iteration order."""
    return [(identifier, record) for identifier, record in records.items() if is_persistable(identifier)]
