"""Shared pytest fixtures for cache containers."""

from __future__ import annotations

import pytest

from revcache.types import CacheContainer, FileStatus, FileStatusRecord

REV_A = "1" * 40
REV_B = "2" * 40
REV_C = "abcdef0123456789abcdef0123456789abcdef01"


@pytest.fixture
def simple_record() -> FileStatusRecord:
    """Return an only-modified, single-parent record with no renames."""
    return FileStatusRecord(names=(0, 1), dirs=(0, 0), only_modified=True)


@pytest.fixture
def rich_record() -> FileStatusRecord:
    """Return a record that carries every optional field."""
    return FileStatusRecord(
        names=(0, 1),
        dirs=(0, 1),
        only_modified=False,
        status=(FileStatus.NEW, FileStatus.RENAMED),
        merge_parent=(1, 2),
        ext_status=("", "src/old.txt --> lib/b.txt (92%)"),
    )


@pytest.fixture
def container(simple_record: FileStatusRecord, rich_record: FileStatusRecord) -> CacheContainer:
    """Return a container with two pooled directories and three revisions."""
    return CacheContainer(
        records={
            REV_A: simple_record,
            REV_B: rich_record,
            REV_C: FileStatusRecord.build(names=(2,), dirs=(1,), status=(FileStatus.DELETED,)),
        },
        dirs=["src", "lib"],
        files=["a.txt", "b.txt", "c.txt"],
    )
