"""Typed cache container structures."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntFlag


class FileStatus(IntFlag):
    """Per-file change status bits."""

    MODIFIED = 1
    DELETED = 2
    NEW = 4
    RENAMED = 8
    COPIED = 16
    UNKNOWN = 32
    IN_INDEX = 64


def is_trivial_merge_parent(merge_parent: Sequence[int]) -> bool:
    """Return True for the single-parent case that is omitted on disk."""
    return not merge_parent or tuple(merge_parent) == (1,)


@dataclass(frozen=True)
class FileStatusRecord:
    """Files and directories touched by one revision.

    ``status`` is meaningful only when ``only_modified`` is false and
    ``merge_parent`` only when it is something other than empty or ``(1,)``.
    Both are normalised away otherwise so that a record compares
    equal to what a save/load cycle gives back.
    """

    names: tuple[int, ...] = ()
    dirs: tuple[int, ...] = ()
    only_modified: bool = True
    status: tuple[int, ...] = ()
    merge_parent: tuple[int, ...] = ()
    ext_status: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "dirs", tuple(self.dirs))
        object.__setattr__(self, "ext_status", tuple(self.ext_status))
        status = () if self.only_modified else tuple(int(code) for code in self.status)
        object.__setattr__(self, "status", status)
        merge_parent = tuple(self.merge_parent)
        if is_trivial_merge_parent(merge_parent):
            merge_parent = ()
        object.__setattr__(self, "merge_parent", merge_parent)
        if len(self.names) != len(self.dirs):
            raise ValueError(f"names and dirs differ in length: {len(self.names)} != {len(self.dirs)}")

    @classmethod
    def build(
        cls,
        names: Iterable[int],
        dirs: Iterable[int],
        status: Iterable[int],
        merge_parent: Iterable[int] = (),
        ext_status: Iterable[str] = (),
    ) -> FileStatusRecord:
        """Create a record, deriving ``only_modified`` from ``status``."""
        codes = tuple(int(code) for code in status)
        return cls(
            names=tuple(names),
            dirs=tuple(dirs),
            only_modified=all(code == FileStatus.MODIFIED for code in codes),
            status=codes,
            merge_parent=tuple(merge_parent),
            ext_status=tuple(ext_status),
        )

    @property
    def has_merge_parent(self) -> bool:
        return bool(self.merge_parent)

    @property
    def has_ext_status(self) -> bool:
        return bool(self.ext_status)

    def count(self) -> int:
        """Number of touched files."""
        return len(self.names)

    def status_of(self, index: int) -> FileStatus:
        """Status of the file at ``index``."""
        if self.only_modified:
            self._check_index(index)
            return FileStatus.MODIFIED
        return FileStatus(self.status[index])

    def parent_of(self, index: int) -> int:
        """Parent number (1-based) that introduced the file at ``index``."""
        if not self.merge_parent:
            self._check_index(index)
            return 1
        return self.merge_parent[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.names):
            raise IndexError(f"file index out of range: {index}")

    def ext_status_of(self, index: int) -> str:
        """Rename/copy description for the file at ``index``, empty when there is none."""
        if index < len(self.ext_status):
            return self.ext_status[index]
        return ""


@dataclass
class CacheContainer:
    """Revision map plus the shared directory and file-name pools."""

    records: dict[str, FileStatusRecord] = field(default_factory=dict)
    dirs: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.records

    def dir_path(self, record: FileStatusRecord, index: int) -> str:
        return self.dirs[record.dirs[index]]

    def file_name(self, record: FileStatusRecord, index: int) -> str:
        return self.files[record.names[index]]

    def path_of(self, record: FileStatusRecord, index: int) -> str:
        """Full repository-relative path of the file at ``index``."""
        directory = self.dir_path(record, index)
        name = self.file_name(record, index)
        if not directory:
            return name
        return f"{directory.rstrip('/')}/{name}"
