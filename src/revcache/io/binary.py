"""Big-endian, length-prefixed stream primitives.

Every variable-length value uses the same framing: a signed 32-bit count
followed by the items. Strings are UTF-8 and their count is a byte length.
Undecodable path bytes carried as surrogate escapes are written back as the
original bytes.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable

from revcache.exceptions import CacheErrorKind, CacheReadError

_U32 = struct.Struct(">I")
_I32 = struct.Struct(">i")


class BinaryWriter:
    """Append-only encoder backed by a ``bytearray``."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def write_u32(self, value: int) -> None:
        self._buffer += _U32.pack(value)

    def write_i32(self, value: int) -> None:
        self._buffer += _I32.pack(value)

    def write_bool(self, value: bool) -> None:
        self.write_u32(1 if value else 0)

    def write_string(self, value: str) -> None:
        data = value.encode("utf-8", "surrogateescape")
        self.write_i32(len(data))
        self._buffer += data

    def write_int_array(self, values: Iterable[int]) -> None:
        items = tuple(values)
        self.write_i32(len(items))
        if items:
            self._buffer += struct.pack(f">{len(items)}i", *items)

    def write_string_array(self, values: Iterable[str]) -> None:
        items = tuple(values)
        self.write_i32(len(items))
        for item in items:
            self.write_string(item)


class BinaryReader:
    """Cursor over a decoded payload.

    Reads past the end raise ``CacheReadError`` with ``CORRUPT_DATA``
    instead of returning short values.
    """

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    def at_end(self) -> bool:
        return self._offset >= len(self._data)

    def _take(self, size: int) -> memoryview:
        end = self._offset + size
        if end > len(self._data):
            raise CacheReadError(
                CacheErrorKind.CORRUPT_DATA,
                f"truncated stream: need {size} bytes at offset {self._offset}, have {len(self._data) - self._offset}",
            )
        chunk = self._data[self._offset : end]
        self._offset = end
        return chunk

    def _read_count(self) -> int:
        count = self.read_i32()
        if count < 0:
            raise CacheReadError(CacheErrorKind.CORRUPT_DATA, f"negative length {count} at offset {self._offset - 4}")
        return count

    def read_u32(self) -> int:
        return _U32.unpack(self._take(_U32.size))[0]

    def read_i32(self) -> int:
        return _I32.unpack(self._take(_I32.size))[0]

    def read_bool(self) -> bool:
        return self.read_u32() != 0

    def read_string(self) -> str:
        size = self._read_count()
        return bytes(self._take(size)).decode("utf-8", "surrogateescape")

    def read_int_array(self) -> tuple[int, ...]:
        count = self._read_count()
        if not count:
            return ()
        return struct.unpack(f">{count}i", self._take(count * _I32.size))

    def read_string_array(self) -> tuple[str, ...]:
        count = self._read_count()
        return tuple(self.read_string() for _ in range(count))
