"""Tests for cache loading, header gating, and corruption detection."""

from __future__ import annotations

import zlib
from pathlib import Path

import pytest

from revcache import CacheContainer, load, read_cache, save
from revcache.cache import decode_container
from revcache.config import CacheConfig
from revcache.constants.cache import CACHE_FILENAME, CACHE_MAGIC, CACHE_VERSION
from revcache.exceptions import CacheErrorKind, CacheReadError
from revcache.io import BinaryWriter

REV = "d" * 40


def _header(magic: int = CACHE_MAGIC, version: int = CACHE_VERSION) -> BinaryWriter:
    writer = BinaryWriter()
    writer.write_u32(magic)
    writer.write_i32(version)
    writer.write_i32(1)
    writer.write_string("src")
    writer.write_i32(1)
    writer.write_string("a.txt")
    return writer


def _write_record(writer: BinaryWriter) -> None:
    writer.write_int_array([0])
    writer.write_int_array([0])
    writer.write_bool(True)
    writer.write_bool(True)
    writer.write_bool(True)


def _store(tmp_path: Path, writer: BinaryWriter) -> None:
    (tmp_path / CACHE_FILENAME).write_bytes(zlib.compress(writer.getvalue()))


def test_missing_file_is_not_an_error(tmp_path: Path) -> None:
    for _ in range(2):
        loaded, ok = load(tmp_path)
        assert ok
        assert loaded == CacheContainer()


def test_reads_hand_built_stream(tmp_path: Path) -> None:
    writer = _header()
    writer.write_i32(1040)
    writer.write_string(REV)
    _write_record(writer)
    _store(tmp_path, writer)

    loaded, ok = load(tmp_path)

    assert ok
    assert loaded.dirs == ["src"]
    assert loaded.files == ["a.txt"]
    assert loaded.path_of(loaded.records[REV], 0) == "src/a.txt"


@pytest.mark.parametrize(
    ("magic", "version"),
    [(0xDEADBEEF, CACHE_VERSION), (CACHE_MAGIC, CACHE_VERSION + 1), (CACHE_MAGIC, CACHE_VERSION - 1)],
    ids=["bad_magic", "newer_version", "older_version"],
)
def test_header_gate(tmp_path: Path, magic: int, version: int) -> None:
    writer = _header(magic=magic, version=version)
    writer.write_i32(1040)
    writer.write_string(REV)
    _write_record(writer)
    _store(tmp_path, writer)

    loaded, ok = load(tmp_path)

    assert not ok
    assert loaded == CacheContainer()
    with pytest.raises(CacheReadError) as excinfo:
        read_cache(tmp_path)
    assert excinfo.value.kind is CacheErrorKind.FORMAT_MISMATCH


@pytest.mark.parametrize(
    "payload",
    [b"", b"not zlib at all", zlib.compress(b"\x00\x01")],
    ids=["empty", "uncompressed", "short_header"],
)
def test_unrecognised_payload(payload: bytes) -> None:
    with pytest.raises(CacheReadError) as excinfo:
        decode_container(payload)
    assert excinfo.value.kind is CacheErrorKind.FORMAT_MISMATCH


def test_unreadable_cache_path(tmp_path: Path) -> None:
    (tmp_path / CACHE_FILENAME).mkdir()

    loaded, ok = load(tmp_path)

    assert not ok
    assert loaded == CacheContainer()
    with pytest.raises(CacheReadError) as excinfo:
        read_cache(tmp_path)
    assert excinfo.value.kind is CacheErrorKind.OPEN_FAILURE


def test_more_records_than_ids() -> None:
    writer = _header()
    writer.write_i32(1040)
    writer.write_string(REV)
    _write_record(writer)
    _write_record(writer)

    with pytest.raises(CacheReadError, match="more records"):
        decode_container(zlib.compress(writer.getvalue()))


def test_fewer_records_than_ids() -> None:
    writer = _header()
    writer.write_i32(1080)
    writer.write_string(REV + "e" * 40)
    _write_record(writer)

    with pytest.raises(CacheReadError) as excinfo:
        decode_container(zlib.compress(writer.getvalue()))
    assert excinfo.value.kind is CacheErrorKind.CORRUPT_DATA


def test_id_buffer_not_multiple_of_width() -> None:
    writer = _header()
    writer.write_i32(1040)
    writer.write_string(REV[:-1])
    _write_record(writer)

    with pytest.raises(CacheReadError, match="multiple of 40"):
        decode_container(zlib.compress(writer.getvalue()))


def test_truncated_record(tmp_path: Path, container: CacheContainer) -> None:
    assert save(tmp_path, container)
    path = tmp_path / CACHE_FILENAME
    raw = zlib.decompress(path.read_bytes())
    path.write_bytes(zlib.compress(raw[:-3]))

    loaded, ok = load(tmp_path)

    assert not ok
    assert loaded == CacheContainer()
    with pytest.raises(CacheReadError) as excinfo:
        read_cache(tmp_path)
    assert excinfo.value.kind is CacheErrorKind.CORRUPT_DATA


def test_mismatched_names_and_dirs_is_corruption() -> None:
    writer = _header()
    writer.write_i32(1040)
    writer.write_string(REV)
    writer.write_int_array([0, 0])
    writer.write_int_array([0])
    writer.write_bool(True)
    writer.write_bool(True)
    writer.write_bool(True)

    with pytest.raises(CacheReadError) as excinfo:
        decode_container(zlib.compress(writer.getvalue()))
    assert excinfo.value.kind is CacheErrorKind.CORRUPT_DATA


def test_reads_configured_filename(tmp_path: Path, container: CacheContainer) -> None:
    config = CacheConfig(filename="other.dat")
    assert save(tmp_path, container, config=config)

    default_loaded, default_ok = load(tmp_path)
    loaded, ok = load(tmp_path, config=config)

    assert default_ok and default_loaded == CacheContainer()
    assert ok and loaded == container


@pytest.mark.parametrize("base_path", ["", Path("")], ids=["empty_str", "empty_path"])
def test_empty_base_path_is_rejected(
    tmp_path: Path, container: CacheContainer, monkeypatch: pytest.MonkeyPatch, base_path: str | Path
) -> None:
    assert save(tmp_path, container)
    monkeypatch.chdir(tmp_path)

    loaded, ok = load(base_path)

    assert not ok
    assert loaded == CacheContainer()
    with pytest.raises(CacheReadError) as excinfo:
        read_cache(base_path)
    assert excinfo.value.kind is CacheErrorKind.MISSING_DIRECTORY
