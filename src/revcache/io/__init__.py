"""Shared binary and file I/O helpers."""

from .binary import BinaryReader, BinaryWriter
from .files import remove_quietly, replace_file, temp_path_for, write_staged

__all__ = ["BinaryReader", "BinaryWriter", "remove_quietly", "replace_file", "temp_path_for", "write_staged"]
