"""Config data model for the revision cache."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from revcache.constants.config import DEFAULT_COMPRESSION_LEVEL, DEFAULT_FILENAME, DEFAULT_TEMP_SUFFIX
from revcache.io import temp_path_for


@dataclass(frozen=True)
class CacheConfig:
    """Resolved cache settings."""

    filename: str = DEFAULT_FILENAME
    temp_suffix: str = DEFAULT_TEMP_SUFFIX
    compression_level: int = DEFAULT_COMPRESSION_LEVEL

    def cache_path(self, base_path: Path) -> Path:
        """Final cache file location inside ``base_path``."""
        return base_path / self.filename

    def temp_path(self, base_path: Path) -> Path:
        """Staging file location inside ``base_path``."""
        return temp_path_for(self.cache_path(base_path), self.temp_suffix)
