"""Configuration defaults and filenames."""

from __future__ import annotations

from revcache.constants.cache import CACHE_FILENAME, CACHE_TEMP_SUFFIX, COMPRESSION_LEVEL

CONFIG_FILENAME: str = "revcache.yaml"

DEFAULT_FILENAME: str = CACHE_FILENAME
DEFAULT_TEMP_SUFFIX: str = CACHE_TEMP_SUFFIX
DEFAULT_COMPRESSION_LEVEL: int = COMPRESSION_LEVEL

CONFIG_SCHEMA: dict[str, object] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "filename": {"type": "string", "minLength": 1, "pattern": r"^[^/\\]+$"},
        "temp_suffix": {"type": "string", "minLength": 1, "pattern": r"^[^/\\]+$"},
        "compression_level": {"type": "integer", "minimum": 0, "maximum": 9},
    },
}
