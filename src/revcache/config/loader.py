"""Config loading and normalization for the revision cache."""

from __future__ import annotations

import logging
from pathlib import Path

import jsonschema
import yaml

from revcache.config.model import CacheConfig
from revcache.constants.config import (
    CONFIG_FILENAME,
    CONFIG_SCHEMA,
    DEFAULT_COMPRESSION_LEVEL,
    DEFAULT_FILENAME,
    DEFAULT_TEMP_SUFFIX,
)
from revcache.exceptions import ConfigError

logger = logging.getLogger(__name__)

_VALIDATOR = jsonschema.Draft202012Validator(CONFIG_SCHEMA)


def load_config(root: Path, config_path: Path | None = None) -> CacheConfig:
    """Load and validate cache config from ``revcache.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CacheConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    errors = sorted(_VALIDATOR.iter_errors(raw), key=lambda error: list(error.absolute_path))
    if errors:
        error = errors[0]
        location = ".".join(str(part) for part in error.absolute_path) or "<root>"
        raise ConfigError(f"Invalid config at {path}: {location}: {error.message}")

    logger.debug("Loaded cache config from %s", path)
    return CacheConfig(
        filename=raw.get("filename", DEFAULT_FILENAME),
        temp_suffix=raw.get("temp_suffix", DEFAULT_TEMP_SUFFIX),
        compression_level=raw.get("compression_level", DEFAULT_COMPRESSION_LEVEL),
    )
