"""Root exception type."""

from __future__ import annotations


class RevcacheError(Exception):
    """Base class for all errors raised by Revcache."""
